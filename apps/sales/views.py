"""
Sales views.
"""
from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.views import BaseViewSet
from apps.core.mixins import MultiSerializerMixin, StandardResponseMixin
from .models import Order
from .serializers import (
    OrderListSerializer,
    OrderDetailSerializer,
    OrderWriteSerializer,
)
from .services import OrderService


class OrderViewSet(
    MultiSerializerMixin,
    StandardResponseMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseViewSet
):
    """
    Order ViewSet.
    Create, update and cancel go through OrderService so stock is reserved
    and restored with the order lines.
    """
    queryset = Order.objects.prefetch_related('items').all()
    serializer_class = OrderListSerializer
    serializer_classes = {
        'list': OrderListSerializer,
        'retrieve': OrderDetailSerializer,
    }
    filterset_fields = ['status', 'user_id', 'customer']
    search_fields = ['order_number', 'customer']
    ordering_fields = ['created_at', 'order_date', 'value']

    def create(self, request, *args, **kwargs):
        serializer = OrderWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderService.create_order(serializer.validated_data, user=request.user)
        return Response(OrderDetailSerializer(order).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = OrderWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        order = OrderService.update_order(
            self.kwargs['pk'],
            serializer.validated_data,
            user=request.user
        )
        return Response(OrderDetailSerializer(order).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        """Cancel a pending order and restore its stock."""
        order = OrderService.cancel_order(pk, user=request.user)
        return self.success_response(
            message='訂單已取消',
            data=OrderDetailSerializer(order).data
        )
