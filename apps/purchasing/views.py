"""
Purchasing views.
"""
from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.views import BaseViewSet
from apps.core.mixins import MultiSerializerMixin, StandardResponseMixin
from .models import PurchaseOrder
from .serializers import (
    AttachPalletSerializer,
    PurchaseOrderCreateSerializer,
    PurchaseOrderDetailSerializer,
    PurchaseOrderListSerializer,
    StatusSerializer,
)
from .services import PurchaseOrderService


class PurchaseOrderViewSet(
    MultiSerializerMixin,
    StandardResponseMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseViewSet
):
    """PurchaseOrder management ViewSet."""
    queryset = PurchaseOrder.objects.prefetch_related('items__product', 'pallets').all()
    serializer_class = PurchaseOrderListSerializer
    serializer_classes = {
        'list': PurchaseOrderListSerializer,
        'retrieve': PurchaseOrderDetailSerializer,
    }
    filterset_fields = ['status', 'supplier_name']
    search_fields = ['po_number', 'supplier_name']
    ordering_fields = ['created_at', 'total_price', 'expected_arrival_time']

    def create(self, request, *args, **kwargs):
        serializer = PurchaseOrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        po = PurchaseOrderService.create_purchase_order(
            serializer.validated_data,
            user=request.user
        )
        return Response(
            PurchaseOrderDetailSerializer(po).data,
            status=status.HTTP_201_CREATED
        )

    @action(detail=True, methods=['post'], url_path='status')
    def change_status(self, request, pk=None):
        """Advance the purchase order to its next status."""
        serializer = StatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        po = PurchaseOrderService.advance_status(
            pk,
            serializer.validated_data['status'],
            user=request.user
        )
        return self.success_response(
            message='採購單狀態已更新',
            data=PurchaseOrderDetailSerializer(po).data
        )

    @action(detail=True, methods=['post'])
    def pallets(self, request, pk=None):
        """Register an inbound pallet on the purchase order."""
        serializer = AttachPalletSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        po = PurchaseOrderService.attach_pallet(
            pk,
            serializer.validated_data,
            user=request.user
        )
        return self.created_response(
            data=PurchaseOrderDetailSerializer(po).data,
            message='棧板已加入採購單'
        )
