"""
Inventory views.
"""
from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.views import BaseViewSet, ReadOnlyViewSet
from apps.core.mixins import StandardResponseMixin
from .models import Pallet, StockMovement
from .pallet_services import PalletService
from .serializers import (
    PalletSerializer,
    PalletWriteSerializer,
    ReceivePalletSerializer,
    StockMovementSerializer,
)


class PalletViewSet(
    StandardResponseMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseViewSet
):
    """
    Pallet ViewSet.
    Writes go through PalletService so stock and slots stay consistent.
    """
    queryset = Pallet.objects.select_related('product', 'position').all()
    serializer_class = PalletSerializer
    filterset_fields = ['product', 'status', 'purchase_order', 'position']
    search_fields = ['name', 'product__name', 'supplier_name']
    ordering_fields = ['created_at', 'quantity']

    def create(self, request, *args, **kwargs):
        serializer = PalletWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        pallet = PalletService.create_pallet(serializer.validated_data, user=request.user)
        return Response(PalletSerializer(pallet).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = PalletWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        pallet = PalletService.update_pallet(
            self.kwargs['pk'],
            serializer.validated_data,
            user=request.user
        )
        return Response(PalletSerializer(pallet).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        PalletService.delete_pallet(self.kwargs['pk'], user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['post'])
    def receive(self, request, pk=None):
        """Put an inbound pallet away into a position."""
        serializer = ReceivePalletSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        pallet = PalletService.receive_pallet(
            pk,
            serializer.validated_data['position'],
            user=request.user
        )
        return self.success_response(
            message='棧板已上架',
            data=PalletSerializer(pallet).data
        )


class StockMovementViewSet(ReadOnlyViewSet):
    """Stock movement log ViewSet."""
    queryset = StockMovement.objects.select_related('product').all()
    serializer_class = StockMovementSerializer
    filterset_fields = ['product', 'movement_type', 'reference_type', 'reference_id']
    ordering_fields = ['created_at']
