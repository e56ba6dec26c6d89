"""
Purchasing serializers.
"""
from rest_framework import serializers

from apps.inventory.serializers import PalletSerializer
from .models import PurchaseOrder, PurchaseOrderItem


class PurchaseOrderItemSerializer(serializers.ModelSerializer):
    """PurchaseOrderItem serializer."""
    product_name = serializers.CharField(source='product.name', read_only=True)
    product_sku = serializers.CharField(source='product.sku', read_only=True)

    class Meta:
        model = PurchaseOrderItem
        fields = [
            'id', 'product', 'product_name', 'product_sku',
            'quantity', 'expected_pallets', 'unit_price'
        ]


class PurchaseOrderListSerializer(serializers.ModelSerializer):
    """PurchaseOrder list serializer."""
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    item_count = serializers.SerializerMethodField()

    class Meta:
        model = PurchaseOrder
        fields = [
            'id', 'po_number', 'supplier_name',
            'status', 'status_display', 'total_price',
            'expected_arrival_time', 'item_count', 'created_at'
        ]

    def get_item_count(self, obj):
        return obj.items.count()


class PurchaseOrderDetailSerializer(serializers.ModelSerializer):
    """PurchaseOrder detail serializer."""
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    items = PurchaseOrderItemSerializer(many=True, read_only=True)
    pallets = PalletSerializer(many=True, read_only=True)

    class Meta:
        model = PurchaseOrder
        fields = [
            'id', 'po_number', 'supplier_name',
            'status', 'status_display', 'total_price',
            'expected_arrival_time', 'note',
            'items', 'pallets',
            'created_by', 'created_at', 'updated_at'
        ]


class PurchaseOrderLineSerializer(serializers.Serializer):
    """Purchase order line request serializer."""
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1)
    expected_pallets = serializers.IntegerField(min_value=0, default=0)


class PurchaseOrderCreateSerializer(serializers.Serializer):
    """PurchaseOrder create serializer."""
    supplier_name = serializers.CharField(max_length=100)
    expected_arrival_time = serializers.DateTimeField(required=False, allow_null=True)
    total_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    note = serializers.CharField(max_length=500, required=False, allow_blank=True)
    items = PurchaseOrderLineSerializer(many=True, required=False)


class StatusSerializer(serializers.Serializer):
    """Purchase order status change serializer."""
    status = serializers.ChoiceField(choices=PurchaseOrder.STATUS_CHOICES)


class AttachPalletSerializer(serializers.Serializer):
    """Inbound pallet registration serializer."""
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    product = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=0)
    max_capacity = serializers.IntegerField(min_value=0)
    manufacturing_date = serializers.DateField(required=False, allow_null=True)
    expiry_date = serializers.DateField(required=False, allow_null=True)
