"""
Inventory serializers.
"""
from rest_framework import serializers
from .models import Pallet, StockMovement


class PalletSerializer(serializers.ModelSerializer):
    """Pallet serializer."""
    product_name = serializers.CharField(source='product.name', read_only=True)
    position_name = serializers.CharField(source='position.name', read_only=True, default=None)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Pallet
        fields = [
            'id', 'name', 'quantity', 'max_capacity',
            'status', 'status_display',
            'manufacturing_date', 'expiry_date', 'supplier_name',
            'product', 'product_name',
            'position', 'position_name',
            'purchase_order',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class PalletWriteSerializer(serializers.Serializer):
    """
    Pallet create/update request serializer.
    Referenced ids are resolved by the service so unknown ones surface as
    NotFoundError rather than field errors.
    """
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    quantity = serializers.IntegerField(min_value=0)
    max_capacity = serializers.IntegerField(min_value=0)
    status = serializers.ChoiceField(choices=Pallet.STATUS_CHOICES, required=False)
    manufacturing_date = serializers.DateField(required=False, allow_null=True)
    expiry_date = serializers.DateField(required=False, allow_null=True)
    supplier_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    product = serializers.IntegerField()
    position = serializers.IntegerField(required=False, allow_null=True)

    def validate(self, attrs):
        expiry_date = attrs.get('expiry_date')
        manufacturing_date = attrs.get('manufacturing_date')
        if expiry_date and manufacturing_date and expiry_date < manufacturing_date:
            raise serializers.ValidationError({'expiry_date': '有效日期不可早於製造日期'})
        return attrs


class ReceivePalletSerializer(serializers.Serializer):
    """Put-away request serializer."""
    position = serializers.IntegerField()


class StockMovementSerializer(serializers.ModelSerializer):
    """StockMovement serializer."""
    product_name = serializers.CharField(source='product.name', read_only=True)
    type_display = serializers.CharField(source='get_movement_type_display', read_only=True)

    class Meta:
        model = StockMovement
        fields = [
            'id', 'product', 'product_name',
            'movement_type', 'type_display',
            'quantity', 'balance',
            'reference_type', 'reference_id', 'note',
            'created_by', 'created_at'
        ]
