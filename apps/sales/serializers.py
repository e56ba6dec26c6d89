"""
Sales serializers.
"""
from rest_framework import serializers
from .models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    """OrderItem serializer."""
    product_sku = serializers.CharField(source='product.sku', read_only=True, default='')

    class Meta:
        model = OrderItem
        fields = ['id', 'product', 'product_name', 'product_sku', 'quantity']


class OrderListSerializer(serializers.ModelSerializer):
    """Order list serializer."""
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    item_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'customer', 'user_id', 'order_date',
            'status', 'status_display', 'value',
            'item_count', 'created_at'
        ]


class OrderDetailSerializer(serializers.ModelSerializer):
    """Order detail serializer."""
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'customer', 'user_id', 'order_date',
            'status', 'status_display', 'shipment', 'value',
            'shipping_address', 'shipping_city', 'shipping_state', 'shipping_zip_code',
            'payment_method', 'payment_last4', 'note',
            'item_count', 'items',
            'created_by', 'created_at', 'updated_at'
        ]


class OrderLineSerializer(serializers.Serializer):
    """Order line request serializer."""
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1)


class OrderWriteSerializer(serializers.Serializer):
    """Order create/update request serializer."""
    customer = serializers.CharField(max_length=100, required=False, allow_blank=True)
    user_id = serializers.CharField(max_length=50, required=False, allow_blank=True)
    order_date = serializers.DateField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES, required=False)
    shipment = serializers.CharField(max_length=100, required=False, allow_blank=True)
    value = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True
    )
    shipping_address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    shipping_city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    shipping_state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    shipping_zip_code = serializers.CharField(max_length=20, required=False, allow_blank=True)
    payment_method = serializers.ChoiceField(
        choices=Order.PAYMENT_METHOD_CHOICES, required=False, allow_blank=True
    )
    payment_last4 = serializers.RegexField(
        r'^\d{4}$', required=False, allow_blank=True,
        error_messages={'invalid': '卡號末四碼必須為 4 位數字'}
    )
    note = serializers.CharField(max_length=500, required=False, allow_blank=True)
    items = OrderLineSerializer(many=True, required=False)
