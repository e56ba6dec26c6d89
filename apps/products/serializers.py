"""
Product serializers.
"""
from rest_framework import serializers
from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Product serializer."""
    class Meta:
        model = Product
        fields = [
            'id', 'name', 'sku', 'description', 'unit_price',
            'stocked_quantity', 'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = fields
