"""
Warehouse serializers.
"""
from rest_framework import serializers
from .models import Position


class PositionSerializer(serializers.ModelSerializer):
    """Position serializer."""
    pallet = serializers.SerializerMethodField()

    class Meta:
        model = Position
        fields = ['id', 'name', 'level', 'is_occupied', 'pallet', 'created_at', 'updated_at']
        read_only_fields = fields

    def get_pallet(self, obj):
        pallet = getattr(obj, 'pallet', None)
        return pallet.pk if pallet is not None else None
