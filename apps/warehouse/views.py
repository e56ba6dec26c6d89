"""
Warehouse views.
"""
from rest_framework.decorators import action

from apps.core.views import ReadOnlyViewSet
from apps.core.mixins import StandardResponseMixin
from .models import Position
from .serializers import PositionSerializer


class PositionViewSet(StandardResponseMixin, ReadOnlyViewSet):
    """Position lookup ViewSet."""
    queryset = Position.objects.select_related('pallet').all()
    serializer_class = PositionSerializer
    filterset_fields = ['is_occupied', 'level']
    search_fields = ['name']
    ordering_fields = ['name', 'level']

    @action(detail=False, methods=['get'])
    def available(self, request):
        """List free positions."""
        queryset = self.filter_queryset(self.get_queryset()).filter(is_occupied=False)
        serializer = self.get_serializer(queryset, many=True)
        return self.success_response(data=serializer.data)
