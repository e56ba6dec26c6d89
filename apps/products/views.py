"""
Product views.
"""
from apps.core.views import ReadOnlyViewSet
from .models import Product
from .serializers import ProductSerializer


class ProductViewSet(ReadOnlyViewSet):
    """
    Product catalog lookup.
    Stock is read here but only changed through pallet and order commands.
    """
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    search_fields = ['name', 'sku']
    filterset_fields = ['is_active']
    ordering_fields = ['name', 'sku', 'stocked_quantity', 'created_at']
