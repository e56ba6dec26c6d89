"""
API v1 URL Configuration.
"""
from django.urls import path, include

urlpatterns = [
    # Products
    path('', include('apps.products.urls')),

    # Positions
    path('', include('apps.warehouse.urls')),

    # Pallets & Stock movements
    path('', include('apps.inventory.urls')),

    # Orders
    path('', include('apps.sales.urls')),

    # Purchase orders
    path('', include('apps.purchasing.urls')),
]
