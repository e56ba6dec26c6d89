"""
Product admin configuration.
"""
from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'sku', 'unit_price', 'stocked_quantity', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name', 'sku']
    readonly_fields = ['stocked_quantity']
