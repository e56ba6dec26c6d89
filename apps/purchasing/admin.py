"""
Purchasing admin configuration.
"""
from django.contrib import admin
from .models import PurchaseOrder, PurchaseOrderItem


class PurchaseOrderItemInline(admin.TabularInline):
    model = PurchaseOrderItem
    extra = 0
    readonly_fields = ['unit_price']


@admin.register(PurchaseOrder)
class PurchaseOrderAdmin(admin.ModelAdmin):
    list_display = ['po_number', 'supplier_name', 'total_price', 'status', 'expected_arrival_time', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['po_number', 'supplier_name']
    ordering = ['-created_at']
    readonly_fields = ['status']
    inlines = [PurchaseOrderItemInline]
