"""
Sales admin configuration.
"""
from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ['product', 'product_name', 'quantity']
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['order_number', 'customer', 'user_id', 'status', 'value', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['order_number', 'customer', 'user_id']
    ordering = ['-created_at']
    # Status changes go through OrderService so stock stays consistent.
    readonly_fields = ['status']
    inlines = [OrderItemInline]
