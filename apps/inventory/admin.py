"""
Inventory admin configuration.
"""
from django.contrib import admin

from apps.core.unit_of_work import UnitOfWork
from .models import Pallet, StockMovement
from .pallet_services import PalletService


@admin.register(Pallet)
class PalletAdmin(admin.ModelAdmin):
    list_display = ['name', 'product', 'quantity', 'max_capacity', 'status', 'position']
    list_filter = ['status']
    search_fields = ['name', 'product__name', 'product__sku']
    # Stock and slot effects are only applied through PalletService.
    readonly_fields = ['status', 'quantity', 'max_capacity', 'position', 'product', 'purchase_order']

    def has_add_permission(self, request):
        return False

    def delete_model(self, request, obj):
        PalletService.delete_pallet(obj.pk, user=request.user)

    def delete_queryset(self, request, queryset):
        with UnitOfWork(user=request.user) as uow:
            for pallet_id in list(queryset.order_by('pk').values_list('pk', flat=True)):
                PalletService.delete_pallet(pallet_id, uow=uow)
            uow.commit()


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = ['product', 'movement_type', 'quantity', 'balance', 'created_at']
    list_filter = ['movement_type', 'created_at']
    search_fields = ['product__name', 'product__sku']
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
