"""
Product catalog models.
"""
from django.db import models
from apps.core.models import BaseModel


class Product(BaseModel):
    """
    Product model.

    stocked_quantity is owned by the stock ledger: pallet storage and order
    reservations move it, nothing else writes it.
    """
    name = models.CharField(max_length=200, verbose_name='商品名稱')
    sku = models.CharField(max_length=50, unique=True, verbose_name='SKU')
    description = models.TextField(blank=True, verbose_name='商品描述')
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        verbose_name='單價'
    )
    stocked_quantity = models.IntegerField(default=0, verbose_name='庫存數量')
    is_active = models.BooleanField(default=True, verbose_name='啟用')

    class Meta:
        db_table = 'products'
        verbose_name = '商品'
        verbose_name_plural = '商品'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['sku'], name='product_sku_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(stocked_quantity__gte=0),
                name='product_stocked_quantity_non_negative',
            ),
        ]

    def __str__(self):
        return f'{self.name} ({self.sku})'
