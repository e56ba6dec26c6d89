"""
Purchasing models: PurchaseOrder, PurchaseOrderItem.
"""
from decimal import Decimal

from django.db import models

from apps.core.models import BaseModel


class PurchaseOrder(BaseModel):
    """
    Inbound purchase order.
    Status moves forward one step at a time:
    PENDING -> PROCESSING -> READY_TO_SHIP -> SHIPPING.
    """
    STATUS_CHOICES = [
        ('PENDING', '待處理'),
        ('PROCESSING', '處理中'),
        ('READY_TO_SHIP', '待出貨'),
        ('SHIPPING', '運送中'),
    ]

    po_number = models.CharField(
        max_length=30,
        unique=True,
        verbose_name='採購單號'
    )
    supplier_name = models.CharField(max_length=100, verbose_name='供應商')
    expected_arrival_time = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='預計到貨時間'
    )
    total_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        verbose_name='總金額'
    )
    status = models.CharField(
        max_length=15,
        choices=STATUS_CHOICES,
        default='PENDING',
        verbose_name='狀態'
    )
    note = models.TextField(blank=True, verbose_name='備註')

    class Meta:
        db_table = 'purchase_orders'
        verbose_name = '採購單'
        verbose_name_plural = '採購單'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='purchase_order_status_idx'),
            models.Index(fields=['supplier_name'], name='purchase_order_supplier_idx'),
        ]

    def __str__(self):
        return f'{self.po_number} - {self.supplier_name}'

    def calculate_total(self):
        """Total of line quantities times their snapshotted unit price."""
        return sum((item.quantity * item.unit_price for item in self.items.all()), Decimal('0'))


class PurchaseOrderItem(BaseModel):
    """Purchase order line item."""
    purchase_order = models.ForeignKey(
        PurchaseOrder,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='採購單'
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.PROTECT,
        related_name='purchase_order_items',
        verbose_name='商品'
    )
    quantity = models.PositiveIntegerField(verbose_name='數量')
    expected_pallets = models.PositiveIntegerField(default=0, verbose_name='預計棧板數')
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        verbose_name='單價'
    )

    class Meta:
        db_table = 'purchase_order_items'
        verbose_name = '採購單明細'
        verbose_name_plural = '採購單明細'
        ordering = ['id']

    def __str__(self):
        return f'{self.product.name} x {self.quantity}'
