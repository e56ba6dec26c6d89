"""
Inventory models: Pallet, StockMovement.
"""
from django.db import models
from apps.core.models import BaseModel


class Pallet(BaseModel):
    """
    Physical unit of inventory.

    A STORED pallet occupies exactly one position and contributes its quantity
    to the product's stock. UNSTORED and READY_TO_SHIP (inbound, attached to a
    purchase order) pallets do neither.
    """
    STATUS_CHOICES = [
        ('UNSTORED', '未上架'),
        ('STORED', '已上架'),
        ('READY_TO_SHIP', '待出貨'),
    ]

    name = models.CharField(max_length=100, verbose_name='棧板名稱')
    quantity = models.IntegerField(default=0, verbose_name='數量')
    max_capacity = models.IntegerField(verbose_name='最大容量')
    status = models.CharField(
        max_length=15,
        choices=STATUS_CHOICES,
        default='UNSTORED',
        verbose_name='狀態'
    )
    manufacturing_date = models.DateField(null=True, blank=True, verbose_name='製造日期')
    expiry_date = models.DateField(null=True, blank=True, verbose_name='有效日期')
    supplier_name = models.CharField(max_length=100, blank=True, verbose_name='供應商')
    position = models.OneToOneField(
        'warehouse.Position',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='pallet',
        verbose_name='儲位'
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.PROTECT,
        related_name='pallets',
        verbose_name='商品'
    )
    purchase_order = models.ForeignKey(
        'purchasing.PurchaseOrder',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='pallets',
        verbose_name='採購單'
    )

    class Meta:
        db_table = 'pallets'
        verbose_name = '棧板'
        verbose_name_plural = '棧板'
        ordering = ['id']
        indexes = [
            models.Index(fields=['product', 'status'], name='pallet_product_status_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0, quantity__lte=models.F('max_capacity')),
                name='pallet_quantity_within_capacity',
            ),
            models.CheckConstraint(
                condition=~models.Q(status='STORED') | models.Q(position__isnull=False),
                name='pallet_stored_requires_position',
            ),
        ]

    def __str__(self):
        return f'{self.name} ({self.product.name} x {self.quantity})'

    @property
    def is_stored(self):
        return self.status == 'STORED'


class StockMovement(BaseModel):
    """Append-only record of every delta applied by the stock ledger."""
    TYPE_CHOICES = [
        ('PALLET_STORED', '棧板上架'),
        ('PALLET_UNSTORED', '棧板下架'),
        ('PALLET_ADJUSTED', '棧板數量調整'),
        ('PALLET_DELETED', '棧板刪除'),
        ('ORDER_RESERVED', '訂單扣庫存'),
        ('ORDER_RESTORED', '訂單回補庫存'),
    ]

    product = models.ForeignKey(
        'products.Product',
        on_delete=models.CASCADE,
        related_name='stock_movements',
        verbose_name='商品'
    )
    movement_type = models.CharField(
        max_length=20,
        choices=TYPE_CHOICES,
        verbose_name='異動類型'
    )
    quantity = models.IntegerField(verbose_name='異動數量')
    balance = models.IntegerField(verbose_name='異動後餘額')
    reference_type = models.CharField(
        max_length=50,
        blank=True,
        verbose_name='來源類型'
    )
    reference_id = models.BigIntegerField(null=True, blank=True, verbose_name='來源ID')
    note = models.TextField(blank=True, verbose_name='備註')

    class Meta:
        db_table = 'stock_movements'
        verbose_name = '庫存異動'
        verbose_name_plural = '庫存異動'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['product', 'created_at'], name='movement_product_created_idx'),
            models.Index(fields=['reference_type', 'reference_id'], name='movement_reference_idx'),
        ]

    def __str__(self):
        return f'{self.product.name}: {self.quantity:+d}'
