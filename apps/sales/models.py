"""
Sales models: Order, OrderItem.
"""
from django.db import models
from apps.core.models import BaseModel


class Order(BaseModel):
    """Outbound customer order."""
    STATUS_CHOICES = [
        ('PENDING', '待處理'),
        ('PROCESSING', '處理中'),
        ('SHIPPED', '已出貨'),
        ('DELIVERED', '已送達'),
        ('CANCELED', '已取消'),
    ]

    PAYMENT_METHOD_CHOICES = [
        ('', '未指定'),
        ('CASH', '現金'),
        ('CREDIT_CARD', '信用卡'),
        ('BANK_TRANSFER', '銀行轉帳'),
        ('OTHER', '其他'),
    ]

    order_number = models.CharField(
        max_length=30,
        unique=True,
        verbose_name='訂單編號'
    )
    customer = models.CharField(max_length=100, blank=True, verbose_name='客戶')
    user_id = models.CharField(max_length=50, blank=True, db_index=True, verbose_name='使用者ID')
    order_date = models.DateField(null=True, blank=True, verbose_name='訂單日期')
    status = models.CharField(
        max_length=15,
        choices=STATUS_CHOICES,
        default='PENDING',
        verbose_name='狀態'
    )
    shipment = models.CharField(max_length=100, blank=True, verbose_name='出貨資訊')
    value = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='訂單金額'
    )

    # Shipping address
    shipping_address = models.CharField(max_length=255, blank=True, verbose_name='收件地址')
    shipping_city = models.CharField(max_length=100, blank=True, verbose_name='城市')
    shipping_state = models.CharField(max_length=100, blank=True, verbose_name='州/省')
    shipping_zip_code = models.CharField(max_length=20, blank=True, verbose_name='郵遞區號')

    # Payment
    payment_method = models.CharField(
        max_length=20,
        choices=PAYMENT_METHOD_CHOICES,
        blank=True,
        verbose_name='付款方式'
    )
    payment_last4 = models.CharField(max_length=4, blank=True, verbose_name='卡號末四碼')

    note = models.TextField(blank=True, verbose_name='備註')

    class Meta:
        db_table = 'orders'
        verbose_name = '訂單'
        verbose_name_plural = '訂單'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='order_status_idx'),
        ]

    def __str__(self):
        return self.order_number

    @property
    def item_count(self):
        return sum(item.quantity for item in self.items.all())


class OrderItem(BaseModel):
    """Order line item."""
    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='訂單'
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='order_items',
        verbose_name='商品'
    )
    product_name = models.CharField(max_length=200, blank=True, verbose_name='商品名稱')
    quantity = models.PositiveIntegerField(verbose_name='數量')

    class Meta:
        db_table = 'order_items'
        verbose_name = '訂單明細'
        verbose_name_plural = '訂單明細'
        ordering = ['id']

    def __str__(self):
        return f'{self.product_name} x {self.quantity}'
