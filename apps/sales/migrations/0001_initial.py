import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='建立時間')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='更新時間')),
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('order_number', models.CharField(max_length=30, unique=True, verbose_name='訂單編號')),
                ('customer', models.CharField(blank=True, max_length=100, verbose_name='客戶')),
                ('user_id', models.CharField(blank=True, db_index=True, max_length=50, verbose_name='使用者ID')),
                ('order_date', models.DateField(blank=True, null=True, verbose_name='訂單日期')),
                ('status', models.CharField(choices=[('PENDING', '待處理'), ('PROCESSING', '處理中'), ('SHIPPED', '已出貨'), ('DELIVERED', '已送達'), ('CANCELED', '已取消')], default='PENDING', max_length=15, verbose_name='狀態')),
                ('shipment', models.CharField(blank=True, max_length=100, verbose_name='出貨資訊')),
                ('value', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, verbose_name='訂單金額')),
                ('shipping_address', models.CharField(blank=True, max_length=255, verbose_name='收件地址')),
                ('shipping_city', models.CharField(blank=True, max_length=100, verbose_name='城市')),
                ('shipping_state', models.CharField(blank=True, max_length=100, verbose_name='州/省')),
                ('shipping_zip_code', models.CharField(blank=True, max_length=20, verbose_name='郵遞區號')),
                ('payment_method', models.CharField(blank=True, choices=[('', '未指定'), ('CASH', '現金'), ('CREDIT_CARD', '信用卡'), ('BANK_TRANSFER', '銀行轉帳'), ('OTHER', '其他')], max_length=20, verbose_name='付款方式')),
                ('payment_last4', models.CharField(blank=True, max_length=4, verbose_name='卡號末四碼')),
                ('note', models.TextField(blank=True, verbose_name='備註')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_created', to=settings.AUTH_USER_MODEL, verbose_name='建立者')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_updated', to=settings.AUTH_USER_MODEL, verbose_name='更新者')),
            ],
            options={
                'verbose_name': '訂單',
                'verbose_name_plural': '訂單',
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['status'], name='order_status_idx')],
            },
        ),
        migrations.CreateModel(
            name='OrderItem',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='建立時間')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='更新時間')),
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('product_name', models.CharField(blank=True, max_length=200, verbose_name='商品名稱')),
                ('quantity', models.PositiveIntegerField(verbose_name='數量')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_created', to=settings.AUTH_USER_MODEL, verbose_name='建立者')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_updated', to=settings.AUTH_USER_MODEL, verbose_name='更新者')),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='sales.order', verbose_name='訂單')),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='order_items', to='products.product', verbose_name='商品')),
            ],
            options={
                'verbose_name': '訂單明細',
                'verbose_name_plural': '訂單明細',
                'db_table': 'order_items',
                'ordering': ['id'],
            },
        ),
    ]
