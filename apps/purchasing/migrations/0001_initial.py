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
            name='PurchaseOrder',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='建立時間')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='更新時間')),
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('po_number', models.CharField(max_length=30, unique=True, verbose_name='採購單號')),
                ('supplier_name', models.CharField(max_length=100, verbose_name='供應商')),
                ('expected_arrival_time', models.DateTimeField(blank=True, null=True, verbose_name='預計到貨時間')),
                ('total_price', models.DecimalField(decimal_places=2, default=0, max_digits=12, verbose_name='總金額')),
                ('status', models.CharField(choices=[('PENDING', '待處理'), ('PROCESSING', '處理中'), ('READY_TO_SHIP', '待出貨'), ('SHIPPING', '運送中')], default='PENDING', max_length=15, verbose_name='狀態')),
                ('note', models.TextField(blank=True, verbose_name='備註')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_created', to=settings.AUTH_USER_MODEL, verbose_name='建立者')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_updated', to=settings.AUTH_USER_MODEL, verbose_name='更新者')),
            ],
            options={
                'verbose_name': '採購單',
                'verbose_name_plural': '採購單',
                'db_table': 'purchase_orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='purchase_order_status_idx'),
                    models.Index(fields=['supplier_name'], name='purchase_order_supplier_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PurchaseOrderItem',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='建立時間')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='更新時間')),
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('quantity', models.PositiveIntegerField(verbose_name='數量')),
                ('expected_pallets', models.PositiveIntegerField(default=0, verbose_name='預計棧板數')),
                ('unit_price', models.DecimalField(decimal_places=2, max_digits=10, verbose_name='單價')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_created', to=settings.AUTH_USER_MODEL, verbose_name='建立者')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_updated', to=settings.AUTH_USER_MODEL, verbose_name='更新者')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='purchase_order_items', to='products.product', verbose_name='商品')),
                ('purchase_order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='purchasing.purchaseorder', verbose_name='採購單')),
            ],
            options={
                'verbose_name': '採購單明細',
                'verbose_name_plural': '採購單明細',
                'db_table': 'purchase_order_items',
                'ordering': ['id'],
            },
        ),
    ]
