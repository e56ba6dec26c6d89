import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
        ('purchasing', '0001_initial'),
        ('warehouse', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Pallet',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='建立時間')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='更新時間')),
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100, verbose_name='棧板名稱')),
                ('quantity', models.IntegerField(default=0, verbose_name='數量')),
                ('max_capacity', models.IntegerField(verbose_name='最大容量')),
                ('status', models.CharField(choices=[('UNSTORED', '未上架'), ('STORED', '已上架'), ('READY_TO_SHIP', '待出貨')], default='UNSTORED', max_length=15, verbose_name='狀態')),
                ('manufacturing_date', models.DateField(blank=True, null=True, verbose_name='製造日期')),
                ('expiry_date', models.DateField(blank=True, null=True, verbose_name='有效日期')),
                ('supplier_name', models.CharField(blank=True, max_length=100, verbose_name='供應商')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_created', to=settings.AUTH_USER_MODEL, verbose_name='建立者')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_updated', to=settings.AUTH_USER_MODEL, verbose_name='更新者')),
                ('position', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='pallet', to='warehouse.position', verbose_name='儲位')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='pallets', to='products.product', verbose_name='商品')),
                ('purchase_order', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='pallets', to='purchasing.purchaseorder', verbose_name='採購單')),
            ],
            options={
                'verbose_name': '棧板',
                'verbose_name_plural': '棧板',
                'db_table': 'pallets',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['product', 'status'], name='pallet_product_status_idx')],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('quantity__gte', 0), ('quantity__lte', models.F('max_capacity'))), name='pallet_quantity_within_capacity'),
                    models.CheckConstraint(condition=models.Q(models.Q(('status', 'STORED'), _negated=True), ('position__isnull', False), _connector='OR'), name='pallet_stored_requires_position'),
                ],
            },
        ),
        migrations.CreateModel(
            name='StockMovement',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='建立時間')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='更新時間')),
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('movement_type', models.CharField(choices=[('PALLET_STORED', '棧板上架'), ('PALLET_UNSTORED', '棧板下架'), ('PALLET_ADJUSTED', '棧板數量調整'), ('PALLET_DELETED', '棧板刪除'), ('ORDER_RESERVED', '訂單扣庫存'), ('ORDER_RESTORED', '訂單回補庫存')], max_length=20, verbose_name='異動類型')),
                ('quantity', models.IntegerField(verbose_name='異動數量')),
                ('balance', models.IntegerField(verbose_name='異動後餘額')),
                ('reference_type', models.CharField(blank=True, max_length=50, verbose_name='來源類型')),
                ('reference_id', models.BigIntegerField(blank=True, null=True, verbose_name='來源ID')),
                ('note', models.TextField(blank=True, verbose_name='備註')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_created', to=settings.AUTH_USER_MODEL, verbose_name='建立者')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(class)s_updated', to=settings.AUTH_USER_MODEL, verbose_name='更新者')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='stock_movements', to='products.product', verbose_name='商品')),
            ],
            options={
                'verbose_name': '庫存異動',
                'verbose_name_plural': '庫存異動',
                'db_table': 'stock_movements',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['product', 'created_at'], name='movement_product_created_idx'),
                    models.Index(fields=['reference_type', 'reference_id'], name='movement_reference_idx'),
                ],
            },
        ),
    ]
