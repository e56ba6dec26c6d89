"""
Tests for product models.
"""
import pytest
from django.db import IntegrityError, transaction

from apps.products.models import Product


@pytest.mark.django_db
class TestProduct:
    """Tests for Product model."""

    def test_str(self, create_product):
        product = create_product(name='螺絲', sku='SCREW-01')
        assert str(product) == '螺絲 (SCREW-01)'

    def test_defaults(self, product):
        assert product.stocked_quantity == 0
        assert product.is_active

    def test_negative_stock_rejected_by_database(self, product):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Product.objects.filter(pk=product.pk).update(stocked_quantity=-1)

    def test_sku_unique(self, create_product):
        create_product(sku='DUP-01')
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                create_product(sku='DUP-01')
