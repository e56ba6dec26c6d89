"""
Pytest configuration and shared fixtures.
"""
from decimal import Decimal

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """Return an API client instance."""
    return APIClient()


@pytest.fixture
def create_user(db):
    """Factory fixture to create users."""
    def _create_user(
        username='testuser',
        password='testpass123',
        email='test@example.com',
        **kwargs
    ):
        from django.contrib.auth import get_user_model
        return get_user_model().objects.create_user(
            username=username,
            password=password,
            email=email,
            **kwargs
        )
    return _create_user


@pytest.fixture
def user(create_user):
    """Create a regular user."""
    return create_user()


@pytest.fixture
def auth_client(api_client, user):
    """Return an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def create_product(db):
    """Factory fixture to create products."""
    counter = [0]

    def _create_product(name='Test Product', sku=None, **kwargs):
        from apps.products.models import Product

        counter[0] += 1
        if sku is None:
            sku = f'TEST{counter[0]:04d}'

        return Product.objects.create(
            name=name,
            sku=sku,
            unit_price=kwargs.pop('unit_price', Decimal('100.00')),
            **kwargs
        )
    return _create_product


@pytest.fixture
def product(create_product):
    """Create a default product."""
    return create_product()


@pytest.fixture
def create_position(db):
    """Factory fixture to create storage positions."""
    counter = [0]

    def _create_position(name=None, level=0, **kwargs):
        from apps.warehouse.models import Position

        counter[0] += 1
        if name is None:
            name = f'A-01-{counter[0]:02d}'
        return Position.objects.create(name=name, level=level, **kwargs)
    return _create_position


@pytest.fixture
def position(create_position):
    """Create a default position."""
    return create_position()


@pytest.fixture
def create_pallet(db, product):
    """
    Factory fixture to create pallets through PalletService, so stored
    pallets take their slot and add to stock like any other pallet.
    """
    def _create_pallet(status='UNSTORED', quantity=10, max_capacity=100, position=None, **kwargs):
        from apps.inventory.pallet_services import PalletService

        data = {
            'product': kwargs.pop('product', product),
            'status': status,
            'quantity': quantity,
            'max_capacity': max_capacity,
            'position': position,
            **kwargs
        }
        return PalletService.create_pallet(data)
    return _create_pallet


@pytest.fixture
def create_order(db):
    """Factory fixture to create orders through OrderService."""
    def _create_order(items, **kwargs):
        from apps.sales.services import OrderService

        data = {
            'items': [
                {'product_id': getattr(product, 'pk', product), 'quantity': quantity}
                for product, quantity in items
            ],
            **kwargs
        }
        return OrderService.create_order(data)
    return _create_order


@pytest.fixture
def create_purchase_order(db):
    """Factory fixture to create purchase orders, optionally in a later status."""
    def _create_purchase_order(supplier_name='Test Supplier', items=None, status='PENDING', **kwargs):
        from apps.purchasing.models import PurchaseOrder
        from apps.purchasing.services import PurchaseOrderService

        po = PurchaseOrderService.create_purchase_order({
            'supplier_name': supplier_name,
            'items': items or [],
            **kwargs
        })
        if status != 'PENDING':
            PurchaseOrder.objects.filter(pk=po.pk).update(status=status)
            po.refresh_from_db()
        return po
    return _create_purchase_order


@pytest.fixture
def assert_consistent(db):
    """
    Return a checker for the stock and slot invariants: every product's
    stocked quantity equals the sum over its STORED pallets, and a position
    is occupied exactly when a pallet references it.
    Order reservations are outside the stock equality, so only use it on
    pallet-only histories.
    """
    def _assert_consistent():
        from apps.inventory.models import Pallet
        from apps.inventory.services import StockLedger
        from apps.products.models import Product
        from apps.warehouse.models import Position

        for product in Product.objects.all():
            assert product.stocked_quantity == StockLedger.recompute(product.pk), product
            assert product.stocked_quantity >= 0

        bound = set(
            Pallet.objects.filter(position__isnull=False).values_list('position_id', flat=True)
        )
        occupied = set(
            Position.objects.filter(is_occupied=True).values_list('pk', flat=True)
        )
        assert bound == occupied

        for pallet in Pallet.objects.all():
            assert 0 <= pallet.quantity <= pallet.max_capacity
            assert pallet.is_stored == (pallet.position_id is not None)
    return _assert_consistent
