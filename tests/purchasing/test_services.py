"""
Tests for the purchase order workflow.
"""
from decimal import Decimal

import pytest

from apps.core.exceptions import (
    CapacityExceededError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from apps.inventory.models import Pallet
from apps.purchasing.models import PurchaseOrder
from apps.purchasing.services import PurchaseOrderService


@pytest.mark.django_db
class TestCreatePurchaseOrder:
    """Tests for PurchaseOrderService.create_purchase_order."""

    def test_snapshots_unit_price(self, create_product):
        product = create_product(unit_price=Decimal('12.50'))

        po = PurchaseOrderService.create_purchase_order({
            'supplier_name': '大同供應商',
            'items': [{'product_id': product.pk, 'quantity': 4, 'expected_pallets': 1}],
        })

        product.unit_price = Decimal('99.00')
        product.save()

        item = po.items.get()
        assert po.status == 'PENDING'
        assert po.po_number.startswith('PO')
        assert item.unit_price == Decimal('12.50')
        assert item.expected_pallets == 1
        po.refresh_from_db()
        assert po.total_price == Decimal('50.00')

    def test_explicit_total_price(self, create_product):
        product = create_product(unit_price=Decimal('10.00'))

        po = PurchaseOrderService.create_purchase_order({
            'supplier_name': '大同供應商',
            'total_price': Decimal('35.00'),
            'items': [{'product_id': product.pk, 'quantity': 4}],
        })

        po.refresh_from_db()
        assert po.total_price == Decimal('35.00')

    def test_unknown_product(self, db):
        with pytest.raises(NotFoundError):
            PurchaseOrderService.create_purchase_order({
                'supplier_name': '大同供應商',
                'items': [{'product_id': 999999, 'quantity': 1}],
            })

        assert not PurchaseOrder.objects.exists()

    def test_supplier_required(self, db):
        with pytest.raises(ValidationError):
            PurchaseOrderService.create_purchase_order({'items': []})


@pytest.mark.django_db
class TestAdvanceStatus:
    """Tests for the linear purchase order status chain."""

    def test_full_chain(self, create_purchase_order):
        po = create_purchase_order()

        for new_status in ('PROCESSING', 'READY_TO_SHIP', 'SHIPPING'):
            po = PurchaseOrderService.advance_status(po.pk, new_status)
            assert po.status == new_status

    @pytest.mark.parametrize('current,requested', [
        ('PENDING', 'READY_TO_SHIP'),
        ('PENDING', 'PENDING'),
        ('PROCESSING', 'PENDING'),
        ('PROCESSING', 'SHIPPING'),
        ('SHIPPING', 'PENDING'),
    ])
    def test_illegal_edges(self, create_purchase_order, current, requested):
        po = create_purchase_order(status=current)

        with pytest.raises(InvalidTransitionError):
            PurchaseOrderService.advance_status(po.pk, requested)

        po.refresh_from_db()
        assert po.status == current

    def test_unknown_purchase_order(self, db):
        with pytest.raises(NotFoundError):
            PurchaseOrderService.advance_status(999999, 'PROCESSING')


@pytest.mark.django_db
class TestAttachPallet:
    """Tests for PurchaseOrderService.attach_pallet."""

    def test_scenario_inbound_pallet(self, create_product, create_purchase_order):
        product = create_product(stocked_quantity=5)
        po = create_purchase_order(supplier_name='大同供應商')

        PurchaseOrderService.advance_status(po.pk, 'PROCESSING')
        po = PurchaseOrderService.attach_pallet(po.pk, {
            'product': product.pk,
            'quantity': 40,
            'max_capacity': 50,
        })

        pallet = po.pallets.get()
        assert pallet.status == 'READY_TO_SHIP'
        assert pallet.supplier_name == '大同供應商'
        assert pallet.position is None
        product.refresh_from_db()
        assert product.stocked_quantity == 5

        with pytest.raises(InvalidTransitionError):
            PurchaseOrderService.advance_status(po.pk, 'SHIPPING')

    def test_requires_processing(self, product, create_purchase_order):
        po = create_purchase_order()

        with pytest.raises(InvalidTransitionError):
            PurchaseOrderService.attach_pallet(po.pk, {
                'product': product.pk,
                'quantity': 1,
                'max_capacity': 10,
            })

        assert not Pallet.objects.exists()

    def test_over_capacity(self, product, create_purchase_order):
        po = create_purchase_order(status='PROCESSING')

        with pytest.raises(CapacityExceededError):
            PurchaseOrderService.attach_pallet(po.pk, {
                'product': product.pk,
                'quantity': 11,
                'max_capacity': 10,
            })

        assert not Pallet.objects.exists()

    def test_unknown_product(self, create_purchase_order):
        po = create_purchase_order(status='PROCESSING')

        with pytest.raises(NotFoundError):
            PurchaseOrderService.attach_pallet(po.pk, {
                'product': 999999,
                'quantity': 1,
                'max_capacity': 10,
            })

    def test_received_pallet_enters_stock(
        self, create_product, create_purchase_order, position, assert_consistent
    ):
        from apps.inventory.pallet_services import PalletService

        product = create_product()
        po = create_purchase_order(status='PROCESSING')
        po = PurchaseOrderService.attach_pallet(po.pk, {
            'product': product.pk,
            'quantity': 8,
            'max_capacity': 10,
        })

        PalletService.receive_pallet(po.pallets.get().pk, position.pk)

        product.refresh_from_db()
        assert product.stocked_quantity == 8
        assert_consistent()


@pytest.mark.django_db
class TestPurchaseOrderQueries:
    """Tests for purchase order lookups."""

    def test_by_supplier(self, create_purchase_order):
        mine = create_purchase_order(supplier_name='大同供應商')
        create_purchase_order(supplier_name='其他供應商')

        result = list(PurchaseOrderService.purchase_orders_by_supplier('大同供應商'))

        assert result == [mine]

    def test_by_status(self, create_purchase_order):
        create_purchase_order()
        processing = create_purchase_order(status='PROCESSING')

        result = list(PurchaseOrderService.purchase_orders_by_status('PROCESSING'))

        assert result == [processing]
