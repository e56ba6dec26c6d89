"""
Purchasing services.
"""
import logging

from apps.core.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from apps.core.unit_of_work import unit_of_work
from apps.core.utils import generate_order_number, pk_of
from apps.inventory.models import Pallet
from apps.inventory.transitions import READY_TO_SHIP, PalletState, validate_state
from apps.products.models import Product
from .models import PurchaseOrder, PurchaseOrderItem

logger = logging.getLogger(__name__)

# Allowed forward edge from each status.
TRANSITIONS = {
    'PENDING': 'PROCESSING',
    'PROCESSING': 'READY_TO_SHIP',
    'READY_TO_SHIP': 'SHIPPING',
}


class PurchaseOrderService:
    """Purchase order workflow and inbound pallet intake."""

    @staticmethod
    def lock_purchase_order(uow, po_id):
        try:
            return uow.lock(PurchaseOrder, po_id)
        except PurchaseOrder.DoesNotExist:
            raise NotFoundError('採購單', po_id)

    @classmethod
    def create_purchase_order(cls, data, uow=None, user=None):
        """
        Create a PENDING purchase order.
        Each line snapshots the product's current unit price; the total is
        computed from the lines unless one is given.
        """
        supplier_name = data.get('supplier_name')
        if not supplier_name:
            raise ValidationError('採購單必須指定供應商', field='supplier_name')

        with unit_of_work(uow, user) as uow:
            po = PurchaseOrder.objects.create(
                po_number=data.get('po_number') or generate_order_number('PO'),
                supplier_name=supplier_name,
                expected_arrival_time=data.get('expected_arrival_time'),
                note=data.get('note', ''),
                status='PENDING',
                created_by=uow.user
            )

            for item in data.get('items') or []:
                product_id = pk_of(item.get('product_id', item.get('product')))
                try:
                    product = Product.objects.get(pk=product_id)
                except Product.DoesNotExist:
                    raise NotFoundError('商品', product_id)
                PurchaseOrderItem.objects.create(
                    purchase_order=po,
                    product=product,
                    quantity=item['quantity'],
                    expected_pallets=item.get('expected_pallets', 0),
                    unit_price=product.unit_price,
                    created_by=uow.user
                )

            total_price = data.get('total_price')
            po.total_price = total_price if total_price is not None else po.calculate_total()
            po.save(update_fields=['total_price'])

        logger.info(f'Purchase order {po.po_number} created for {po.supplier_name}')
        return po

    @classmethod
    def advance_status(cls, po_id, new_status, uow=None, user=None):
        """Move a purchase order one step forward along its status chain."""
        with unit_of_work(uow, user) as uow:
            po = cls.lock_purchase_order(uow, po_id)
            if TRANSITIONS.get(po.status) != new_status:
                raise InvalidTransitionError(
                    f'採購單狀態無法由 {po.status} 變更為 {new_status}',
                    current=po.status,
                    requested=new_status
                )
            old_status = po.status
            po.status = new_status
            po.updated_by = uow.user
            po.save(update_fields=['status', 'updated_by', 'updated_at'])

        logger.info(f'Purchase order {po.po_number} {old_status}->{new_status}')
        return po

    @classmethod
    def attach_pallet(cls, po_id, data, uow=None, user=None):
        """
        Register an inbound pallet on a PROCESSING purchase order.
        The pallet is READY_TO_SHIP: it holds no position and adds no stock
        until it is received into the warehouse.
        """
        product_id = pk_of(data.get('product'))
        if product_id is None:
            raise ValidationError('棧板必須指定商品', field='product')
        state = PalletState(
            status=READY_TO_SHIP,
            quantity=data.get('quantity', 0),
            max_capacity=data.get('max_capacity'),
        )
        validate_state(state)

        with unit_of_work(uow, user) as uow:
            po = cls.lock_purchase_order(uow, po_id)
            if po.status != 'PROCESSING':
                raise InvalidTransitionError(
                    f'只有處理中的採購單可以加入棧板 (目前狀態: {po.status})',
                    current=po.status,
                    requested='PROCESSING'
                )
            if not Product.objects.filter(pk=product_id).exists():
                raise NotFoundError('商品', product_id)

            pallet = Pallet.objects.create(
                name=data.get('name') or generate_order_number('PLT'),
                quantity=state.quantity,
                max_capacity=state.max_capacity,
                status=READY_TO_SHIP,
                manufacturing_date=data.get('manufacturing_date'),
                expiry_date=data.get('expiry_date'),
                supplier_name=po.supplier_name,
                product_id=product_id,
                purchase_order=po,
                created_by=uow.user
            )

        logger.info(f'Pallet {pallet.pk} attached to purchase order {po.po_number}')
        return po

    @staticmethod
    def purchase_orders_by_supplier(supplier_name):
        return PurchaseOrder.objects.prefetch_related('items').filter(supplier_name=supplier_name)

    @staticmethod
    def purchase_orders_by_status(status):
        return PurchaseOrder.objects.prefetch_related('items').filter(status=status)
