"""
Pallet lifecycle services.
"""
import logging

from django.db import IntegrityError

from apps.core.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    SlotConflictError,
    ValidationError,
)
from apps.core.unit_of_work import unit_of_work
from apps.core.utils import generate_order_number, pk_of
from apps.warehouse.services import SlotAllocator
from .models import Pallet
from .services import StockLedger
from .transitions import (
    STORED,
    UNSTORED,
    PalletState,
    plan_create,
    plan_delete,
    plan_update,
)

logger = logging.getLogger(__name__)

# Written through on update without any stock or slot effect.
METADATA_FIELDS = ('name', 'manufacturing_date', 'expiry_date', 'supplier_name')


class PalletService:
    """
    Pallet lifecycle manager.

    Every command computes its effects with the pure planners in
    `transitions`, then applies stock and slot changes in one unit of work.
    Rows are locked in a fixed order: pallet, product, positions.
    """

    @staticmethod
    def lock_pallet(uow, pallet_id):
        try:
            return uow.lock(Pallet, pallet_id)
        except Pallet.DoesNotExist:
            raise NotFoundError('棧板', pallet_id)

    @classmethod
    def create_pallet(cls, data, uow=None, user=None):
        """Create a pallet; a STORED pallet takes its slot and adds to stock."""
        product_id = pk_of(data.get('product'))
        if product_id is None:
            raise ValidationError('棧板必須指定商品', field='product')

        status = data.get('status') or UNSTORED
        state = PalletState(
            status=status,
            quantity=data.get('quantity', 0),
            max_capacity=data.get('max_capacity'),
            position_id=pk_of(data.get('position')) if status == STORED else None,
        )
        plan = plan_create(state)

        with unit_of_work(uow, user) as uow:
            StockLedger.lock_product(uow, product_id)
            if plan.occupy_position_id is not None:
                SlotAllocator.occupy(uow, plan.occupy_position_id)

            pallet = Pallet(
                name=data.get('name') or generate_order_number('PLT'),
                quantity=state.quantity,
                max_capacity=state.max_capacity,
                status=state.status,
                manufacturing_date=data.get('manufacturing_date'),
                expiry_date=data.get('expiry_date'),
                supplier_name=data.get('supplier_name', ''),
                position_id=state.position_id,
                product_id=product_id,
                purchase_order_id=pk_of(data.get('purchase_order')),
                created_by=uow.user
            )
            cls._save(uow, pallet)
            cls._apply_stock(uow, pallet, plan)

        logger.info(
            f'Pallet {pallet.pk} created as {pallet.status} '
            f'(product={product_id}, quantity={pallet.quantity}, position={pallet.position_id})'
        )
        return pallet

    @classmethod
    def update_pallet(cls, pallet_id, data, uow=None, user=None):
        """
        Update a pallet and apply the minimal stock/slot delta for the change.
        Fields absent from data keep their current values.
        """
        with unit_of_work(uow, user) as uow:
            pallet = cls.lock_pallet(uow, pallet_id)

            product_id = pk_of(data.get('product'))
            if product_id is not None and product_id != pallet.product_id:
                raise ValidationError('棧板不可變更商品', field='product')

            old = PalletState.of(pallet)
            status = data.get('status') or pallet.status
            if status == STORED:
                position_id = pk_of(data.get('position')) or old.position_id
            else:
                position_id = None

            new = PalletState(
                status=status,
                quantity=data.get('quantity', pallet.quantity),
                max_capacity=data.get('max_capacity', pallet.max_capacity),
                position_id=position_id,
            )
            plan = plan_update(old, new)

            StockLedger.lock_product(uow, pallet.product_id)
            cls._apply_slots(uow, pallet, plan)

            pallet.status = new.status
            pallet.quantity = new.quantity
            pallet.max_capacity = new.max_capacity
            pallet.position_id = new.position_id
            for field in METADATA_FIELDS:
                if field in data:
                    setattr(pallet, field, data[field])
            pallet.updated_by = uow.user
            cls._save(uow, pallet)
            cls._apply_stock(uow, pallet, plan)

        if not plan.is_noop:
            logger.info(
                f'Pallet {pallet.pk} {old.status}->{new.status} '
                f'(stock {plan.stock_delta:+d}, released={plan.release_position_id}, '
                f'occupied={plan.occupy_position_id})'
            )
        return pallet

    @classmethod
    def receive_pallet(cls, pallet_id, position_id, uow=None, user=None):
        """Put an inbound or unstored pallet away into a position."""
        with unit_of_work(uow, user) as uow:
            pallet = cls.lock_pallet(uow, pallet_id)
            if pallet.is_stored:
                raise InvalidTransitionError(
                    f'棧板 {pallet.name} 已上架',
                    current=pallet.status,
                    requested=STORED
                )
            if position_id is None:
                raise ValidationError('上架的棧板必須指定儲位', field='position')
            return cls.update_pallet(
                pallet_id,
                {'status': STORED, 'position': position_id},
                uow=uow
            )

    @classmethod
    def delete_pallet(cls, pallet_id, uow=None, user=None):
        """Reverse a stored pallet's stock and slot effects, then delete it."""
        with unit_of_work(uow, user) as uow:
            pallet = cls.lock_pallet(uow, pallet_id)
            plan = plan_delete(PalletState.of(pallet))
            cls._apply_stock(uow, pallet, plan)
            cls._apply_slots(uow, pallet, plan)
            pallet.delete()

        logger.info(f'Pallet {pallet_id} deleted (stock {plan.stock_delta:+d})')

    @staticmethod
    def pallets_for_product(product_id):
        return Pallet.objects.select_related('position').filter(product_id=product_id)

    @staticmethod
    def _apply_stock(uow, pallet, plan):
        if not plan.stock_delta:
            return
        StockLedger.apply_delta(
            uow,
            pallet.product_id,
            plan.stock_delta,
            plan.movement_type,
            reference_type='Pallet',
            reference_id=pallet.pk,
            note=f'棧板 {pallet.name}',
            clamp=plan.clamp
        )

    @staticmethod
    def _apply_slots(uow, pallet, plan):
        release_id = plan.release_position_id
        occupy_id = plan.occupy_position_id
        if release_id is not None and occupy_id is not None:
            SlotAllocator.rebind(uow, release_id, occupy_id, pallet)
        elif release_id is not None:
            SlotAllocator.release(uow, release_id)
        elif occupy_id is not None:
            SlotAllocator.occupy(uow, occupy_id, pallet)

    @staticmethod
    def _save(uow, pallet):
        # Pallet.position is unique: a concurrent binding of the same slot
        # fails here even if both transactions saw the slot free.
        try:
            with uow.savepoint():
                pallet.save()
        except IntegrityError as exc:
            if pallet.position_id is not None and 'position' in str(exc).lower():
                logger.warning(f'Position {pallet.position_id} bound concurrently: {exc}')
                raise SlotConflictError(pallet.position_id) from exc
            raise
