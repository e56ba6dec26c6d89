"""
Inventory services.
"""
import logging

from django.db.models import Sum

from apps.core.exceptions import (
    InsufficientStockError,
    InvariantViolationError,
    NotFoundError,
)
from apps.products.models import Product
from .models import Pallet, StockMovement

logger = logging.getLogger(__name__)


class StockLedger:
    """
    Owns the authoritative stocked quantity of every product.
    Every change is a signed delta applied inside the caller's unit of work
    and recorded as a StockMovement.
    """

    @staticmethod
    def lock_product(uow, product_id):
        try:
            return uow.lock(Product, product_id)
        except Product.DoesNotExist:
            raise NotFoundError('商品', product_id)

    @staticmethod
    def lock_products(uow, product_ids):
        """Lock products in ascending id order; all of them must exist."""
        products = uow.lock_many(Product, product_ids)
        for product_id in sorted({pk for pk in product_ids if pk is not None}):
            if product_id not in products:
                raise NotFoundError('商品', product_id)
        return products

    @classmethod
    def apply_delta(
        cls,
        uow,
        product_id,
        delta,
        movement_type,
        reference_type='',
        reference_id=None,
        note='',
        clamp=False
    ):
        """
        Adjust a product's stocked quantity by a signed delta.
        A result below zero is rejected, or floored at zero when clamp is set.
        """
        product = cls.lock_product(uow, product_id)
        return cls._apply(
            uow, product, delta, movement_type,
            reference_type, reference_id, note, clamp
        )

    @classmethod
    def reserve(cls, uow, product_id, quantity, reference_type='', reference_id=None, note=''):
        """Deduct stock for an outbound order, failing if it is not available."""
        product = cls.lock_product(uow, product_id)
        if product.stocked_quantity < quantity:
            raise InsufficientStockError(
                product_id=product.pk,
                product_name=product.name,
                requested=quantity,
                available=product.stocked_quantity
            )
        return cls._apply(
            uow, product, -quantity, 'ORDER_RESERVED',
            reference_type, reference_id, note
        )

    @classmethod
    def restore(cls, uow, product_id, quantity, reference_type='', reference_id=None, note=''):
        """Give back stock previously reserved by an order."""
        product = cls.lock_product(uow, product_id)
        return cls._apply(
            uow, product, quantity, 'ORDER_RESTORED',
            reference_type, reference_id, note
        )

    @staticmethod
    def recompute(product_id):
        """
        Sum of quantities over the product's STORED pallets.
        Read-only audit helper; the ledger never writes this value back.
        """
        total = Pallet.objects.filter(
            product_id=product_id,
            status='STORED'
        ).aggregate(total=Sum('quantity'))['total']
        return total or 0

    @staticmethod
    def _apply(uow, product, delta, movement_type, reference_type='', reference_id=None, note='', clamp=False):
        if delta == 0:
            return product

        balance = product.stocked_quantity + delta
        if balance < 0:
            if not clamp:
                raise InvariantViolationError(
                    f'商品 {product.name} 庫存不可為負數',
                    product_id=product.pk,
                    stocked_quantity=product.stocked_quantity,
                    delta=delta
                )
            logger.warning(
                f'Clamping stock of product {product.pk} at zero '
                f'(stocked={product.stocked_quantity}, delta={delta})'
            )
            delta = -product.stocked_quantity
            balance = 0
            if delta == 0:
                return product

        product.stocked_quantity = balance
        product.updated_by = uow.user
        product.save(update_fields=['stocked_quantity', 'updated_by', 'updated_at'])

        StockMovement.objects.using(uow.using).create(
            product=product,
            movement_type=movement_type,
            quantity=delta,
            balance=balance,
            reference_type=reference_type,
            reference_id=reference_id,
            note=note,
            created_by=uow.user
        )
        return product
