"""
Sales services.
"""
import logging

from apps.core.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from apps.core.unit_of_work import unit_of_work
from apps.core.utils import generate_order_number, pk_of
from apps.inventory.services import StockLedger
from apps.products.models import Product
from .models import Order, OrderItem

logger = logging.getLogger(__name__)

ORDER_STATUSES = {choice for choice, _ in Order.STATUS_CHOICES}

# Written through on update.
ORDER_FIELDS = (
    'customer', 'user_id', 'order_date', 'shipment', 'value',
    'shipping_address', 'shipping_city', 'shipping_state', 'shipping_zip_code',
    'payment_method', 'payment_last4', 'note',
)


class OrderService:
    """
    Order fulfillment workflow.
    Stock is reserved when lines are written and given back when an order is
    canceled or its lines are replaced.
    """

    @staticmethod
    def lock_order(uow, order_id):
        try:
            return uow.lock(Order, order_id)
        except Order.DoesNotExist:
            raise NotFoundError('訂單', order_id)

    @classmethod
    def create_order(cls, data, uow=None, user=None):
        """Create a PENDING order and reserve stock for every line, all or nothing."""
        items = cls._clean_items(data.get('items') or [])

        with unit_of_work(uow, user) as uow:
            products = StockLedger.lock_products(uow, [item['product_id'] for item in items])

            order = Order(
                order_number=data.get('order_number') or generate_order_number('ORD'),
                status='PENDING',
                created_by=uow.user
            )
            for field in ORDER_FIELDS:
                if field in data:
                    setattr(order, field, data[field])
            order.save()

            cls._write_items(uow, order, items, products)

        logger.info(f'Order {order.order_number} created with {len(items)} line(s)')
        return order

    @classmethod
    def update_order(cls, order_id, data, uow=None, user=None):
        """
        Update an order.

        Supplying items replaces the order lines: the old lines are restored
        best-effort, then the new ones reserved. Only PENDING orders accept
        new lines. A CANCELED status is ignored here; use cancel_order.
        """
        new_status = data.get('status')
        if new_status and new_status not in ORDER_STATUSES:
            raise ValidationError(f'不支援的訂單狀態: {new_status}', field='status')
        items = data.get('items')
        if items:
            items = cls._clean_items(items)

        with unit_of_work(uow, user) as uow:
            order = cls.lock_order(uow, order_id)

            if items:
                if order.status != 'PENDING':
                    raise InvalidTransitionError(
                        f'訂單 {order.order_number} 狀態為 {order.status}，無法修改明細',
                        current=order.status,
                        requested='PENDING'
                    )
                old_items = list(order.items.all())
                product_ids = [item.product_id for item in old_items]
                product_ids += [item['product_id'] for item in items]
                products = uow.lock_many(Product, product_ids)
                for item in items:
                    if item['product_id'] not in products:
                        raise NotFoundError('商品', item['product_id'])

                cls._restore_items(uow, order, old_items, products)
                order.items.all().delete()
                cls._write_items(uow, order, items, products)

            if new_status == 'CANCELED':
                logger.info(f'Ignoring CANCELED status on update of order {order.order_number}')
            elif new_status:
                if order.status == 'CANCELED':
                    raise InvalidTransitionError(
                        f'訂單 {order.order_number} 已取消',
                        current=order.status,
                        requested=new_status
                    )
                order.status = new_status

            for field in ORDER_FIELDS:
                if field in data:
                    setattr(order, field, data[field])
            order.updated_by = uow.user
            order.save()

        logger.info(f'Order {order.order_number} updated (status={order.status})')
        return order

    @classmethod
    def cancel_order(cls, order_id, uow=None, user=None):
        """Cancel a PENDING order and give its reserved stock back."""
        with unit_of_work(uow, user) as uow:
            order = cls.lock_order(uow, order_id)
            if order.status != 'PENDING':
                raise InvalidTransitionError(
                    f'只有待處理的訂單可以取消 (目前狀態: {order.status})',
                    current=order.status,
                    requested='CANCELED'
                )

            old_items = list(order.items.all())
            products = uow.lock_many(
                Product,
                [item.product_id for item in old_items]
            )
            cls._restore_items(uow, order, old_items, products)

            order.status = 'CANCELED'
            order.updated_by = uow.user
            order.save(update_fields=['status', 'updated_by', 'updated_at'])

        logger.info(f'Order {order.order_number} canceled')
        return order

    @staticmethod
    def orders_for_user(user_id):
        return Order.objects.prefetch_related('items').filter(user_id=str(user_id))

    @staticmethod
    def _clean_items(items):
        cleaned = []
        for index, item in enumerate(items):
            product_id = pk_of(item.get('product_id', item.get('product')))
            quantity = item.get('quantity')
            if product_id is None:
                raise ValidationError(f'第 {index + 1} 項明細未指定商品', field='items')
            if quantity is None or quantity < 1:
                raise ValidationError(f'第 {index + 1} 項明細數量必須大於 0', field='items')
            cleaned.append({'product_id': product_id, 'quantity': quantity})
        return cleaned

    @staticmethod
    def _write_items(uow, order, items, products):
        for item in items:
            product = products[item['product_id']]
            StockLedger.reserve(
                uow,
                product.pk,
                item['quantity'],
                reference_type='Order',
                reference_id=order.pk,
                note=f'訂單 {order.order_number}'
            )
            OrderItem.objects.create(
                order=order,
                product=product,
                product_name=product.name,
                quantity=item['quantity'],
                created_by=uow.user
            )

    @staticmethod
    def _restore_items(uow, order, items, products):
        for item in items:
            if item.product_id is None or item.product_id not in products:
                logger.warning(
                    f'Skipping stock restore for order {order.order_number}: '
                    f'product of line {item.pk} ({item.product_name}) no longer exists'
                )
                continue
            StockLedger.restore(
                uow,
                item.product_id,
                item.quantity,
                reference_type='Order',
                reference_id=order.pk,
                note=f'訂單 {order.order_number} 回補'
            )
