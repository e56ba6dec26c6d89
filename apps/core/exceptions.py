"""
Custom exception handling for the application.
"""
import logging

from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns responses in a standard format.
    Business exceptions raised by the service layer are rendered with the
    HTTP status declared on the exception class.
    """
    if isinstance(exc, BusinessException):
        if isinstance(exc, ContentionError):
            logger.warning(f'Contention on {context.get("view").__class__.__name__}: {exc}')
        error = {
            'code': exc.code,
            'message': exc.message,
        }
        if exc.details:
            error['details'] = exc.details
        return Response(
            {'success': False, 'error': error},
            status=exc.status_code
        )

    response = exception_handler(exc, context)

    if response is not None:
        custom_response = {
            'success': False,
            'error': {
                'code': exc.__class__.__name__,
                'message': str(exc.detail) if hasattr(exc, 'detail') else str(exc),
            }
        }

        if hasattr(exc, 'detail') and isinstance(exc.detail, dict):
            custom_response['error']['details'] = exc.detail

        response.data = custom_response

    return response


class BusinessException(Exception):
    """Base exception for business logic errors."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message, code='BUSINESS_ERROR', details=None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(BusinessException):
    """Exception raised when a referenced record does not exist."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f'找不到{resource} (id={identifier})',
            'NOT_FOUND',
            {'resource': resource, 'id': identifier}
        )


class SlotNotFoundError(NotFoundError):
    """Exception raised when a storage position does not exist."""
    def __init__(self, position_id):
        super().__init__('儲位', position_id)


class ValidationError(BusinessException):
    """Exception raised for validation errors."""
    def __init__(self, message, field=None, code='VALIDATION_ERROR'):
        self.field = field
        super().__init__(message, code, {'field': field} if field else None)


class CapacityExceededError(ValidationError):
    """Exception raised when a pallet quantity exceeds its capacity."""
    def __init__(self, quantity, max_capacity):
        self.quantity = quantity
        self.max_capacity = max_capacity
        super().__init__(
            f'數量 {quantity} 超過棧板最大容量 {max_capacity}',
            field='quantity',
            code='CAPACITY_EXCEEDED'
        )
        self.details.update({'quantity': quantity, 'max_capacity': max_capacity})


class InvalidTransitionError(BusinessException):
    """Exception raised for an illegal lifecycle or status change."""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message, current=None, requested=None):
        self.current = current
        self.requested = requested
        details = {}
        if current is not None:
            details['current'] = current
        if requested is not None:
            details['requested'] = requested
        super().__init__(message, 'INVALID_TRANSITION', details)


class InsufficientStockError(BusinessException):
    """Exception raised when stock is insufficient."""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, product_id, product_name, requested, available):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        message = f'商品 {product_name} 庫存不足，需要 {requested}，可用 {available}'
        super().__init__(message, 'INSUFFICIENT_STOCK', {
            'product_id': product_id,
            'requested': requested,
            'available': available,
        })


class SlotConflictError(BusinessException):
    """Exception raised when a position is already bound to another pallet."""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, position_id, holder_id=None):
        self.position_id = position_id
        self.holder_id = holder_id
        details = {'position_id': position_id}
        if holder_id is not None:
            details['pallet_id'] = holder_id
        super().__init__(f'儲位 {position_id} 已被其他棧板佔用', 'SLOT_CONFLICT', details)


class SlotAlreadyOccupiedError(SlotConflictError):
    """Raised by the slot allocator when occupying a held position."""


class InvariantViolationError(BusinessException):
    """Exception raised when a change would break a stock invariant."""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message, **details):
        super().__init__(message, 'INVARIANT_VIOLATION', details)


class ContentionError(BusinessException):
    """
    Exception raised when a transaction lost a lock race or timed out
    waiting for one. Safe to retry.
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    retryable = True

    def __init__(self, message='資料正被其他交易更新，請稍後再試'):
        super().__init__(message, 'CONTENTION')
