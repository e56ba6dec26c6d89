"""
Tests for the custom exception handler.
"""
from unittest.mock import Mock

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated

from apps.core.exceptions import (
    CapacityExceededError,
    ContentionError,
    InsufficientStockError,
    InvalidTransitionError,
    NotFoundError,
    SlotAlreadyOccupiedError,
    SlotConflictError,
    SlotNotFoundError,
    ValidationError,
    custom_exception_handler,
)


def handle(exc):
    return custom_exception_handler(exc, {'view': Mock()})


class TestCustomExceptionHandler:
    """Tests for custom_exception_handler."""

    def test_not_found(self):
        response = handle(NotFoundError('商品', 42))
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['success'] is False
        assert response.data['error']['code'] == 'NOT_FOUND'
        assert response.data['error']['details']['id'] == 42

    def test_slot_not_found_is_not_found(self):
        exc = SlotNotFoundError(3)
        assert isinstance(exc, NotFoundError)
        assert handle(exc).status_code == status.HTTP_404_NOT_FOUND

    def test_capacity_exceeded(self):
        exc = CapacityExceededError(11, 10)
        assert isinstance(exc, ValidationError)
        response = handle(exc)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'CAPACITY_EXCEEDED'

    def test_insufficient_stock(self):
        response = handle(InsufficientStockError(1, '螺絲', requested=5, available=2))
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['code'] == 'INSUFFICIENT_STOCK'
        assert response.data['error']['details']['available'] == 2
        assert response.data['error']['details']['requested'] == 5

    def test_slot_conflict(self):
        exc = SlotAlreadyOccupiedError(3, holder_id=9)
        assert isinstance(exc, SlotConflictError)
        response = handle(exc)
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['code'] == 'SLOT_CONFLICT'

    def test_invalid_transition(self):
        response = handle(InvalidTransitionError('不可取消', current='SHIPPED', requested='CANCELED'))
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['code'] == 'INVALID_TRANSITION'

    def test_contention_is_retryable(self):
        exc = ContentionError()
        assert exc.retryable is True
        response = handle(exc)
        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data['error']['code'] == 'CONTENTION'

    def test_drf_exception_wrapped(self):
        response = handle(NotAuthenticated())
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False
        assert response.data['error']['code'] == 'NotAuthenticated'

    def test_unhandled_exception_returns_none(self):
        assert handle(RuntimeError('boom')) is None
