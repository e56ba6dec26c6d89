"""
Tests for pallet transition planning.
"""
import pytest

from apps.core.exceptions import CapacityExceededError, ValidationError
from apps.inventory.transitions import (
    PALLET_ADJUSTED,
    PALLET_DELETED,
    PALLET_STORED,
    PALLET_UNSTORED,
    READY_TO_SHIP,
    STORED,
    UNSTORED,
    PalletState,
    PalletTransition,
    plan_create,
    plan_delete,
    plan_update,
    validate_state,
)


def stored(quantity=10, position_id=1, max_capacity=100):
    return PalletState(STORED, quantity, max_capacity, position_id)


def unstored(quantity=10, max_capacity=100, status=UNSTORED):
    return PalletState(status, quantity, max_capacity)


class TestValidateState:
    """Tests for validate_state."""

    def test_quantity_equal_to_capacity_is_valid(self):
        validate_state(unstored(quantity=100, max_capacity=100))

    def test_quantity_above_capacity(self):
        with pytest.raises(CapacityExceededError):
            validate_state(unstored(quantity=101, max_capacity=100))

    def test_negative_quantity(self):
        with pytest.raises(ValidationError):
            validate_state(unstored(quantity=-1))

    def test_missing_capacity(self):
        with pytest.raises(ValidationError):
            validate_state(unstored(max_capacity=None))

    def test_unknown_status(self):
        with pytest.raises(ValidationError):
            validate_state(unstored(status='LOST'))

    def test_stored_requires_position(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_state(stored(position_id=None))
        assert exc_info.value.field == 'position'


class TestPlanCreate:
    """Tests for plan_create."""

    def test_stored_adds_stock_and_occupies(self):
        plan = plan_create(stored(quantity=50, position_id=7))
        assert plan == PalletTransition(
            stock_delta=50,
            movement_type=PALLET_STORED,
            occupy_position_id=7,
        )

    @pytest.mark.parametrize('status', [UNSTORED, READY_TO_SHIP])
    def test_not_stored_has_no_effect(self, status):
        assert plan_create(unstored(status=status)).is_noop

    def test_capacity_checked(self):
        with pytest.raises(CapacityExceededError):
            plan_create(stored(quantity=11, max_capacity=10))


class TestPlanUpdate:
    """Tests for plan_update."""

    def test_stored_to_unstored(self):
        plan = plan_update(stored(quantity=50, position_id=7), unstored(quantity=50))
        assert plan.stock_delta == -50
        assert plan.movement_type == PALLET_UNSTORED
        assert plan.release_position_id == 7
        assert plan.occupy_position_id is None

    def test_stored_to_unstored_gives_back_old_quantity(self):
        plan = plan_update(stored(quantity=50), unstored(quantity=20))
        assert plan.stock_delta == -50

    def test_unstored_to_stored(self):
        plan = plan_update(unstored(quantity=5), stored(quantity=30, position_id=4))
        assert plan.stock_delta == 30
        assert plan.movement_type == PALLET_STORED
        assert plan.occupy_position_id == 4
        assert plan.release_position_id is None

    def test_ready_to_ship_to_stored(self):
        plan = plan_update(unstored(status=READY_TO_SHIP, quantity=30), stored(quantity=30, position_id=4))
        assert plan.stock_delta == 30
        assert plan.occupy_position_id == 4

    def test_stored_quantity_change(self):
        plan = plan_update(stored(quantity=50), stored(quantity=80))
        assert plan.stock_delta == 30
        assert plan.movement_type == PALLET_ADJUSTED
        assert plan.release_position_id is None
        assert plan.occupy_position_id is None

    def test_stored_slot_change(self):
        plan = plan_update(stored(position_id=1), stored(position_id=2))
        assert plan.stock_delta == 0
        assert plan.release_position_id == 1
        assert plan.occupy_position_id == 2

    def test_stored_unchanged_is_noop(self):
        assert plan_update(stored(), stored()).is_noop

    def test_unstored_changes_are_noop(self):
        assert plan_update(unstored(quantity=5), unstored(quantity=50)).is_noop

    def test_capacity_checked_against_new_state(self):
        with pytest.raises(CapacityExceededError):
            plan_update(stored(quantity=50), stored(quantity=60, max_capacity=55))


class TestPlanDelete:
    """Tests for plan_delete."""

    def test_stored_reverses_and_clamps(self):
        plan = plan_delete(stored(quantity=50, position_id=7))
        assert plan.stock_delta == -50
        assert plan.movement_type == PALLET_DELETED
        assert plan.release_position_id == 7
        assert plan.clamp is True

    def test_unstored_has_no_effect(self):
        assert plan_delete(unstored()).is_noop
