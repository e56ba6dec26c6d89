"""
Pallet state transitions.

Pure functions that turn an old and a new pallet state into the single set of
stock and slot effects the change requires. Nothing here touches the database;
PalletService validates with these plans and then applies them inside one unit
of work.
"""
from dataclasses import dataclass
from typing import Optional

from apps.core.exceptions import CapacityExceededError, ValidationError

STORED = 'STORED'
UNSTORED = 'UNSTORED'
READY_TO_SHIP = 'READY_TO_SHIP'
PALLET_STATUSES = (UNSTORED, STORED, READY_TO_SHIP)

PALLET_STORED = 'PALLET_STORED'
PALLET_UNSTORED = 'PALLET_UNSTORED'
PALLET_ADJUSTED = 'PALLET_ADJUSTED'
PALLET_DELETED = 'PALLET_DELETED'


@dataclass(frozen=True)
class PalletState:
    """The slice of a pallet that drives stock and slot accounting."""
    status: str
    quantity: int
    max_capacity: int
    position_id: Optional[int] = None

    @property
    def is_stored(self) -> bool:
        return self.status == STORED

    @classmethod
    def of(cls, pallet) -> 'PalletState':
        return cls(
            status=pallet.status,
            quantity=pallet.quantity,
            max_capacity=pallet.max_capacity,
            position_id=pallet.position_id,
        )


@dataclass(frozen=True)
class PalletTransition:
    """Effects of one pallet change: a stock delta and slot moves."""
    stock_delta: int = 0
    movement_type: str = ''
    release_position_id: Optional[int] = None
    occupy_position_id: Optional[int] = None
    clamp: bool = False

    @property
    def is_noop(self) -> bool:
        return (
            self.stock_delta == 0
            and self.release_position_id is None
            and self.occupy_position_id is None
        )


def validate_state(state: PalletState) -> None:
    """Raise if a pallet state is not allowed to exist."""
    if state.status not in PALLET_STATUSES:
        raise ValidationError(f'不支援的棧板狀態: {state.status}', field='status')
    if state.max_capacity is None or state.max_capacity < 0:
        raise ValidationError('最大容量不可為負數', field='max_capacity')
    if state.quantity is None or state.quantity < 0:
        raise ValidationError('數量不可為負數', field='quantity')
    if state.quantity > state.max_capacity:
        raise CapacityExceededError(state.quantity, state.max_capacity)
    if state.is_stored and state.position_id is None:
        raise ValidationError('上架的棧板必須指定儲位', field='position')


def plan_create(state: PalletState) -> PalletTransition:
    validate_state(state)
    if not state.is_stored:
        return PalletTransition()
    return PalletTransition(
        stock_delta=state.quantity,
        movement_type=PALLET_STORED,
        occupy_position_id=state.position_id,
    )


def plan_update(old: PalletState, new: PalletState) -> PalletTransition:
    """
    Minimal consistent delta between two pallet states.

    stored -> not stored: give back the old quantity and free the old slot.
    not stored -> stored: add the new quantity and take the new slot.
    stored -> stored: add the quantity difference; move slots if changed.
    """
    validate_state(new)

    if old.is_stored and not new.is_stored:
        return PalletTransition(
            stock_delta=-old.quantity,
            movement_type=PALLET_UNSTORED,
            release_position_id=old.position_id,
        )

    if not old.is_stored and new.is_stored:
        return PalletTransition(
            stock_delta=new.quantity,
            movement_type=PALLET_STORED,
            occupy_position_id=new.position_id,
        )

    if old.is_stored and new.is_stored:
        moved = new.position_id != old.position_id
        return PalletTransition(
            stock_delta=new.quantity - old.quantity,
            movement_type=PALLET_ADJUSTED,
            release_position_id=old.position_id if moved else None,
            occupy_position_id=new.position_id if moved else None,
        )

    return PalletTransition()


def plan_delete(old: PalletState) -> PalletTransition:
    # Historical drift must not block deletion, so the reversal clamps at zero.
    if not old.is_stored:
        return PalletTransition()
    return PalletTransition(
        stock_delta=-old.quantity,
        movement_type=PALLET_DELETED,
        release_position_id=old.position_id,
        clamp=True,
    )
