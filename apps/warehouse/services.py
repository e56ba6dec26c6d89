"""
Slot allocation services.
"""
import logging

from django.core.exceptions import ObjectDoesNotExist

from apps.core.exceptions import SlotAlreadyOccupiedError, SlotNotFoundError
from apps.core.utils import pk_of
from .models import Position

logger = logging.getLogger(__name__)


class SlotAllocator:
    """
    Owns position occupancy.

    All methods run inside the caller's unit of work and lock the positions
    they touch, so two commands racing for one slot are serialized.
    """

    @staticmethod
    def lock_position(uow, position_id):
        try:
            return uow.lock(Position, position_id)
        except Position.DoesNotExist:
            raise SlotNotFoundError(position_id)

    @staticmethod
    def holder_id(position):
        """Return the id of the pallet bound to the position, if any."""
        try:
            return position.pallet.pk
        except ObjectDoesNotExist:
            return None

    @classmethod
    def occupy(cls, uow, position_id, pallet=None):
        """
        Mark a position occupied for the given pallet.
        Occupying a position the pallet already holds is a no-op.
        """
        position = cls.lock_position(uow, position_id)
        return cls._occupy(uow, position, pallet)

    @classmethod
    def release(cls, uow, position_id):
        """Mark a position free. Releasing a free position is a no-op."""
        position = cls.lock_position(uow, position_id)
        return cls._release(uow, position)

    @classmethod
    def rebind(cls, uow, old_position_id, new_position_id, pallet):
        """Move a pallet's binding from one position to another."""
        if old_position_id == new_position_id:
            return cls.occupy(uow, new_position_id, pallet)

        positions = uow.lock_many(Position, [old_position_id, new_position_id])
        if new_position_id not in positions:
            raise SlotNotFoundError(new_position_id)
        if old_position_id not in positions:
            raise SlotNotFoundError(old_position_id)

        new_position = cls._occupy(uow, positions[new_position_id], pallet)
        cls._release(uow, positions[old_position_id])
        return new_position

    @classmethod
    def _occupy(cls, uow, position, pallet):
        pallet_id = pk_of(pallet)
        holder_id = cls.holder_id(position)

        if holder_id is not None and holder_id != pallet_id:
            raise SlotAlreadyOccupiedError(position.pk, holder_id)

        if position.is_occupied and holder_id is None:
            logger.warning(f'Position {position.pk} flagged occupied with no pallet; reclaiming')

        if holder_id is not None and position.is_occupied:
            return position

        position.is_occupied = True
        position.updated_by = uow.user
        position.save(update_fields=['is_occupied', 'updated_by', 'updated_at'])
        return position

    @staticmethod
    def _release(uow, position):
        if not position.is_occupied:
            logger.debug(f'Position {position.pk} already free')
            return position

        position.is_occupied = False
        position.updated_by = uow.user
        position.save(update_fields=['is_occupied', 'updated_by', 'updated_at'])
        return position
