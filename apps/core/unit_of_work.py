"""
Explicit unit of work for multi-step inventory commands.

Every command that touches more than one aggregate (pallet + product + position,
order + products, ...) runs inside exactly one UnitOfWork. Sub-steps receive the
same instance so they share its transaction, its row locks and its acting user.
"""
import logging
from contextlib import contextmanager

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, DatabaseError, OperationalError, connections, transaction

from .exceptions import ContentionError

logger = logging.getLogger(__name__)

# Substrings of driver messages for lock timeouts, deadlocks and
# serialization failures (PostgreSQL, MySQL, SQLite).
CONTENTION_MARKERS = (
    'lock',
    'deadlock',
    'could not serialize',
    'timeout',
)


def is_contention(exc):
    """Return True if a database error was caused by lock contention."""
    message = str(exc).lower()
    return any(marker in message for marker in CONTENTION_MARKERS)


class UnitOfWork:
    """
    One transactional scope shared by a command and all of its sub-steps.

    Usage:
        with UnitOfWork(user=request.user) as uow:
            PalletService.create_pallet(data, uow=uow)
            uow.commit()

    The outcome is explicit: leaving the block without calling commit(), or
    through an exception, rolls everything back.
    """

    def __init__(self, user=None, using=DEFAULT_DB_ALIAS, lock_timeout=None):
        if user is not None and not getattr(user, 'is_authenticated', False):
            user = None
        self.user = user
        self.using = using
        if lock_timeout is None:
            lock_timeout = getattr(settings, 'INVENTORY_LOCK_TIMEOUT', 5)
        self.lock_timeout = lock_timeout
        self.committed = False
        self.rolled_back = False
        self._commit_requested = False
        self._atomic = None
        self._saved_lock_timeout = None

    def __enter__(self):
        if self._atomic is not None:
            raise RuntimeError('Unit of work is already active')
        self._atomic = transaction.atomic(using=self.using)
        self._atomic.__enter__()
        self._apply_lock_timeout()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None and not self._commit_requested:
            transaction.set_rollback(True, using=self.using)

        atomic, self._atomic = self._atomic, None
        try:
            atomic.__exit__(exc_type, exc, tb)
        except OperationalError as commit_exc:
            self.rolled_back = True
            if is_contention(commit_exc):
                logger.warning(f'Commit failed on contention: {commit_exc}')
                raise ContentionError() from commit_exc
            raise
        finally:
            self._restore_lock_timeout()

        if exc_type is None and self._commit_requested:
            self.committed = True
        else:
            self.rolled_back = True

        if exc_type is not None and issubclass(exc_type, OperationalError) and is_contention(exc):
            logger.warning(f'Unit of work rolled back on contention: {exc}')
            raise ContentionError() from exc
        return False

    @property
    def active(self):
        return self._atomic is not None

    def commit(self):
        """Mark the unit of work to be committed when its block exits."""
        if not self.active:
            raise RuntimeError('Cannot commit an inactive unit of work')
        self._commit_requested = True

    def rollback(self):
        """Discard every change made in this unit of work."""
        if not self.active:
            raise RuntimeError('Cannot roll back an inactive unit of work')
        self._commit_requested = False
        transaction.set_rollback(True, using=self.using)

    def lock(self, model, pk):
        """Fetch one row with a write lock held until the unit of work ends."""
        return (
            model._default_manager.using(self.using)
            .select_for_update()
            .get(pk=pk)
        )

    def lock_many(self, model, pks):
        """
        Lock several rows of one table in ascending primary-key order.
        Returns a dict keyed by primary key; missing keys are absent.
        """
        pks = sorted({pk for pk in pks if pk is not None})
        if not pks:
            return {}
        rows = (
            model._default_manager.using(self.using)
            .select_for_update()
            .filter(pk__in=pks)
            .order_by('pk')
        )
        return {row.pk: row for row in rows}

    def savepoint(self):
        """Nested atomic block whose failure leaves the unit of work usable."""
        return transaction.atomic(using=self.using)

    def _apply_lock_timeout(self):
        connection = connections[self.using]
        if connection.vendor == 'postgresql':
            with connection.cursor() as cursor:
                cursor.execute(
                    "SELECT set_config('lock_timeout', %s, true)",
                    [f'{int(self.lock_timeout * 1000)}ms']
                )
        elif connection.vendor == 'mysql':
            # MySQL only has a session-wide setting; the previous value is put
            # back when the unit of work exits.
            with connection.cursor() as cursor:
                cursor.execute('SELECT @@SESSION.innodb_lock_wait_timeout')
                self._saved_lock_timeout = cursor.fetchone()[0]
                cursor.execute(
                    'SET SESSION innodb_lock_wait_timeout = %s',
                    [max(1, int(self.lock_timeout))]
                )

    def _restore_lock_timeout(self):
        saved, self._saved_lock_timeout = self._saved_lock_timeout, None
        if saved is None:
            return
        try:
            with connections[self.using].cursor() as cursor:
                cursor.execute('SET SESSION innodb_lock_wait_timeout = %s', [saved])
        except DatabaseError as exc:
            logger.warning(f'Could not restore innodb_lock_wait_timeout={saved}: {exc}')


@contextmanager
def unit_of_work(uow=None, user=None):
    """
    Join the caller's unit of work, or open a new one and commit it when the
    block finishes without error.
    """
    if uow is not None:
        if not uow.active:
            raise RuntimeError('Cannot join an inactive unit of work')
        yield uow
        return

    with UnitOfWork(user=user) as own:
        yield own
        own.commit()
