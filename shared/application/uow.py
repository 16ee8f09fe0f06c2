"""
Unit of Work

One unit of work is one database transaction. Command handlers open it
around every write; aggregates hand their pending domain events to it,
and the events reach the message bus only once the transaction has
committed. A rolled back unit publishes nothing.
"""

from abc import ABC, abstractmethod
import logging

from django.db import transaction

from shared.domain.base import Aggregate, DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Transaction boundary that gathers events from the aggregates it touched"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        ...

    @abstractmethod
    def rollback(self):
        ...

    @abstractmethod
    def collect_events(self, aggregate: Aggregate):
        ...


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Unit of work over ``transaction.atomic``

    Usage:
        with DjangoUnitOfWork(message_bus) as uow:
            booking = booking_repo.get_by_id(booking_id, lock=True)
            previous = booking.apply(BookingAction.CANCEL)
            booking_repo.save_status(booking, expected=previous, action=BookingAction.CANCEL)
            uow.collect_events(booking)
        # BookingStatusChanged is published here, after COMMIT

    Nested inside another atomic block (a test case, an outer unit) the
    unit becomes a savepoint and its events wait for the outermost commit.
    Any exception raised in the block, a caller's timeout included, undoes
    every write made in it.
    """

    def __init__(self, message_bus=None, using: str | None = None):
        self._message_bus = message_bus
        self._using = using
        self._pending: list[DomainEvent] = []
        self._atomic = None

    def __enter__(self):
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            self._atomic.__exit__(exc_type, exc_val, exc_tb)
            self._atomic = None

    def commit(self):
        """Hand the gathered events to ``on_commit``; the atomic block does the COMMIT"""
        events, self._pending = self._pending, []
        logger.debug(f"Unit of work closing with {len(events)} pending event(s)")
        if events and self._message_bus is not None:
            transaction.on_commit(lambda: self._publish(events), using=self._using)

    def rollback(self):
        if self._pending:
            logger.warning(f"Transaction rolled back, dropping {len(self._pending)} event(s)")
        else:
            logger.debug("Transaction rolled back")
        self._pending = []

    def collect_events(self, aggregate: Aggregate):
        """Move the aggregate's recorded events into this unit"""
        events = aggregate.events
        if not events:
            return
        self._pending.extend(events)
        aggregate.clear_events()
        logger.debug(f"{type(aggregate).__name__} {aggregate.id} recorded {len(events)} event(s)")

    def _publish(self, events: list[DomainEvent]):
        logger.info(f"Publishing {len(events)} committed event(s)")
        try:
            self._message_bus.publish_events(events)
        except Exception as e:
            # The data is committed; a failed publish cannot undo it
            logger.error(f"Publishing committed events failed: {e}", exc_info=True)
