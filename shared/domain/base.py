"""
Domain building blocks

- Entity: identified by a database-assigned integer id
- ValueObject: immutable, compared field by field
- Aggregate: entity that records domain events until a unit of work takes them
- DomainEvent: something that happened, published after commit

All bases are keyword-only dataclasses so subclasses can declare required
fields after the defaulted ``id`` and ``created_at``.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(kw_only=True)
class Entity(ABC):
    """
    Identity-based object

    ``id`` is None until the repository has inserted the row. Two
    persisted entities of the same class are equal when their ids are;
    an unsaved entity is only equal to itself.
    """
    id: int | None = None
    created_at: datetime | None = None

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        return hash((type(self).__name__, self.id)) if self.id is not None else id(self)


@dataclass(frozen=True)
class ValueObject(ABC):
    """Immutable value without identity"""


@dataclass(kw_only=True, eq=False)
class Aggregate(Entity):
    """
    Consistency boundary

    Subclasses are declared with ``eq=False`` so the identity equality of
    Entity is kept.
    """
    _events: list['DomainEvent'] = field(default_factory=list, repr=False, init=False, compare=False)

    def add_event(self, event: 'DomainEvent'):
        self._events.append(event)

    def clear_events(self):
        self._events.clear()

    @property
    def events(self) -> list['DomainEvent']:
        """Recorded events not yet collected, as a copy"""
        return list(self._events)


@dataclass(kw_only=True)
class DomainEvent:
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=datetime.now)
    aggregate_id: int | None = None

    def payload(self) -> dict:
        """Fields specific to the event type"""
        return {}

    def to_dict(self) -> dict:
        return {
            'event_id': str(self.event_id),
            'event_type': type(self).__name__,
            'occurred_at': self.occurred_at.isoformat(),
            'aggregate_id': self.aggregate_id,
            **self.payload(),
        }
