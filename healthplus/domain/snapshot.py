"""
Portal Snapshot

The complete, immutable state of every portal entity at one point in time.
Only the reducer produces new snapshots.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .entities import (
    Appointment,
    Doctor,
    Notification,
    Order,
    Product,
    Review,
    Session,
    SessionRecord,
    TeleconsultationSession,
    User,
)


@dataclass(frozen=True)
class Snapshot:
    """
    Unified portal state.

    Collections are tuples and ``cart`` maps product id to quantity; none of
    them is mutated in place, so snapshots can share structure freely.
    """

    user: User | None = None
    session: Session | None = None

    appointments: tuple[Appointment, ...] = ()
    active_session: TeleconsultationSession | None = None
    session_history: tuple[SessionRecord, ...] = ()

    products: tuple[Product, ...] = ()
    cart: Mapping[str, int] = field(default_factory=dict)
    orders: tuple[Order, ...] = ()

    doctors: tuple[Doctor, ...] = ()
    time_slots: tuple[str, ...] = ()
    reviews: tuple[Review, ...] = ()

    notifications: tuple[Notification, ...] = ()

    def evolve(self, **changes: Any) -> "Snapshot":
        """Return a copy with ``changes`` applied, sharing everything else."""
        return dataclasses.replace(self, **changes)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
