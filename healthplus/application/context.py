"""
Portal Context

Bundles the collaborators every use case needs so they can be passed around
explicitly instead of living in module globals.
"""

from dataclasses import dataclass

from healthplus.config import Settings
from healthplus.config.catalog_seed import initial_snapshot
from healthplus.domain.pricing import PricingService
from healthplus.domain.snapshot import Snapshot
from healthplus.infrastructure import CallTimer, IdentifierSource

from .consultation_room import ConsultationRoom
from .store import Store


@dataclass
class PendingRegistration:
    """Registration waiting for its one-time code."""

    name: str
    email: str
    mobile: str
    otp: str


@dataclass
class PortalContext:
    store: Store
    settings: Settings
    ids: IdentifierSource
    pricing: PricingService
    room: ConsultationRoom
    pending_registration: PendingRegistration | None = None

    @classmethod
    def create(
        cls,
        settings: Settings,
        ids: IdentifierSource | None = None,
        initial: Snapshot | None = None,
    ) -> "PortalContext":
        """Build a context around a fresh store seeded with the catalog."""
        return cls(
            store=Store(initial if initial is not None else initial_snapshot()),
            settings=settings,
            ids=ids or IdentifierSource(),
            pricing=PricingService(
                free_shipping_threshold=settings.FREE_SHIPPING_THRESHOLD,
                shipping_fee=settings.SHIPPING_FEE,
            ),
            room=ConsultationRoom(CallTimer(tick_seconds=settings.CALL_TIMER_TICK_SECONDS)),
        )
