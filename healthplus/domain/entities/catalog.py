"""
Catalog Entities

Doctors that can be booked, pharmacy products that can be bought, and the
reviews patients leave for doctors.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Doctor:
    """Bookable doctor. ``fee`` is the consultation charge in rupees."""

    id: str
    name: str
    specialty: str
    fee: float
    rating: float = 0.0
    available: bool = True
    joined_at: datetime | None = None


@dataclass(frozen=True)
class Product:
    """
    Pharmacy product.

    ``stock`` is only ever decremented by a completed checkout; the workflows
    guarantee it never goes below zero.
    """

    id: str
    name: str
    price: float
    category: str
    stock: int
    image: str = ""
    created_at: datetime | None = None

    def has_stock_for(self, quantity: int) -> bool:
        """Check if ``quantity`` units can be taken from stock."""
        return 0 < quantity <= self.stock


@dataclass(frozen=True)
class Review:
    id: str
    doctor_id: str
    patient_id: str
    rating: int
    comment: str = ""
    appointment_id: str | None = None
    created_at: datetime | None = None
