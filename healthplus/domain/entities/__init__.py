"""
Portal Domain Entities
"""

from .appointment import Appointment, SessionRecord, TeleconsultationSession
from .catalog import Doctor, Product, Review
from .notification import Notification
from .order import Order, OrderItem
from .user import Session, User

__all__ = [
    "User",
    "Session",
    "Doctor",
    "Product",
    "Review",
    "Appointment",
    "TeleconsultationSession",
    "SessionRecord",
    "Order",
    "OrderItem",
    "Notification",
]
