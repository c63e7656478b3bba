"""
Portal Domain Value Objects
"""

from .appointment_status import AppointmentStatus
from .order_status import OrderStatus, PaymentMethod, PaymentStatus
from .portal_types import ChatSender, NotificationType, UserRole

__all__ = [
    "AppointmentStatus",
    "OrderStatus",
    "PaymentStatus",
    "PaymentMethod",
    "UserRole",
    "NotificationType",
    "ChatSender",
]
