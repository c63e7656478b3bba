"""
Portal enums that carry no transition rules.
"""

from healthplus.core.domain import StatusEnum


class UserRole(StatusEnum):
    """Account role, fixed when the user is created."""

    PATIENT = "patient"
    ADMIN = "admin"


class NotificationType(StatusEnum):
    """Feed category of a notification."""

    SYSTEM = "system"
    APPOINTMENT = "appointment"
    CART = "cart"
    ORDER = "order"


class ChatSender(StatusEnum):
    """Author of a teleconsultation chat message."""

    SYSTEM = "system"
    PATIENT = "patient"
    DOCTOR = "doctor"
