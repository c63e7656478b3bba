"""
Seed catalog for the portal: pharmacy products, doctors, bookable slots and
the welcome notifications every fresh snapshot starts with.
"""

from datetime import datetime
from typing import Any

from healthplus.domain.entities import Doctor, Notification, Product
from healthplus.domain.snapshot import Snapshot
from healthplus.domain.value_objects import NotificationType

PRODUCTS_CATALOG: list[dict[str, Any]] = [
    {"id": "prod_1", "name": "Blood Pressure Monitor", "price": 2999, "category": "monitoring", "stock": 42, "image": "💓"},
    {"id": "prod_2", "name": "Diabetes Test Strips", "price": 899, "category": "testing", "stock": 150, "image": "🧪"},
    {"id": "prod_3", "name": "Oxygen Concentrator", "price": 45999, "category": "therapy", "stock": 8, "image": "🌬️"},
    {"id": "prod_4", "name": "Digital Thermometer", "price": 499, "category": "monitoring", "stock": 89, "image": "🌡️"},
    {"id": "prod_5", "name": "Wheelchair Premium", "price": 12999, "category": "mobility", "stock": 15, "image": "🦽"},
    {"id": "prod_6", "name": "Multivitamin Tablets", "price": 699, "category": "medicine", "stock": 200, "image": "💊"},
    {"id": "prod_7", "name": "First Aid Kit", "price": 1499, "category": "emergency", "stock": 35, "image": "🩹"},
    {"id": "prod_8", "name": "Pulse Oximeter", "price": 1299, "category": "monitoring", "stock": 67, "image": "🩸"},
]

DOCTORS_CATALOG: list[dict[str, Any]] = [
    {"id": "doc_1", "name": "Dr. Sharma", "specialty": "Cardiology", "fee": 800, "rating": 4.8, "available": True},
    {"id": "doc_2", "name": "Dr. Patel", "specialty": "Dermatology", "fee": 600, "rating": 4.6, "available": True},
    {"id": "doc_3", "name": "Dr. Gupta", "specialty": "Pediatrics", "fee": 500, "rating": 4.9, "available": True},
    {"id": "doc_4", "name": "Dr. Reddy", "specialty": "Orthopedics", "fee": 700, "rating": 4.7, "available": False},
    {"id": "doc_5", "name": "Dr. Kumar", "specialty": "Neurology", "fee": 900, "rating": 4.8, "available": True},
]

TIME_SLOTS: tuple[str, ...] = ("09:00", "10:00", "11:00", "12:00", "14:00", "15:00", "16:00", "17:00")

WELCOME_NOTIFICATIONS: list[dict[str, Any]] = [
    {
        "id": "notif_1",
        "title": "Welcome!",
        "message": "Your account is ready",
        "time": datetime(2024, 1, 20, 10, 0),
        "type": NotificationType.SYSTEM,
    },
    {
        "id": "notif_2",
        "title": "Appointment Reminder",
        "message": "Dr. Sharma tomorrow at 14:00",
        "time": datetime(2024, 1, 20, 14, 30),
        "type": NotificationType.APPOINTMENT,
    },
]


def initial_snapshot() -> Snapshot:
    """Build the snapshot a fresh process starts from."""
    return Snapshot(
        products=tuple(Product(**data) for data in PRODUCTS_CATALOG),
        doctors=tuple(Doctor(**data) for data in DOCTORS_CATALOG),
        time_slots=TIME_SLOTS,
        notifications=tuple(Notification(**data) for data in WELCOME_NOTIFICATIONS),
    )
