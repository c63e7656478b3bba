"""
Derived Views

Pure read-only computations over a snapshot. Nothing here is cached; every
call recomputes from the snapshot it is given.
"""

from dataclasses import dataclass

from healthplus.core.domain import find_by_id

from .entities import Appointment, Doctor, Order, Product
from .snapshot import Snapshot
from .value_objects import AppointmentStatus, OrderStatus


@dataclass(frozen=True)
class AdminStats:
    """Dashboard aggregates for administrators."""

    total_revenue: float
    total_appointments: int
    total_orders: int
    total_patients: int


@dataclass(frozen=True)
class CartLine:
    """A cart entry joined with its product (``product`` is None if unknown)."""

    product_id: str
    quantity: int
    product: Product | None

    @property
    def total(self) -> float:
        return (self.product.price if self.product else 0) * self.quantity


def unread_notification_count(snapshot: Snapshot) -> int:
    return sum(1 for notification in snapshot.notifications if not notification.read)


def upcoming_appointments(snapshot: Snapshot) -> list[Appointment]:
    """Confirmed or in-session appointments, earliest first."""
    upcoming = [apt for apt in snapshot.appointments if apt.status.is_upcoming()]
    return sorted(upcoming, key=lambda apt: apt.sort_key)


def cart_lines(snapshot: Snapshot) -> list[CartLine]:
    return [
        CartLine(product_id=product_id, quantity=quantity, product=find_by_id(snapshot.products, product_id))
        for product_id, quantity in snapshot.cart.items()
    ]


def cart_total(snapshot: Snapshot) -> float:
    """Sum of price x quantity over the cart. Unknown products count as free."""
    return sum(line.total for line in cart_lines(snapshot))


def cart_item_count(snapshot: Snapshot) -> int:
    return sum(snapshot.cart.values())


def admin_stats(snapshot: Snapshot) -> AdminStats:
    """
    Recompute admin dashboard statistics.

    Patients are counted by de-duplicating appointment patient ids.
    """
    return AdminStats(
        total_revenue=sum(order.total_amount for order in snapshot.orders),
        total_appointments=len(snapshot.appointments),
        total_orders=len(snapshot.orders),
        total_patients=len({apt.patient_id for apt in snapshot.appointments}),
    )


def low_stock_products(snapshot: Snapshot, threshold: int) -> list[Product]:
    return [product for product in snapshot.products if product.stock < threshold]


def available_doctors(snapshot: Snapshot) -> list[Doctor]:
    return [doctor for doctor in snapshot.doctors if doctor.available]


def active_consultations(snapshot: Snapshot) -> list[Appointment]:
    return [apt for apt in snapshot.appointments if apt.status == AppointmentStatus.IN_SESSION]


def completed_appointment_count(snapshot: Snapshot) -> int:
    return sum(1 for apt in snapshot.appointments if apt.status == AppointmentStatus.COMPLETED)


def order_status_counts(snapshot: Snapshot) -> dict[str, int]:
    """Delivered vs still-pending order counts (cancelled orders are neither)."""
    delivered = sum(1 for order in snapshot.orders if order.status == OrderStatus.DELIVERED)
    pending = sum(1 for order in snapshot.orders if order.status.is_pending())
    return {"delivered": delivered, "pending": pending}


def appointments_for(snapshot: Snapshot, patient_id: str) -> list[Appointment]:
    return [apt for apt in snapshot.appointments if apt.patient_id == patient_id]


def orders_for(snapshot: Snapshot, patient_id: str) -> list[Order]:
    return [order for order in snapshot.orders if order.patient_id == patient_id]
