"""
Portal Reducer

``reduce(snapshot, action)`` is the only way a snapshot changes. It is pure:
the input is never mutated, it never raises, and an action that changes
nothing (unknown id, unknown action type, illegal status change) returns the
input snapshot object itself.
"""

import logging
from collections.abc import Mapping
from typing import Any

from healthplus.core.domain import append, merge_fields, prepend, update_by_id

from .actions import (
    Action,
    AddAppointment,
    AddDoctor,
    AddNotification,
    AddProduct,
    AddReview,
    AddToCart,
    ClearCart,
    EndSession,
    Login,
    Logout,
    PlaceOrder,
    ReadNotification,
    RemoveFromCart,
    RestoreCart,
    StartSession,
    UpdateAppointment,
    UpdateDoctor,
    UpdateOrder,
    UpdateProduct,
    UpdateProfile,
    UpdateStock,
)
from .entities import Appointment, Notification, Order, Product, SessionRecord
from .snapshot import Snapshot
from .value_objects import AppointmentStatus, OrderStatus

logger = logging.getLogger(__name__)


def reduce(snapshot: Snapshot, action: Action) -> Snapshot:
    """
    Apply exactly one action to a snapshot.

    Args:
        snapshot: Current state
        action: Action to apply

    Returns:
        The next snapshot, or ``snapshot`` unchanged for a no-op.
    """
    match action:
        # Session
        case Login(user=user, session=session):
            return snapshot.evolve(user=user, session=session)
        case Logout():
            if snapshot.user is None and snapshot.session is None:
                return snapshot
            return snapshot.evolve(user=None, session=None)
        case UpdateProfile(updates=updates):
            if snapshot.user is None:
                return snapshot
            user = merge_fields(snapshot.user, updates, protected=("id", "role"))
            return snapshot if user is snapshot.user else snapshot.evolve(user=user)

        # Appointments
        case AddAppointment(appointment=appointment):
            return snapshot.evolve(appointments=append(snapshot.appointments, appointment))
        case UpdateAppointment(id=appointment_id, updates=updates):
            appointments = update_by_id(
                snapshot.appointments, appointment_id, lambda apt: _merge_appointment(apt, updates)
            )
            return _with(snapshot, "appointments", appointments)

        # Teleconsultation
        case StartSession(session=session):
            if snapshot.active_session is not None:
                logger.debug("A teleconsultation is already active, START_SESSION ignored")
                return snapshot
            return snapshot.evolve(active_session=session)
        case EndSession(ended_at=ended_at, duration=duration):
            active = snapshot.active_session
            if active is None:
                return snapshot
            record = SessionRecord(
                appointment_id=active.appointment_id,
                doctor_id=active.doctor_id,
                patient_id=active.patient_id,
                started_at=active.started_at,
                ended_at=ended_at,
                duration=duration,
            )
            return snapshot.evolve(
                active_session=None,
                session_history=append(snapshot.session_history, record),
            )

        # Cart
        case AddToCart(product_id=product_id, quantity=quantity):
            existing = snapshot.cart.get(product_id, 0)
            return snapshot.evolve(cart={**snapshot.cart, product_id: existing + quantity})
        case RemoveFromCart(product_id=product_id):
            if product_id not in snapshot.cart:
                return snapshot
            return snapshot.evolve(cart={pid: qty for pid, qty in snapshot.cart.items() if pid != product_id})
        case ClearCart():
            return snapshot.evolve(cart={}) if snapshot.cart else snapshot
        case RestoreCart(cart=cart):
            return snapshot.evolve(cart={pid: qty for pid, qty in cart.items() if qty > 0})

        # Orders
        case PlaceOrder(order=order):
            return snapshot.evolve(orders=prepend(snapshot.orders, order), cart={})
        case UpdateOrder(id=order_id, updates=updates):
            orders = update_by_id(snapshot.orders, order_id, lambda order: _merge_order(order, updates))
            return _with(snapshot, "orders", orders)

        # Notifications
        case AddNotification(notification=notification):
            return snapshot.evolve(notifications=prepend(snapshot.notifications, notification))
        case ReadNotification(id=notification_id):
            notifications = update_by_id(snapshot.notifications, notification_id, _mark_read)
            return _with(snapshot, "notifications", notifications)

        # Catalog
        case AddProduct(product=product):
            return snapshot.evolve(products=append(snapshot.products, product))
        case UpdateProduct(id=product_id, updates=updates):
            products = update_by_id(snapshot.products, product_id, lambda product: merge_fields(product, updates))
            return _with(snapshot, "products", products)
        case UpdateStock(id=product_id, quantity=quantity):
            products = update_by_id(
                snapshot.products, product_id, lambda product: _decrement_stock(product, quantity)
            )
            return _with(snapshot, "products", products)
        case AddDoctor(doctor=doctor):
            return snapshot.evolve(doctors=append(snapshot.doctors, doctor))
        case UpdateDoctor(id=doctor_id, updates=updates):
            doctors = update_by_id(snapshot.doctors, doctor_id, lambda doctor: merge_fields(doctor, updates))
            return _with(snapshot, "doctors", doctors)
        case AddReview(review=review):
            return snapshot.evolve(reviews=append(snapshot.reviews, review))

        case _:
            logger.debug(f"Ignoring unknown action {action!r}")
            return snapshot


def _with(snapshot: Snapshot, name: str, collection: tuple[Any, ...]) -> Snapshot:
    """Swap in a collection unless the update turned out to be a no-op."""
    if collection is getattr(snapshot, name):
        return snapshot
    return snapshot.evolve(**{name: collection})


def _merge_appointment(appointment: Appointment, updates: Mapping[str, Any]) -> Appointment:
    """Merge appointment updates, refusing status changes the lifecycle forbids."""
    if "status" in updates:
        try:
            target = AppointmentStatus.from_string(str(updates["status"]))
        except ValueError:
            logger.debug(f"Unknown appointment status {updates['status']!r}, update ignored")
            return appointment
        if not appointment.status.can_transition_to(target):
            logger.debug(f"Appointment {appointment.id}: {appointment.status} -> {target} not allowed, update ignored")
            return appointment
        updates = {**updates, "status": target}
    return merge_fields(appointment, updates)


def _merge_order(order: Order, updates: Mapping[str, Any]) -> Order:
    """
    Merge order updates. ``shipped_at`` and ``delivered_at`` follow the
    requested status and are stamped with the update's ``updated_at``.
    """
    updates = {k: v for k, v in updates.items() if k not in ("shipped_at", "delivered_at")}
    if "status" in updates:
        try:
            status = OrderStatus.from_string(str(updates["status"]))
        except ValueError:
            logger.debug(f"Unknown order status {updates['status']!r}, update ignored")
            return order
        updates["status"] = status
        stamp = updates.get("updated_at", order.updated_at)
        if status == OrderStatus.SHIPPED:
            updates["shipped_at"] = stamp
        elif status == OrderStatus.DELIVERED:
            updates["delivered_at"] = stamp
    return merge_fields(order, updates)


def _mark_read(notification: Notification) -> Notification:
    if notification.read:
        return notification
    return merge_fields(notification, {"read": True})


def _decrement_stock(product: Product, quantity: int) -> Product:
    # No clamping: over-decrementing is a workflow bug and must stay visible.
    return merge_fields(product, {"stock": product.stock - quantity})
