"""
Portal Actions

The closed set of state changes the reducer understands. Each action is an
immutable record tagged with an :class:`ActionType`; ``Action`` is the union
of all of them and is matched exhaustively by the reducer.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from .entities import (
    Appointment,
    Doctor,
    Notification,
    Order,
    Product,
    Review,
    Session,
    TeleconsultationSession,
    User,
)


class ActionType(str, Enum):
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    UPDATE_PROFILE = "UPDATE_PROFILE"
    ADD_APPOINTMENT = "ADD_APPOINTMENT"
    UPDATE_APPOINTMENT = "UPDATE_APPOINTMENT"
    START_SESSION = "START_SESSION"
    END_SESSION = "END_SESSION"
    ADD_TO_CART = "ADD_TO_CART"
    REMOVE_FROM_CART = "REMOVE_FROM_CART"
    CLEAR_CART = "CLEAR_CART"
    RESTORE_CART = "RESTORE_CART"
    PLACE_ORDER = "PLACE_ORDER"
    UPDATE_ORDER = "UPDATE_ORDER"
    ADD_NOTIFICATION = "ADD_NOTIFICATION"
    READ_NOTIFICATION = "READ_NOTIFICATION"
    ADD_PRODUCT = "ADD_PRODUCT"
    UPDATE_PRODUCT = "UPDATE_PRODUCT"
    ADD_DOCTOR = "ADD_DOCTOR"
    UPDATE_DOCTOR = "UPDATE_DOCTOR"
    ADD_REVIEW = "ADD_REVIEW"
    UPDATE_STOCK = "UPDATE_STOCK"


@dataclass(frozen=True)
class BaseAction:
    """Common base so every action exposes its tag."""

    type: ClassVar[ActionType]


# Session


@dataclass(frozen=True)
class Login(BaseAction):
    type: ClassVar[ActionType] = ActionType.LOGIN
    user: User
    session: Session


@dataclass(frozen=True)
class Logout(BaseAction):
    type: ClassVar[ActionType] = ActionType.LOGOUT


@dataclass(frozen=True)
class UpdateProfile(BaseAction):
    type: ClassVar[ActionType] = ActionType.UPDATE_PROFILE
    updates: Mapping[str, Any] = field(default_factory=dict)


# Appointments and teleconsultation


@dataclass(frozen=True)
class AddAppointment(BaseAction):
    type: ClassVar[ActionType] = ActionType.ADD_APPOINTMENT
    appointment: Appointment


@dataclass(frozen=True)
class UpdateAppointment(BaseAction):
    type: ClassVar[ActionType] = ActionType.UPDATE_APPOINTMENT
    id: str
    updates: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StartSession(BaseAction):
    type: ClassVar[ActionType] = ActionType.START_SESSION
    session: TeleconsultationSession


@dataclass(frozen=True)
class EndSession(BaseAction):
    type: ClassVar[ActionType] = ActionType.END_SESSION
    ended_at: datetime
    duration: int


# Cart and orders


@dataclass(frozen=True)
class AddToCart(BaseAction):
    """Adds ``quantity`` (which may be negative) to a cart line."""

    type: ClassVar[ActionType] = ActionType.ADD_TO_CART
    product_id: str
    quantity: int


@dataclass(frozen=True)
class RemoveFromCart(BaseAction):
    type: ClassVar[ActionType] = ActionType.REMOVE_FROM_CART
    product_id: str


@dataclass(frozen=True)
class ClearCart(BaseAction):
    type: ClassVar[ActionType] = ActionType.CLEAR_CART


@dataclass(frozen=True)
class RestoreCart(BaseAction):
    type: ClassVar[ActionType] = ActionType.RESTORE_CART
    cart: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class PlaceOrder(BaseAction):
    type: ClassVar[ActionType] = ActionType.PLACE_ORDER
    order: Order


@dataclass(frozen=True)
class UpdateOrder(BaseAction):
    type: ClassVar[ActionType] = ActionType.UPDATE_ORDER
    id: str
    updates: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateStock(BaseAction):
    """Decrements a product's stock. Callers must have checked availability."""

    type: ClassVar[ActionType] = ActionType.UPDATE_STOCK
    id: str
    quantity: int


# Notifications


@dataclass(frozen=True)
class AddNotification(BaseAction):
    type: ClassVar[ActionType] = ActionType.ADD_NOTIFICATION
    notification: Notification


@dataclass(frozen=True)
class ReadNotification(BaseAction):
    type: ClassVar[ActionType] = ActionType.READ_NOTIFICATION
    id: str


# Catalog


@dataclass(frozen=True)
class AddProduct(BaseAction):
    type: ClassVar[ActionType] = ActionType.ADD_PRODUCT
    product: Product


@dataclass(frozen=True)
class UpdateProduct(BaseAction):
    type: ClassVar[ActionType] = ActionType.UPDATE_PRODUCT
    id: str
    updates: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AddDoctor(BaseAction):
    type: ClassVar[ActionType] = ActionType.ADD_DOCTOR
    doctor: Doctor


@dataclass(frozen=True)
class UpdateDoctor(BaseAction):
    type: ClassVar[ActionType] = ActionType.UPDATE_DOCTOR
    id: str
    updates: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AddReview(BaseAction):
    type: ClassVar[ActionType] = ActionType.ADD_REVIEW
    review: Review


Action = (
    Login
    | Logout
    | UpdateProfile
    | AddAppointment
    | UpdateAppointment
    | StartSession
    | EndSession
    | AddToCart
    | RemoveFromCart
    | ClearCart
    | RestoreCart
    | PlaceOrder
    | UpdateOrder
    | UpdateStock
    | AddNotification
    | ReadNotification
    | AddProduct
    | UpdateProduct
    | AddDoctor
    | UpdateDoctor
    | AddReview
)
