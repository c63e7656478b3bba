"""
Portal workflows.

Each use case validates against the current snapshot, waits on the simulated
network and dispatches its actions as one burst.
"""

from .appointments import BookAppointmentRequest, BookAppointmentUseCase, CancelAppointmentUseCase
from .auth import (
    LoginRequest,
    LoginUseCase,
    LogoutUseCase,
    RegisterRequest,
    RegisterUseCase,
    UpdateProfileUseCase,
    VerifyOtpUseCase,
)
from .base import PortalUseCase, WorkflowResult
from .cart import AddToCartUseCase, ClearCartUseCase, DecrementCartLineUseCase, RemoveFromCartUseCase
from .catalog import (
    AddDoctorUseCase,
    AddProductUseCase,
    DoctorInput,
    ProductInput,
    ReviewInput,
    SubmitReviewUseCase,
    UpdateDoctorUseCase,
    UpdateProductUseCase,
)
from .notifications import MarkAllNotificationsReadUseCase, MarkNotificationReadUseCase
from .orders import CheckoutRequest, CheckoutUseCase, UpdateOrderStatusUseCase
from .teleconsultation import (
    EndTeleconsultationUseCase,
    SendChatMessageUseCase,
    StartTeleconsultationUseCase,
)

__all__ = [
    "PortalUseCase",
    "WorkflowResult",
    # Auth
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "VerifyOtpUseCase",
    "LogoutUseCase",
    "UpdateProfileUseCase",
    # Appointments
    "BookAppointmentRequest",
    "BookAppointmentUseCase",
    "CancelAppointmentUseCase",
    # Teleconsultation
    "StartTeleconsultationUseCase",
    "EndTeleconsultationUseCase",
    "SendChatMessageUseCase",
    # Cart
    "AddToCartUseCase",
    "DecrementCartLineUseCase",
    "RemoveFromCartUseCase",
    "ClearCartUseCase",
    # Orders
    "CheckoutRequest",
    "CheckoutUseCase",
    "UpdateOrderStatusUseCase",
    # Catalog
    "ProductInput",
    "DoctorInput",
    "ReviewInput",
    "AddProductUseCase",
    "UpdateProductUseCase",
    "AddDoctorUseCase",
    "UpdateDoctorUseCase",
    "SubmitReviewUseCase",
    # Notifications
    "MarkNotificationReadUseCase",
    "MarkAllNotificationsReadUseCase",
]
