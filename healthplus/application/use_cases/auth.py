"""
Authentication Use Cases

Mock login, two-step registration with a one-time code, logout and profile
updates. Nothing here talks to a real identity provider.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from healthplus.core.domain import ValidationException
from healthplus.domain.actions import Login, Logout, UpdateProfile
from healthplus.domain.entities import Session, User
from healthplus.domain.value_objects import NotificationType, UserRole

from ..context import PendingRegistration
from .base import PortalUseCase, WorkflowResult

logger = logging.getLogger(__name__)

ADMIN_DISPLAY_NAME = "Admin User"
DEFAULT_PATIENT_NAME = "John Doe"
DEFAULT_MOBILE = "+919876543210"


@dataclass
class LoginRequest:
    email: str
    password: str = ""
    name: str = ""
    mobile: str = ""


@dataclass
class RegisterRequest:
    name: str
    email: str
    mobile: str = ""


class LoginUseCase(PortalUseCase):
    """
    Use Case: Login

    Anyone whose email contains the admin marker becomes an administrator.
    This mirrors the mock backend and is not an access-control mechanism.
    """

    async def execute(self, request: LoginRequest) -> WorkflowResult:
        if not request.email or not request.email.strip():
            logger.warning("Login rejected: email missing")
            raise ValidationException("Email is required", field="email")

        await self._network(self.settings.LOGIN_DELAY, "login")

        result = self._commit(self._login_actions(request.email.strip(), request.name, request.mobile))
        user = result.snapshot.user
        logger.info(f"User logged in: {user.id} ({user.role})")
        return WorkflowResult(actions=result.actions, value=user, snapshot=result.snapshot)

    def _login_actions(self, email: str, name: str, mobile: str) -> list:
        now = self.ids.now()
        is_admin = self.settings.ADMIN_EMAIL_MARKER in email

        user = User(
            id=self.ids.new_id("user"),
            email=email,
            name=ADMIN_DISPLAY_NAME if is_admin else (name or DEFAULT_PATIENT_NAME),
            role=UserRole.ADMIN if is_admin else UserRole.PATIENT,
            mobile=mobile or DEFAULT_MOBILE,
            joined_at=now,
        )
        session = Session(
            token=self.ids.token(),
            expires_at=now + timedelta(days=self.settings.SESSION_LIFETIME_DAYS),
            last_login=now,
        )
        return [
            Login(user=user, session=session),
            self._notification("Login Successful", f"Welcome {user.name}", NotificationType.SYSTEM),
        ]


class RegisterUseCase(PortalUseCase):
    """
    Use Case: Register (step one)

    Issues a six digit one-time code through an "OTP Sent" notification and
    remembers the pending registration until it is verified.
    """

    async def execute(self, request: RegisterRequest) -> WorkflowResult:
        if not request.email or not request.name:
            logger.warning("Registration rejected: name or email missing")
            raise ValidationException("Name and email are required", field="email")

        await self._network(self.settings.REGISTER_DELAY, "register")

        code = self.ids.otp()
        self.context.pending_registration = PendingRegistration(
            name=request.name,
            email=request.email.strip(),
            mobile=request.mobile,
            otp=code,
        )
        logger.info(f"OTP issued for {request.email}")
        return self._commit(
            [self._notification("OTP Sent", f"Your OTP is {code}", NotificationType.SYSTEM)],
            value=code,
        )


class VerifyOtpUseCase(LoginUseCase):
    """
    Use Case: Register (step two)

    A matching code finalizes the pending registration as a login.
    """

    async def execute(self, otp: str) -> WorkflowResult:  # type: ignore[override]
        pending = self.context.pending_registration
        if pending is None:
            logger.warning("OTP verification rejected: no pending registration")
            raise ValidationException("No registration in progress", field="otp")
        if otp.strip() != pending.otp:
            logger.warning(f"OTP verification rejected for {pending.email}")
            raise ValidationException("Invalid OTP", field="otp")

        await self._network(self.settings.LOGIN_DELAY, "verify_otp")

        self.context.pending_registration = None
        result = self._commit(self._login_actions(pending.email, pending.name, pending.mobile))
        logger.info(f"Registration completed: {result.snapshot.user.id}")
        return WorkflowResult(actions=result.actions, value=result.snapshot.user, snapshot=result.snapshot)


class LogoutUseCase(PortalUseCase):
    """Use Case: Logout. A live teleconsultation is left running."""

    async def execute(self) -> WorkflowResult:
        user = self.store.snapshot.user
        result = self._commit([Logout()])
        if user is not None:
            logger.info(f"User logged out: {user.id}")
        return result


class UpdateProfileUseCase(PortalUseCase):
    """Use Case: Update the signed-in user's profile (id and role are fixed)."""

    async def execute(self, updates: dict[str, Any]) -> WorkflowResult:
        user = self._require_user("Profile update")
        result = self._commit([UpdateProfile(updates=dict(updates))])
        logger.info(f"Profile updated: {user.id}")
        return WorkflowResult(actions=result.actions, value=result.snapshot.user, snapshot=result.snapshot)
