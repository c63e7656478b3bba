"""
User and Session Entities

The signed-in account and its (simulated) session token.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..value_objects import UserRole


@dataclass(frozen=True)
class User:
    """
    Signed-in portal account.

    The role is decided once at login and never changes afterwards.
    """

    id: str
    email: str
    name: str
    role: UserRole = UserRole.PATIENT
    mobile: str = ""
    joined_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "mobile": self.mobile,
            "joined_at": self.joined_at.isoformat() if self.joined_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Rebuild a user from :meth:`to_dict` output."""
        joined_at = data.get("joined_at")
        return cls(
            id=data["id"],
            email=data["email"],
            name=data["name"],
            role=UserRole.from_string(data.get("role", UserRole.PATIENT.value)),
            mobile=data.get("mobile", ""),
            joined_at=datetime.fromisoformat(joined_at) if joined_at else None,
        )


@dataclass(frozen=True)
class Session:
    """Mock authentication session attached to the signed-in user."""

    token: str
    expires_at: datetime
    last_login: datetime | None = None
