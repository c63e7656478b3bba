"""
Use Case Base

Shared plumbing for the portal workflows: the result type, login checks,
notification building and the atomic commit of an action burst.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from healthplus.core.domain import ValidationException
from healthplus.domain.actions import Action, AddNotification
from healthplus.domain.entities import Notification, User
from healthplus.domain.snapshot import Snapshot
from healthplus.domain.value_objects import NotificationType
from healthplus.infrastructure import simulate_api

from ..context import PortalContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkflowResult:
    """
    Outcome of a workflow.

    ``actions`` is the exact burst that was dispatched (empty when the
    workflow decided nothing had to change), ``value`` the primary entity
    produced and ``snapshot`` the state right after the burst.
    """

    actions: tuple[Action, ...] = field(default_factory=tuple)
    value: Any = None
    snapshot: Snapshot | None = None

    @property
    def changed(self) -> bool:
        return bool(self.actions)


def format_amount(amount: float) -> str:
    """Render a rupee amount without a trailing ``.0`` for whole numbers."""
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


class PortalUseCase:
    """Base class for workflows running against a :class:`PortalContext`."""

    def __init__(self, context: PortalContext):
        self.context = context

    @property
    def store(self):
        return self.context.store

    @property
    def settings(self):
        return self.context.settings

    @property
    def ids(self):
        return self.context.ids

    async def _network(self, delay: float, operation: str) -> None:
        await simulate_api(delay, operation=operation)

    def _require_user(self, operation: str) -> User:
        user = self.store.snapshot.user
        if user is None:
            logger.warning(f"{operation} rejected: no user logged in")
            raise ValidationException("Please login first", field="user")
        return user

    def _notification(self, title: str, message: str, type: NotificationType) -> AddNotification:
        return AddNotification(
            notification=Notification(
                id=self.ids.new_id("notif"),
                title=title,
                message=message,
                time=self.ids.now(),
                type=type,
            )
        )

    def _commit(self, actions: Sequence[Action], value: Any = None) -> WorkflowResult:
        snapshot = self.store.dispatch_all(actions)
        return WorkflowResult(actions=tuple(actions), value=value, snapshot=snapshot)

    def _unchanged(self, value: Any = None) -> WorkflowResult:
        return WorkflowResult(actions=(), value=value, snapshot=self.store.snapshot)
