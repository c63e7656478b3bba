"""
Notification Entity
"""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import NotificationType


@dataclass(frozen=True)
class Notification:
    """
    Feed entry emitted as a side effect of a workflow.

    Only ``read`` ever changes after creation.
    """

    id: str
    title: str
    message: str
    time: datetime
    type: NotificationType = NotificationType.SYSTEM
    read: bool = False
