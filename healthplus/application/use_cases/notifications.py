"""
Notification Use Cases
"""

import logging

from healthplus.domain.actions import ReadNotification

from .base import PortalUseCase, WorkflowResult

logger = logging.getLogger(__name__)


class MarkNotificationReadUseCase(PortalUseCase):
    """Use Case: Mark one notification read. Unknown ids and repeats change nothing."""

    async def execute(self, notification_id: str) -> WorkflowResult:
        return self._commit([ReadNotification(id=notification_id)])


class MarkAllNotificationsReadUseCase(PortalUseCase):
    async def execute(self) -> WorkflowResult:
        unread = [n.id for n in self.store.snapshot.notifications if not n.read]
        if not unread:
            return self._unchanged(0)
        result = self._commit([ReadNotification(id=notification_id) for notification_id in unread], value=len(unread))
        logger.info(f"Marked {len(unread)} notifications read")
        return result
