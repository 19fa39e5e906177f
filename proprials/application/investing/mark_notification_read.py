"""
Use case: Mark a notification as read.

Input: MarkNotificationReadCommand (notification_id)
Output: Notification
Side effects: Persists the read flag. Marking twice is harmless.
Failure cases: NotificationNotFoundError.
"""

import logging

from proprials.application.investing.dtos import MarkNotificationReadCommand
from proprials.domain.investing.entities import Notification
from proprials.domain.investing.errors import NotificationNotFoundError
from proprials.domain.investing.ports import NotificationRepository

logger = logging.getLogger(__name__)


class MarkNotificationReadUseCase:
    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def execute(self, command: MarkNotificationReadCommand) -> Notification:
        notification = await self._notification_repo.get(command.notification_id)
        if notification is None:
            raise NotificationNotFoundError(command.notification_id)
        if notification.read:
            return notification

        notification = notification.mark_read()
        await self._notification_repo.save(notification)
        logger.info("Notification %s marked as read", notification.id)
        return notification
