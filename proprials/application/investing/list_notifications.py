"""
Use case: Read a user's notification feed.

Input: ListNotificationsQuery (user_id, unread_only)
Output: list[Notification], newest first
Side effects: None.
Failure cases: None.
"""

from proprials.application.investing.dtos import ListNotificationsQuery
from proprials.domain.investing.entities import Notification
from proprials.domain.investing.ports import NotificationRepository


class ListNotificationsUseCase:
    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def execute(self, query: ListNotificationsQuery) -> list[Notification]:
        notifications = await self._notification_repo.list_for_user(query.user_id)
        if query.unread_only:
            return [n for n in notifications if not n.read]
        return notifications
