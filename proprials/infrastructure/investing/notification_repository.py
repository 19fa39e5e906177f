"""
Adapter: In-process notification store.

Implements NotificationRepository.
"""

from typing import Optional

from proprials.domain.investing.entities import Notification
from proprials.domain.investing.ports import NotificationRepository


class InMemoryNotificationRepository(NotificationRepository):
    """Keeps notifications in a dictionary, remembering insertion order."""

    def __init__(self) -> None:
        self._notifications: dict[str, Notification] = {}
        self._sequence: dict[str, int] = {}

    async def save(self, notification: Notification) -> None:
        self._sequence.setdefault(notification.id, len(self._sequence))
        self._notifications[notification.id] = notification

    async def get(self, notification_id: str) -> Optional[Notification]:
        return self._notifications.get(notification_id)

    async def list_for_user(self, user_id: str) -> list[Notification]:
        owned = [n for n in self._notifications.values() if n.user_id == user_id]
        # Ties on created_at fall back to insertion order.
        return sorted(
            owned,
            key=lambda n: (n.created_at, self._sequence[n.id]),
            reverse=True,
        )
