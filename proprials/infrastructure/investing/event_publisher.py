"""
Ledger event delivery.

Turns committed ledger events into user-facing notifications and
forwards them to the configured channels:
    1. The in-app notification feed (NotificationRepository)
    2. HTTP webhook POST to configurable URLs
    3. In-process callback hooks (for logging, metrics, tests)

Usage:
    publisher = NotificationEventPublisher(notification_repo)
    publisher.add_webhook("https://hooks.example.com/ledger")
    await publisher.publish(event)

Delivery failures are logged and counted. They never propagate,
because the ledger change behind the event is already committed.
"""

import asyncio
import logging
import time
from typing import Any, Callable, Coroutine
from urllib.parse import urlparse

import httpx

from proprials.domain.investing.entities import Notification, NotificationKind
from proprials.domain.investing.events import FundsDeposited, LedgerEvent, SharesPurchased
from proprials.domain.investing.ports import LedgerEventPublisher, NotificationRepository

logger = logging.getLogger(__name__)

EventCallback = Callable[[LedgerEvent], Coroutine[Any, Any, None]]


def build_notification(event: LedgerEvent) -> Notification | None:
    """Render the feed entry for an event, or None for silent events."""
    if isinstance(event, SharesPurchased):
        inv = event.investment
        return Notification(
            user_id=event.user_id,
            title="Investment confirmed",
            message=(
                f"You bought {inv.shares} shares of {event.property_title} "
                f"for ${inv.amount:,}."
            ),
            kind=NotificationKind.SUCCESS,
            created_at=event.occurred_at,
        )
    if isinstance(event, FundsDeposited):
        return Notification(
            user_id=event.user_id,
            title="Deposit received",
            message=(
                f"${event.transaction.amount:,} was added to your wallet. "
                f"New balance: ${event.balance:,}."
            ),
            kind=NotificationKind.INFO,
            created_at=event.occurred_at,
        )
    return None


def event_to_dict(event: LedgerEvent) -> dict:
    """Serialize a ledger event for JSON transport."""
    payload: dict[str, Any] = {
        "event": event.name,
        "user_id": event.user_id,
        "occurred_at": event.occurred_at.isoformat(),
    }
    if isinstance(event, SharesPurchased):
        payload.update(
            investment_id=event.investment.id,
            property_id=event.investment.property_id,
            shares=event.investment.shares,
            amount=str(event.investment.amount),
            transaction_id=event.transaction.id,
        )
    elif isinstance(event, FundsDeposited):
        payload.update(
            transaction_id=event.transaction.id,
            amount=str(event.transaction.amount),
            balance=str(event.balance),
        )
    return payload


class NotificationEventPublisher(LedgerEventPublisher):
    """Multi-channel ledger event dispatcher.

    Args:
        notification_repo: Store for the in-app notification feed.
        webhook_urls: Initial list of webhook URLs to POST events to.
        webhook_timeout: HTTP timeout in seconds for webhook calls.
    """

    def __init__(
        self,
        notification_repo: NotificationRepository,
        webhook_urls: list[str] | None = None,
        webhook_timeout: float = 5.0,
    ) -> None:
        self._notification_repo = notification_repo
        self._webhook_urls: list[str] = []
        self._callbacks: list[EventCallback] = []
        self._webhook_timeout = webhook_timeout
        self._stats = {
            "events_published": 0,
            "notifications_stored": 0,
            "webhook_calls": 0,
            "callback_invocations": 0,
            "errors": 0,
        }
        for url in webhook_urls or []:
            self.add_webhook(url)

    @property
    def stats(self) -> dict:
        return dict(self._stats)

    @property
    def webhook_urls(self) -> list[str]:
        return list(self._webhook_urls)

    def add_webhook(self, url: str) -> None:
        """Register a webhook URL for event delivery.

        Raises:
            ValueError: If the URL is not http/https.
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            msg = f"Invalid webhook URL scheme: {parsed.scheme}"
            raise ValueError(msg)
        if url not in self._webhook_urls:
            self._webhook_urls.append(url)
            logger.info("Webhook registered: %s", url)

    def remove_webhook(self, url: str) -> None:
        if url in self._webhook_urls:
            self._webhook_urls.remove(url)
            logger.info("Webhook removed: %s", url)

    def add_callback(self, callback: EventCallback) -> None:
        """Register an async callback invoked for every event."""
        self._callbacks.append(callback)

    async def publish(self, event: LedgerEvent) -> None:
        self._stats["events_published"] += 1

        tasks = [self._store_notification(event)]
        tasks.extend(self._send_webhook(url, event) for url in self._webhook_urls)
        tasks.extend(self._send_callback(cb, event) for cb in self._callbacks)

        results = await asyncio.gather(*tasks, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                self._stats["errors"] += 1
                logger.error("Delivery of %s failed: %s", event.name, result)

    async def _store_notification(self, event: LedgerEvent) -> None:
        notification = build_notification(event)
        if notification is None:
            return
        await self._notification_repo.save(notification)
        self._stats["notifications_stored"] += 1

    async def _send_webhook(self, url: str, event: LedgerEvent) -> None:
        start = time.monotonic()
        async with httpx.AsyncClient(timeout=self._webhook_timeout) as client:
            resp = await client.post(
                url,
                json=event_to_dict(event),
                headers={"X-Proprials-Event": event.name},
            )
            resp.raise_for_status()
        self._stats["webhook_calls"] += 1
        logger.debug(
            "Webhook %s accepted %s in %.2f ms",
            url,
            event.name,
            (time.monotonic() - start) * 1000,
        )

    async def _send_callback(self, callback: EventCallback, event: LedgerEvent) -> None:
        await callback(event)
        self._stats["callback_invocations"] += 1
