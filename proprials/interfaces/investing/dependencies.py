"""
Dependency injection for the investing bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the investing context.

The stores, the lock registry and the publisher are process-wide
singletons; tests swap them through ``app.dependency_overrides``.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from proprials.application.investing.deposit_funds import DepositFundsUseCase
from proprials.application.investing.get_investment import GetInvestmentUseCase
from proprials.application.investing.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from proprials.application.investing.get_property import GetPropertyUseCase
from proprials.application.investing.get_wallet import GetWalletUseCase
from proprials.application.investing.list_investments import ListInvestmentsUseCase
from proprials.application.investing.list_notifications import ListNotificationsUseCase
from proprials.application.investing.list_properties import ListPropertiesUseCase
from proprials.application.investing.locking import KeyedLocks
from proprials.application.investing.mark_notification_read import (
    MarkNotificationReadUseCase,
)
from proprials.application.investing.purchase_shares import PurchaseSharesUseCase
from proprials.core.config import settings
from proprials.domain.investing.ports import (
    LedgerEventPublisher,
    LedgerRepository,
    NotificationRepository,
)
from proprials.infrastructure.investing.demo_catalog import demo_properties
from proprials.infrastructure.investing.event_publisher import NotificationEventPublisher
from proprials.infrastructure.investing.in_memory_ledger import InMemoryLedgerRepository
from proprials.infrastructure.investing.notification_repository import (
    InMemoryNotificationRepository,
)

logger = logging.getLogger(__name__)


@lru_cache
def get_ledger_repository() -> LedgerRepository:
    """Build the process-wide ledger store from application settings."""
    repo = InMemoryLedgerRepository(latency_seconds=settings.simulated_latency_seconds)
    if settings.seed_demo_catalog:
        repo.load(properties=demo_properties())
        logger.info("Seeded demo property catalog")
    return repo


@lru_cache
def get_notification_repository() -> NotificationRepository:
    return InMemoryNotificationRepository()


@lru_cache
def get_keyed_locks() -> KeyedLocks:
    return KeyedLocks()


@lru_cache
def get_event_publisher() -> LedgerEventPublisher:
    """Build the process-wide publisher over the feed and configured webhooks.

    Raises:
        ValueError: If a configured webhook URL is not http/https.
    """
    return NotificationEventPublisher(
        get_notification_repository(),
        webhook_urls=settings.notification_webhook_urls,
        webhook_timeout=settings.webhook_timeout_seconds,
    )


def get_purchase_shares_use_case(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
    locks: KeyedLocks = Depends(get_keyed_locks),
    publisher: LedgerEventPublisher = Depends(get_event_publisher),
) -> PurchaseSharesUseCase:
    """Build PurchaseSharesUseCase with its infrastructure dependencies."""
    return PurchaseSharesUseCase(ledger_repo=ledger_repo, locks=locks, publisher=publisher)


def get_deposit_funds_use_case(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
    locks: KeyedLocks = Depends(get_keyed_locks),
    publisher: LedgerEventPublisher = Depends(get_event_publisher),
) -> DepositFundsUseCase:
    """Build DepositFundsUseCase with its infrastructure dependencies."""
    return DepositFundsUseCase(ledger_repo=ledger_repo, locks=locks, publisher=publisher)


def get_list_properties_use_case(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
) -> ListPropertiesUseCase:
    return ListPropertiesUseCase(ledger_repo=ledger_repo)


def get_property_use_case(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
) -> GetPropertyUseCase:
    return GetPropertyUseCase(ledger_repo=ledger_repo)


def get_list_investments_use_case(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
) -> ListInvestmentsUseCase:
    return ListInvestmentsUseCase(ledger_repo=ledger_repo)


def get_investment_use_case(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
) -> GetInvestmentUseCase:
    return GetInvestmentUseCase(ledger_repo=ledger_repo)


def get_wallet_use_case(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
) -> GetWalletUseCase:
    return GetWalletUseCase(ledger_repo=ledger_repo)


def get_portfolio_summary_use_case(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
) -> GetPortfolioSummaryUseCase:
    return GetPortfolioSummaryUseCase(ledger_repo=ledger_repo)


def get_list_notifications_use_case(
    notification_repo: NotificationRepository = Depends(get_notification_repository),
) -> ListNotificationsUseCase:
    return ListNotificationsUseCase(notification_repo=notification_repo)


def get_mark_notification_read_use_case(
    notification_repo: NotificationRepository = Depends(get_notification_repository),
) -> MarkNotificationReadUseCase:
    return MarkNotificationReadUseCase(notification_repo=notification_repo)
