"""
Port interfaces (ABCs) for the investing bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from proprials.domain.investing.entities import (
    Investment,
    Notification,
    Property,
    Wallet,
)
from proprials.domain.investing.events import LedgerEvent


class LedgerRepository(ABC):
    """Port over property, wallet, investment and transaction storage.

    Transactions are stored inside their wallet. Every method returns
    immutable snapshots, so callers never observe a half-applied change.
    """

    @abstractmethod
    async def list_properties(self) -> list[Property]:
        """Return every property in catalog order."""
        raise NotImplementedError

    @abstractmethod
    async def get_property(self, property_id: str) -> Optional[Property]:
        """Return a property by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def save_property(self, prop: Property) -> None:
        """Insert or replace a property listing."""
        raise NotImplementedError

    @abstractmethod
    async def delete_property(self, property_id: str) -> None:
        """Remove a property listing. Unknown ids are ignored.

        Investments that reference the property are left untouched.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_wallet(self, user_id: str) -> Optional[Wallet]:
        """Return the wallet owned by a user, or None."""
        raise NotImplementedError

    @abstractmethod
    async def save_wallet(self, wallet: Wallet) -> None:
        """Insert or replace a wallet together with its transactions."""
        raise NotImplementedError

    @abstractmethod
    async def get_investment(self, investment_id: str) -> Optional[Investment]:
        """Return an investment by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def list_investments(self, user_id: str) -> list[Investment]:
        """Return a user's investments in purchase order."""
        raise NotImplementedError

    @abstractmethod
    async def commit_purchase(
        self, prop: Property, wallet: Wallet, investment: Investment
    ) -> None:
        """Persist the three results of a share purchase as one unit.

        Either all of them become visible or none does.
        """
        raise NotImplementedError


class NotificationRepository(ABC):
    """Port for persisting and retrieving user notifications."""

    @abstractmethod
    async def save(self, notification: Notification) -> None:
        """Insert or replace a notification."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, notification_id: str) -> Optional[Notification]:
        """Return a notification by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[Notification]:
        """Return a user's notifications, newest first."""
        raise NotImplementedError


class LedgerEventPublisher(ABC):
    """Port for announcing committed ledger changes."""

    @abstractmethod
    async def publish(self, event: LedgerEvent) -> None:
        """Deliver an event to subscribers.

        Must not raise for subscriber failures: the ledger change
        is already committed when this is called.
        """
        raise NotImplementedError
