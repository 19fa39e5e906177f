"""
Ledger events for the investing bounded context.

Emitted by mutating use cases after a change has been committed.
Subscribers (notifications, webhooks) learn about purchases and
deposits from these instead of polling the stores.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from proprials.domain.investing.entities import Investment, Transaction, utc_now


@dataclass(frozen=True)
class LedgerEvent:
    """Base class for committed ledger changes."""

    user_id: str
    occurred_at: datetime = field(default_factory=utc_now, kw_only=True)

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class SharesPurchased(LedgerEvent):
    """A share purchase was committed."""

    investment: Investment
    transaction: Transaction
    property_title: str


@dataclass(frozen=True)
class FundsDeposited(LedgerEvent):
    """A wallet deposit was committed."""

    transaction: Transaction
    balance: Decimal
