"""
Domain entities for the investing bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
All entities are immutable: state changes produce a new instance.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from proprials.domain.investing.errors import (
    InsufficientBalanceError,
    InvalidTransactionStateError,
    TransactionNotFoundError,
)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id(prefix: str) -> str:
    """Return a fresh identifier such as ``inv-1f3a9c0d2b4e``."""
    return f"{prefix}-{uuid4().hex[:12]}"


def wallet_id_for(user_id: str) -> str:
    return f"wallet-{user_id}"


class PropertyStatus(Enum):
    """Lifecycle of a property listing."""

    ACTIVE = "active"
    FUNDED = "funded"
    COMPLETED = "completed"


class PropertyCategory(Enum):
    """Kind of real estate behind a listing."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


class TransactionKind(Enum):
    """What caused a wallet balance change."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    INVESTMENT = "investment"
    RETURN = "return"


class TransactionStatus(Enum):
    """Settlement state of a wallet transaction."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class InvestmentStatus(Enum):
    """Lifecycle of an investment position."""

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class NotificationKind(Enum):
    """Severity/category of a user notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Property:
    """A property listing split into equally priced shares.

    Invariant: ``0 <= available_shares <= total_shares``.
    """

    id: str
    title: str
    total_shares: int
    available_shares: int
    price_per_share: Decimal
    expected_return: Decimal
    status: PropertyStatus = PropertyStatus.ACTIVE
    description: str = ""
    location: str = ""
    price: Decimal = ZERO
    duration_months: int = 0
    images: tuple[str, ...] = ()
    category: PropertyCategory = PropertyCategory.RESIDENTIAL
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not 0 <= self.available_shares <= self.total_shares:
            raise ValueError(
                f"available_shares must be within 0..{self.total_shares}, "
                f"got {self.available_shares}"
            )

    @property
    def is_open(self) -> bool:
        return self.status is PropertyStatus.ACTIVE

    @property
    def sold_shares(self) -> int:
        return self.total_shares - self.available_shares

    @property
    def funded_pct(self) -> Decimal:
        """Percentage of shares already sold."""
        if self.total_shares == 0:
            return ZERO
        return Decimal(self.sold_shares) * HUNDRED / Decimal(self.total_shares)

    def cost_of(self, shares: int) -> Decimal:
        return self.price_per_share * shares

    def sell(self, shares: int) -> "Property":
        """Return a copy with ``shares`` fewer available.

        The status is left alone; a sold-out listing stays ACTIVE with
        nothing left to sell.
        """
        return replace(self, available_shares=self.available_shares - shares)


@dataclass(frozen=True)
class Transaction:
    """An immutable ledger entry on a wallet.

    ``amount`` is signed: credits are positive, debits negative.
    """

    wallet_id: str
    kind: TransactionKind
    amount: Decimal
    description: str = ""
    status: TransactionStatus = TransactionStatus.COMPLETED
    id: str = field(default_factory=lambda: new_id("tx"))
    created_at: datetime = field(default_factory=utc_now)

    def transition(self, status: TransactionStatus) -> "Transaction":
        """Return a copy moved from PENDING to a final status."""
        if self.status is not TransactionStatus.PENDING or status is TransactionStatus.PENDING:
            raise InvalidTransactionStateError(self.status.value, status.value)
        return replace(self, status=status)


@dataclass(frozen=True)
class Wallet:
    """A user's cash balance and its append-only transaction history.

    Invariant: ``balance`` equals the sum of the signed amounts of all
    completed transactions.
    """

    user_id: str
    id: str = ""
    balance: Decimal = ZERO
    transactions: tuple[Transaction, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", wallet_id_for(self.user_id))

    @property
    def ledger_balance(self) -> Decimal:
        """Balance recomputed from the transaction history."""
        return sum(
            (tx.amount for tx in self.transactions if tx.status is TransactionStatus.COMPLETED),
            ZERO,
        )

    def apply(self, transaction: Transaction) -> "Wallet":
        """Return a copy with ``transaction`` appended.

        Completed transactions move the balance; a debit that would take
        the balance below zero is refused.
        """
        balance = self.balance
        if transaction.status is TransactionStatus.COMPLETED:
            balance = balance + transaction.amount
            if balance < ZERO:
                raise InsufficientBalanceError(-transaction.amount, self.balance)
        return replace(
            self,
            balance=balance,
            transactions=self.transactions + (transaction,),
        )

    def settle(self, transaction_id: str, status: TransactionStatus) -> "Wallet":
        """Return a copy with a pending transaction moved to ``status``.

        Completing the entry applies its amount to the balance; failing
        it leaves the balance as is.

        Raises:
            TransactionNotFoundError: If the wallet holds no such entry.
            InvalidTransactionStateError: If the entry is not pending.
            InsufficientBalanceError: If completing a debit would overdraw.
        """
        for index, tx in enumerate(self.transactions):
            if tx.id == transaction_id:
                break
        else:
            raise TransactionNotFoundError(transaction_id)

        settled = tx.transition(status)
        balance = self.balance
        if settled.status is TransactionStatus.COMPLETED:
            balance = balance + settled.amount
            if balance < ZERO:
                raise InsufficientBalanceError(-settled.amount, self.balance)
        transactions = self.transactions[:index] + (settled,) + self.transactions[index + 1 :]
        return replace(self, balance=balance, transactions=transactions)


@dataclass(frozen=True)
class Investment:
    """A user's share purchase in a property.

    Property and wallet are referenced by id only.
    """

    property_id: str
    user_id: str
    shares: int
    amount: Decimal
    expected_return: Decimal
    status: InvestmentStatus = InvestmentStatus.ACTIVE
    id: str = field(default_factory=lambda: new_id("inv"))
    purchased_at: datetime = field(default_factory=utc_now)

    @property
    def expected_return_amount(self) -> Decimal:
        return self.amount * self.expected_return / HUNDRED

    @property
    def projected_value(self) -> Decimal:
        return self.amount + self.expected_return_amount


@dataclass(frozen=True)
class InvestmentView:
    """An investment joined with a snapshot of its property.

    ``property`` is None when the listing no longer exists.
    """

    investment: Investment
    property: Optional[Property] = None


@dataclass(frozen=True)
class PortfolioSummary:
    """Totals over a user's investments."""

    user_id: str
    total_invested: Decimal = ZERO
    total_shares: int = 0
    expected_returns: Decimal = ZERO
    active_investments: int = 0
    investment_count: int = 0


@dataclass(frozen=True)
class Notification:
    """A message shown in the user's notification feed."""

    user_id: str
    title: str
    message: str
    kind: NotificationKind = NotificationKind.INFO
    read: bool = False
    id: str = field(default_factory=lambda: new_id("ntf"))
    created_at: datetime = field(default_factory=utc_now)

    def mark_read(self) -> "Notification":
        return replace(self, read=True)
