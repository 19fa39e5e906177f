"""
Data Transfer Objects for the investing application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PurchaseSharesCommand:
    """Input DTO for buying shares in a property.

    Attributes:
        user_id: Buyer, as issued by the identity provider.
        property_id: Listing to buy into.
        shares: Number of shares to buy. Must be a positive integer.
    """

    user_id: str
    property_id: str
    shares: int


@dataclass(frozen=True)
class DepositFundsCommand:
    """Input DTO for crediting a wallet.

    Attributes:
        user_id: Wallet owner.
        amount: Amount to credit. Must be strictly positive.
    """

    user_id: str
    amount: Decimal


@dataclass(frozen=True)
class GetPropertyQuery:
    property_id: str


@dataclass(frozen=True)
class ListInvestmentsQuery:
    user_id: str


@dataclass(frozen=True)
class GetInvestmentQuery:
    investment_id: str


@dataclass(frozen=True)
class GetWalletQuery:
    user_id: str


@dataclass(frozen=True)
class GetPortfolioSummaryQuery:
    user_id: str


@dataclass(frozen=True)
class ListNotificationsQuery:
    """Input DTO for a user's notification feed.

    Attributes:
        user_id: Feed owner.
        unread_only: Drop notifications already marked as read.
    """

    user_id: str
    unread_only: bool = False


@dataclass(frozen=True)
class MarkNotificationReadCommand:
    notification_id: str
