"""
Pydantic schemas for investing API request/response validation.

These schemas enforce input validation and define the API contract.
All fields use strict typing with constraints.
No business logic belongs here.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

ID_MIN_LEN = 1
ID_MAX_LEN = 64
USER_ID_DESCRIPTION = "User id issued by the identity provider"


class PurchaseSharesRequest(BaseModel):
    """Request schema for buying shares.

    Attributes:
        user_id: Buyer.
        property_id: Listing to buy into.
        shares: Number of shares (at least 1).
    """

    user_id: str = Field(
        ..., min_length=ID_MIN_LEN, max_length=ID_MAX_LEN, description=USER_ID_DESCRIPTION
    )
    property_id: str = Field(..., min_length=ID_MIN_LEN, max_length=ID_MAX_LEN)
    shares: int = Field(..., ge=1, description="Number of shares to buy")


class DepositRequest(BaseModel):
    """Request schema for a wallet deposit."""

    amount: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2)


class PropertyItem(BaseModel):
    """A property listing in the response."""

    id: str
    title: str
    description: str
    location: str
    price: Decimal
    total_shares: int
    available_shares: int
    price_per_share: Decimal
    expected_return: Decimal
    duration_months: int
    images: list[str]
    status: str
    category: str
    funded_pct: Decimal
    created_at: datetime


class PropertyListResponse(BaseModel):
    properties: list[PropertyItem]


class InvestmentItem(BaseModel):
    """An investment, with its property when the listing still exists."""

    id: str
    property_id: str
    user_id: str
    shares: int
    amount: Decimal
    status: str
    purchased_at: datetime
    expected_return: Decimal
    expected_return_amount: Decimal
    projected_value: Decimal
    property: Optional[PropertyItem] = None


class InvestmentListResponse(BaseModel):
    investments: list[InvestmentItem]


class TransactionItem(BaseModel):
    """A wallet ledger entry. Debits carry a negative amount."""

    id: str
    wallet_id: str
    type: str
    amount: Decimal
    description: str
    status: str
    created_at: datetime


class WalletResponse(BaseModel):
    id: str
    user_id: str
    balance: Decimal
    transactions: list[TransactionItem]


class PortfolioSummaryResponse(BaseModel):
    """Totals shown on the portfolio screen."""

    user_id: str
    total_invested: Decimal
    total_shares: int
    expected_returns: Decimal
    active_investments: int
    investment_count: int


class NotificationItem(BaseModel):
    id: str
    user_id: str
    title: str
    message: str
    type: str
    read: bool
    created_at: datetime


class NotificationListResponse(BaseModel):
    notifications: list[NotificationItem]
    unread_count: int


class HealthResponse(BaseModel):
    """Liveness report with the size of the loaded catalog."""

    status: str
    version: str
    properties: int = Field(..., ge=0)
    uptime_seconds: float = Field(..., ge=0)


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
