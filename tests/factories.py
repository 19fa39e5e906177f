"""Builders for domain objects used across the test suite."""

from decimal import Decimal

from proprials.domain.investing.entities import (
    Property,
    PropertyStatus,
    Transaction,
    TransactionKind,
    Wallet,
)


def make_property(
    property_id: str = "p1",
    available: int = 100,
    total: int = 200,
    price: str = "500",
    status: PropertyStatus = PropertyStatus.ACTIVE,
) -> Property:
    """Build a listing priced at ``price`` per share."""
    return Property(
        id=property_id,
        title=f"Test Property {property_id}",
        total_shares=total,
        available_shares=available,
        price_per_share=Decimal(price),
        expected_return=Decimal("12.5"),
        status=status,
    )


def funded_wallet(user_id: str, balance: str) -> Wallet:
    """Build a wallet whose balance comes from a single deposit."""
    wallet = Wallet(user_id=user_id)
    if Decimal(balance) == 0:
        return wallet
    return wallet.apply(
        Transaction(
            wallet_id=wallet.id,
            kind=TransactionKind.DEPOSIT,
            amount=Decimal(balance),
            description="Seed deposit",
        )
    )
