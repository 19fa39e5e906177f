"""
Demo property catalog.

The listings a fresh installation starts with when
SEED_DEMO_CATALOG is enabled.
"""

from decimal import Decimal

from proprials.domain.investing.entities import (
    Property,
    PropertyCategory,
    PropertyStatus,
)


def demo_properties() -> list[Property]:
    """Return the three demo listings, all priced at 500 per share."""
    return [
        Property(
            id="1",
            title="Luxury Apartment Complex - Downtown",
            description=(
                "A premium residential complex in the heart of downtown "
                "with modern amenities and excellent ROI potential."
            ),
            location="New York, NY",
            price=Decimal("5000000"),
            total_shares=10_000,
            available_shares=7_500,
            price_per_share=Decimal("500"),
            expected_return=Decimal("12.5"),
            duration_months=36,
            images=("https://images.unsplash.com/photo-1545324418-cc1a3fa10c00",),
            status=PropertyStatus.ACTIVE,
            category=PropertyCategory.RESIDENTIAL,
        ),
        Property(
            id="2",
            title="Commercial Office Building",
            description=(
                "Prime commercial real estate with long-term lease "
                "agreements and stable income."
            ),
            location="San Francisco, CA",
            price=Decimal("8000000"),
            total_shares=16_000,
            available_shares=12_000,
            price_per_share=Decimal("500"),
            expected_return=Decimal("10.8"),
            duration_months=48,
            images=("https://images.unsplash.com/photo-1497366216548-37526070297c",),
            status=PropertyStatus.ACTIVE,
            category=PropertyCategory.COMMERCIAL,
        ),
        Property(
            id="3",
            title="Industrial Warehouse Facility",
            description=(
                "Modern warehouse facility with excellent logistics "
                "connectivity and high demand."
            ),
            location="Chicago, IL",
            price=Decimal("3500000"),
            total_shares=7_000,
            available_shares=5_000,
            price_per_share=Decimal("500"),
            expected_return=Decimal("14.2"),
            duration_months=30,
            images=("https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d",),
            status=PropertyStatus.ACTIVE,
            category=PropertyCategory.INDUSTRIAL,
        ),
    ]
