"""
Adapter: In-process ledger store.

Implements LedgerRepository with plain dictionaries.
Every call first sleeps for the configured latency to mimic a
remote store, which also gives other tasks a chance to run.
"""

import asyncio
import logging
from collections.abc import Iterable
from typing import Optional

from proprials.domain.investing.entities import Investment, Property, Wallet
from proprials.domain.investing.ports import LedgerRepository

logger = logging.getLogger(__name__)


class InMemoryLedgerRepository(LedgerRepository):
    """Concrete adapter keeping the ledger in process memory.

    Stored entities are immutable, so handing them out directly
    cannot leak writes back into the store.
    """

    def __init__(self, latency_seconds: float = 0.0) -> None:
        self._latency = max(latency_seconds, 0.0)
        self._properties: dict[str, Property] = {}
        self._wallets: dict[str, Wallet] = {}
        self._investments: dict[str, Investment] = {}

    def load(
        self,
        properties: Iterable[Property] = (),
        wallets: Iterable[Wallet] = (),
    ) -> None:
        """Seed the store synchronously, e.g. at startup or in tests."""
        for prop in properties:
            self._properties[prop.id] = prop
        for wallet in wallets:
            self._wallets[wallet.user_id] = wallet
        logger.debug(
            "Ledger holds %d properties and %d wallets",
            len(self._properties),
            len(self._wallets),
        )

    async def _round_trip(self) -> None:
        await asyncio.sleep(self._latency)

    async def list_properties(self) -> list[Property]:
        await self._round_trip()
        return list(self._properties.values())

    async def get_property(self, property_id: str) -> Optional[Property]:
        await self._round_trip()
        return self._properties.get(property_id)

    async def save_property(self, prop: Property) -> None:
        await self._round_trip()
        self._properties[prop.id] = prop

    async def delete_property(self, property_id: str) -> None:
        await self._round_trip()
        self._properties.pop(property_id, None)

    async def get_wallet(self, user_id: str) -> Optional[Wallet]:
        await self._round_trip()
        return self._wallets.get(user_id)

    async def save_wallet(self, wallet: Wallet) -> None:
        await self._round_trip()
        self._wallets[wallet.user_id] = wallet

    async def get_investment(self, investment_id: str) -> Optional[Investment]:
        await self._round_trip()
        return self._investments.get(investment_id)

    async def list_investments(self, user_id: str) -> list[Investment]:
        await self._round_trip()
        return [inv for inv in self._investments.values() if inv.user_id == user_id]

    async def commit_purchase(
        self, prop: Property, wallet: Wallet, investment: Investment
    ) -> None:
        await self._round_trip()
        # No await below: the three writes land in one step of the event loop.
        self._properties[prop.id] = prop
        self._wallets[wallet.user_id] = wallet
        self._investments[investment.id] = investment
