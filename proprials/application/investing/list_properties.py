"""
Use case: List the property catalog.

Input: None
Output: list[Property]
Side effects: None.
Failure cases: None.
"""

import logging

from proprials.domain.investing.entities import Property
from proprials.domain.investing.ports import LedgerRepository

logger = logging.getLogger(__name__)


class ListPropertiesUseCase:
    """Returns every listing, open or not, in catalog order."""

    def __init__(self, ledger_repo: LedgerRepository) -> None:
        self._ledger_repo = ledger_repo

    async def execute(self) -> list[Property]:
        properties = await self._ledger_repo.list_properties()
        logger.debug("Listing %d properties", len(properties))
        return properties
