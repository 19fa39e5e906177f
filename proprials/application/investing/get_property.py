"""
Use case: Look up one property listing.

Input: GetPropertyQuery (property_id)
Output: Property
Side effects: None.
Failure cases: PropertyNotFoundError.
"""

from proprials.application.investing.dtos import GetPropertyQuery
from proprials.domain.investing.entities import Property
from proprials.domain.investing.errors import PropertyNotFoundError
from proprials.domain.investing.ports import LedgerRepository


class GetPropertyUseCase:
    def __init__(self, ledger_repo: LedgerRepository) -> None:
        self._ledger_repo = ledger_repo

    async def execute(self, query: GetPropertyQuery) -> Property:
        """Return the listing.

        Raises:
            PropertyNotFoundError: If the id is not in the catalog.
        """
        prop = await self._ledger_repo.get_property(query.property_id)
        if prop is None:
            raise PropertyNotFoundError(query.property_id)
        return prop
