"""
Use case: List a user's investments with their properties.

Input: ListInvestmentsQuery (user_id)
Output: list[InvestmentView]
Side effects: None.
Failure cases: None. A user without investments gets an empty list.
"""

import logging

from proprials.application.investing.dtos import ListInvestmentsQuery
from proprials.domain.investing.entities import Investment, InvestmentView
from proprials.domain.investing.ports import LedgerRepository

logger = logging.getLogger(__name__)


async def attach_property(
    ledger_repo: LedgerRepository, investment: Investment
) -> InvestmentView:
    """Join an investment with the current snapshot of its property.

    A property that has since been removed leaves the view's
    ``property`` unset.
    """
    prop = await ledger_repo.get_property(investment.property_id)
    if prop is None:
        logger.debug(
            "Investment %s references missing property %s",
            investment.id,
            investment.property_id,
        )
    return InvestmentView(investment=investment, property=prop)


class ListInvestmentsUseCase:
    """Returns the user's investments in purchase order."""

    def __init__(self, ledger_repo: LedgerRepository) -> None:
        self._ledger_repo = ledger_repo

    async def execute(self, query: ListInvestmentsQuery) -> list[InvestmentView]:
        investments = await self._ledger_repo.list_investments(query.user_id)
        return [await attach_property(self._ledger_repo, inv) for inv in investments]
