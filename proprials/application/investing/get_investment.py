"""
Use case: Look up one investment with its property.

Input: GetInvestmentQuery (investment_id)
Output: InvestmentView
Side effects: None.
Failure cases: InvestmentNotFoundError.
"""

from proprials.application.investing.dtos import GetInvestmentQuery
from proprials.application.investing.list_investments import attach_property
from proprials.domain.investing.entities import InvestmentView
from proprials.domain.investing.errors import InvestmentNotFoundError
from proprials.domain.investing.ports import LedgerRepository


class GetInvestmentUseCase:
    def __init__(self, ledger_repo: LedgerRepository) -> None:
        self._ledger_repo = ledger_repo

    async def execute(self, query: GetInvestmentQuery) -> InvestmentView:
        """Return the investment joined with its property.

        Raises:
            InvestmentNotFoundError: If the id is unknown.
        """
        investment = await self._ledger_repo.get_investment(query.investment_id)
        if investment is None:
            raise InvestmentNotFoundError(query.investment_id)
        return await attach_property(self._ledger_repo, investment)
