"""
Use case: Summarize a user's portfolio.

Input: GetPortfolioSummaryQuery (user_id)
Output: PortfolioSummary
Side effects: None.
Failure cases: None. An empty portfolio sums to zero.
"""

from proprials.application.investing.dtos import GetPortfolioSummaryQuery
from proprials.domain.investing.entities import (
    ZERO,
    InvestmentStatus,
    PortfolioSummary,
)
from proprials.domain.investing.ports import LedgerRepository


class GetPortfolioSummaryUseCase:
    """Totals invested amount, shares and expected yearly return.

    Expected returns use the rate snapshotted at purchase time, not
    the listing's current rate.
    """

    def __init__(self, ledger_repo: LedgerRepository) -> None:
        self._ledger_repo = ledger_repo

    async def execute(self, query: GetPortfolioSummaryQuery) -> PortfolioSummary:
        investments = await self._ledger_repo.list_investments(query.user_id)
        return PortfolioSummary(
            user_id=query.user_id,
            total_invested=sum((inv.amount for inv in investments), ZERO),
            total_shares=sum(inv.shares for inv in investments),
            expected_returns=sum(
                (inv.expected_return_amount for inv in investments), ZERO
            ),
            active_investments=sum(
                1 for inv in investments if inv.status is InvestmentStatus.ACTIVE
            ),
            investment_count=len(investments),
        )
