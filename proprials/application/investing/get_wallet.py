"""
Use case: Read a user's wallet and transaction history.

Input: GetWalletQuery (user_id)
Output: Wallet
Side effects: None. Wallets are only opened by a first deposit.
Failure cases: WalletNotFoundError.
"""

from proprials.application.investing.dtos import GetWalletQuery
from proprials.domain.investing.entities import Wallet
from proprials.domain.investing.errors import WalletNotFoundError
from proprials.domain.investing.ports import LedgerRepository


class GetWalletUseCase:
    def __init__(self, ledger_repo: LedgerRepository) -> None:
        self._ledger_repo = ledger_repo

    async def execute(self, query: GetWalletQuery) -> Wallet:
        wallet = await self._ledger_repo.get_wallet(query.user_id)
        if wallet is None:
            raise WalletNotFoundError(query.user_id)
        return wallet
