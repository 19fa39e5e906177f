"""
Use case: Credit a user's wallet.

Input: DepositFundsCommand (user_id, amount)
Output: Transaction
Side effects: Creates the wallet on first deposit, raises its balance,
    appends a deposit transaction and publishes FundsDeposited.
Failure cases: InvalidAmountError.
"""

import logging
from decimal import Decimal, InvalidOperation

from proprials.application.investing.dtos import DepositFundsCommand
from proprials.application.investing.locking import KeyedLocks, wallet_key
from proprials.domain.investing.entities import (
    Transaction,
    TransactionKind,
    TransactionStatus,
    Wallet,
)
from proprials.domain.investing.errors import InvalidAmountError
from proprials.domain.investing.events import FundsDeposited
from proprials.domain.investing.ports import LedgerEventPublisher, LedgerRepository

logger = logging.getLogger(__name__)


def validate_amount(amount: object) -> Decimal:
    """Return ``amount`` as a Decimal if it is finite and positive."""
    if isinstance(amount, bool):
        raise InvalidAmountError(amount)
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(amount) from None
    if not value.is_finite() or value <= 0:
        raise InvalidAmountError(amount)
    return value


class DepositFundsUseCase:
    """Orchestrates a wallet deposit under the wallet's lock."""

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        locks: KeyedLocks,
        publisher: LedgerEventPublisher,
    ) -> None:
        self._ledger_repo = ledger_repo
        self._locks = locks
        self._publisher = publisher

    async def execute(self, command: DepositFundsCommand) -> Transaction:
        """Run the deposit.

        Args:
            command: Wallet owner and amount to credit.

        Returns:
            The completed deposit transaction.

        Raises:
            InvalidAmountError: If the amount is not strictly positive.
        """
        amount = validate_amount(command.amount)
        logger.info("Depositing into wallet of user=%s", command.user_id)

        async with self._locks.hold(wallet_key(command.user_id)):
            wallet = await self._ledger_repo.get_wallet(command.user_id)
            if wallet is None:
                logger.info("Opening wallet for user=%s", command.user_id)
                wallet = Wallet(user_id=command.user_id)

            transaction = Transaction(
                wallet_id=wallet.id,
                kind=TransactionKind.DEPOSIT,
                amount=amount,
                description="Wallet deposit",
                status=TransactionStatus.COMPLETED,
            )
            wallet = wallet.apply(transaction)
            await self._ledger_repo.save_wallet(wallet)

        await self._publisher.publish(
            FundsDeposited(
                user_id=command.user_id,
                transaction=transaction,
                balance=wallet.balance,
            )
        )
        return transaction
