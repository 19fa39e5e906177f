"""
Use case: Buy shares of a property with wallet funds.

Input: PurchaseSharesCommand (user_id, property_id, shares)
Output: Investment
Side effects: Decrements property availability, debits the wallet,
    appends an investment transaction, stores the investment and
    publishes SharesPurchased. All four writes commit together.
Failure cases: InvalidShareCountError, PropertyNotFoundError,
    PropertyNotActiveError, InsufficientSharesError, WalletNotFoundError,
    InsufficientBalanceError. Nothing is written on failure.
"""

import logging

from proprials.application.investing.dtos import PurchaseSharesCommand
from proprials.application.investing.locking import KeyedLocks, property_key, wallet_key
from proprials.domain.investing.entities import (
    Investment,
    InvestmentStatus,
    Transaction,
    TransactionKind,
    TransactionStatus,
    utc_now,
)
from proprials.domain.investing.errors import (
    InsufficientBalanceError,
    InsufficientSharesError,
    InvalidShareCountError,
    PropertyNotActiveError,
    PropertyNotFoundError,
    WalletNotFoundError,
)
from proprials.domain.investing.events import SharesPurchased
from proprials.domain.investing.ports import LedgerEventPublisher, LedgerRepository

logger = logging.getLogger(__name__)


def validate_share_count(shares: object) -> int:
    """Return ``shares`` if it is a positive int, else raise."""
    if isinstance(shares, bool) or not isinstance(shares, int) or shares <= 0:
        raise InvalidShareCountError(shares)
    return shares


class PurchaseSharesUseCase:
    """Orchestrates a share purchase.

    The property and the buyer's wallet are locked for the whole
    read-validate-commit sequence, so concurrent purchases of the
    same listing are serialized and the last share cannot be sold twice.
    """

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        locks: KeyedLocks,
        publisher: LedgerEventPublisher,
    ) -> None:
        self._ledger_repo = ledger_repo
        self._locks = locks
        self._publisher = publisher

    async def execute(self, command: PurchaseSharesCommand) -> Investment:
        """Run the purchase.

        Args:
            command: Buyer, listing and number of shares.

        Returns:
            The newly created active investment.

        Raises:
            InvalidShareCountError: If shares is not a positive integer.
            PropertyNotFoundError: If the listing does not exist.
            PropertyNotActiveError: If the listing is funded or completed.
            InsufficientSharesError: If fewer shares are available than requested.
            WalletNotFoundError: If the buyer has no wallet.
            InsufficientBalanceError: If the wallet cannot cover the cost.
        """
        shares = validate_share_count(command.shares)
        logger.info(
            "Purchasing %d shares of property=%s for user=%s",
            shares,
            command.property_id,
            command.user_id,
        )

        async with self._locks.hold(
            property_key(command.property_id), wallet_key(command.user_id)
        ):
            prop = await self._ledger_repo.get_property(command.property_id)
            if prop is None:
                raise PropertyNotFoundError(command.property_id)
            if not prop.is_open:
                raise PropertyNotActiveError(prop.id, prop.status.value)
            if shares > prop.available_shares:
                raise InsufficientSharesError(prop.id, shares, prop.available_shares)

            wallet = await self._ledger_repo.get_wallet(command.user_id)
            if wallet is None:
                raise WalletNotFoundError(command.user_id)

            amount = prop.cost_of(shares)
            if wallet.balance < amount:
                raise InsufficientBalanceError(amount, wallet.balance)

            now = utc_now()
            transaction = Transaction(
                wallet_id=wallet.id,
                kind=TransactionKind.INVESTMENT,
                amount=-amount,
                description=f"Investment in {prop.title}",
                status=TransactionStatus.COMPLETED,
                created_at=now,
            )
            investment = Investment(
                property_id=prop.id,
                user_id=command.user_id,
                shares=shares,
                amount=amount,
                expected_return=prop.expected_return,
                status=InvestmentStatus.ACTIVE,
                purchased_at=now,
            )
            await self._ledger_repo.commit_purchase(
                prop.sell(shares), wallet.apply(transaction), investment
            )

        logger.info(
            "Committed investment=%s shares=%d for user=%s",
            investment.id,
            shares,
            command.user_id,
        )
        await self._publisher.publish(
            SharesPurchased(
                user_id=command.user_id,
                investment=investment,
                transaction=transaction,
                property_title=prop.title,
            )
        )
        return investment
