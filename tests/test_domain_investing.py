"""
Tests for the investing domain layer.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

from decimal import Decimal

import pytest

from proprials.domain.investing.entities import (
    Investment,
    Notification,
    PropertyStatus,
    Transaction,
    TransactionKind,
    TransactionStatus,
    Wallet,
)
from proprials.domain.investing.errors import (
    InsufficientBalanceError,
    InsufficientSharesError,
    InvalidAmountError,
    InvalidShareCountError,
    InvalidTransactionStateError,
    NotFoundError,
    PropertyNotFoundError,
    TransactionNotFoundError,
    WalletNotFoundError,
)
from tests.factories import funded_wallet, make_property


class TestPropertyEntity:
    """Tests for the Property entity."""

    def test_available_shares_cannot_exceed_total(self) -> None:
        with pytest.raises(ValueError):
            make_property(available=201, total=200)

    def test_available_shares_cannot_be_negative(self) -> None:
        with pytest.raises(ValueError):
            make_property(available=-1)

    def test_funded_pct(self) -> None:
        prop = make_property(available=7_500, total=10_000)
        assert prop.sold_shares == 2_500
        assert prop.funded_pct == Decimal("25")

    def test_cost_of_shares(self) -> None:
        assert make_property(price="500").cost_of(100) == Decimal("50000")

    def test_sell_reduces_availability(self) -> None:
        prop = make_property(available=100)
        sold = prop.sell(40)
        assert sold.available_shares == 60
        assert sold.status is PropertyStatus.ACTIVE
        assert prop.available_shares == 100

    def test_selling_out_keeps_status(self) -> None:
        sold = make_property(available=100).sell(100)
        assert sold.available_shares == 0
        assert sold.status is PropertyStatus.ACTIVE
        assert sold.funded_pct == Decimal("100")

    def test_property_is_immutable(self) -> None:
        prop = make_property()
        with pytest.raises(AttributeError):
            prop.available_shares = 0  # type: ignore[misc]


class TestWalletEntity:
    """Tests for the Wallet entity and its balance invariant."""

    def test_wallet_id_derived_from_user(self) -> None:
        assert Wallet(user_id="42").id == "wallet-42"

    def test_new_wallet_is_empty(self) -> None:
        wallet = Wallet(user_id="u1")
        assert wallet.balance == Decimal("0")
        assert wallet.transactions == ()

    def test_apply_credit_and_debit(self) -> None:
        wallet = funded_wallet("u1", "1000")
        debit = Transaction(
            wallet_id=wallet.id,
            kind=TransactionKind.INVESTMENT,
            amount=Decimal("-400"),
        )
        wallet = wallet.apply(debit)
        assert wallet.balance == Decimal("600")
        assert len(wallet.transactions) == 2
        assert wallet.balance == wallet.ledger_balance

    def test_overdraft_is_refused(self) -> None:
        wallet = funded_wallet("u1", "100")
        debit = Transaction(
            wallet_id=wallet.id,
            kind=TransactionKind.WITHDRAWAL,
            amount=Decimal("-100.01"),
        )
        with pytest.raises(InsufficientBalanceError) as exc_info:
            wallet.apply(debit)
        assert exc_info.value.available == Decimal("100")

    def test_pending_transaction_does_not_move_balance(self) -> None:
        wallet = funded_wallet("u1", "100")
        pending = Transaction(
            wallet_id=wallet.id,
            kind=TransactionKind.DEPOSIT,
            amount=Decimal("50"),
            status=TransactionStatus.PENDING,
        )
        wallet = wallet.apply(pending)
        assert wallet.balance == Decimal("100")
        assert wallet.ledger_balance == Decimal("100")
        assert wallet.transactions[-1] is pending


class TestTransactionEntity:
    """Tests for transaction status transitions."""

    def _pending(self) -> Transaction:
        return Transaction(
            wallet_id="wallet-u1",
            kind=TransactionKind.DEPOSIT,
            amount=Decimal("10"),
            status=TransactionStatus.PENDING,
        )

    @pytest.mark.parametrize(
        "target", [TransactionStatus.COMPLETED, TransactionStatus.FAILED]
    )
    def test_pending_can_settle(self, target: TransactionStatus) -> None:
        tx = self._pending()
        settled = tx.transition(target)
        assert settled.status is target
        assert settled.id == tx.id
        assert settled.amount == tx.amount

    def test_settled_transaction_is_final(self) -> None:
        tx = self._pending().transition(TransactionStatus.COMPLETED)
        with pytest.raises(InvalidTransactionStateError):
            tx.transition(TransactionStatus.FAILED)

    def test_cannot_transition_back_to_pending(self) -> None:
        with pytest.raises(InvalidTransactionStateError):
            self._pending().transition(TransactionStatus.PENDING)

    def _pending_debit(self, wallet: Wallet, amount: str) -> Transaction:
        return Transaction(
            wallet_id=wallet.id,
            kind=TransactionKind.WITHDRAWAL,
            amount=-Decimal(amount),
            status=TransactionStatus.PENDING,
        )

    def test_pending_entry_does_not_move_balance(self) -> None:
        wallet = funded_wallet("u1", "100")
        held = wallet.apply(self._pending_debit(wallet, "30"))
        assert held.balance == Decimal("100")
        assert held.balance == held.ledger_balance

    def test_settle_completed_applies_amount(self) -> None:
        wallet = funded_wallet("u1", "100")
        debit = self._pending_debit(wallet, "30")
        settled = wallet.apply(debit).settle(debit.id, TransactionStatus.COMPLETED)

        assert settled.balance == Decimal("70")
        assert settled.balance == settled.ledger_balance
        assert len(settled.transactions) == 2
        assert settled.transactions[-1].id == debit.id
        assert settled.transactions[-1].status is TransactionStatus.COMPLETED

    def test_settle_failed_keeps_balance(self) -> None:
        wallet = funded_wallet("u1", "100")
        debit = self._pending_debit(wallet, "30")
        settled = wallet.apply(debit).settle(debit.id, TransactionStatus.FAILED)
        assert settled.balance == Decimal("100")
        assert settled.transactions[-1].status is TransactionStatus.FAILED

    def test_settle_refuses_overdraft(self) -> None:
        wallet = funded_wallet("u1", "100")
        debit = self._pending_debit(wallet, "150")
        with pytest.raises(InsufficientBalanceError):
            wallet.apply(debit).settle(debit.id, TransactionStatus.COMPLETED)

    def test_settle_twice_is_rejected(self) -> None:
        wallet = funded_wallet("u1", "100")
        debit = self._pending_debit(wallet, "30")
        settled = wallet.apply(debit).settle(debit.id, TransactionStatus.COMPLETED)
        with pytest.raises(InvalidTransactionStateError):
            settled.settle(debit.id, TransactionStatus.FAILED)

    def test_settle_unknown_entry(self) -> None:
        with pytest.raises(TransactionNotFoundError):
            funded_wallet("u1", "100").settle("tx-missing", TransactionStatus.COMPLETED)

    def test_ids_are_unique(self) -> None:
        assert self._pending().id != self._pending().id


class TestInvestmentEntity:
    """Tests for the Investment entity derived values."""

    def test_expected_return_amount(self) -> None:
        inv = Investment(
            property_id="1",
            user_id="u1",
            shares=100,
            amount=Decimal("50000"),
            expected_return=Decimal("12.5"),
        )
        assert inv.expected_return_amount == Decimal("6250")
        assert inv.projected_value == Decimal("56250")
        assert inv.id.startswith("inv-")


class TestNotificationEntity:
    def test_mark_read_returns_copy(self) -> None:
        n = Notification(user_id="u1", title="t", message="m")
        read = n.mark_read()
        assert read.read is True
        assert n.read is False
        assert read.id == n.id


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_errors_share_a_base(self) -> None:
        err = PropertyNotFoundError("p9")
        assert isinstance(err, NotFoundError)
        assert err.entity_id == "p9"
        assert "Property not found: p9" in str(err)
        assert WalletNotFoundError("u1").entity == "Wallet"

    def test_insufficient_shares_error_message(self) -> None:
        err = InsufficientSharesError("p1", requested=150, available=100)
        assert "150" in err.message
        assert "100" in err.message

    def test_share_count_error_is_an_amount_error(self) -> None:
        err = InvalidShareCountError(0)
        assert isinstance(err, InvalidAmountError)
        assert "share count" in err.message
        assert err.amount == 0
