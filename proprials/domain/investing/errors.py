"""
Domain-specific errors for the investing bounded context.

All errors raised from the domain and application layers must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from decimal import Decimal


class InvestingDomainError(Exception):
    """Base error for all investing domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NotFoundError(InvestingDomainError):
    """Raised when a referenced entity does not exist."""

    entity = "Entity"

    def __init__(self, entity_id: str) -> None:
        super().__init__(f"{self.entity} not found: {entity_id}")
        self.entity_id = entity_id


class PropertyNotFoundError(NotFoundError):
    """Raised when a property id is not in the catalog."""

    entity = "Property"


class WalletNotFoundError(NotFoundError):
    """Raised when a user has no wallet yet."""

    entity = "Wallet"


class InvestmentNotFoundError(NotFoundError):
    """Raised when an investment id is unknown."""

    entity = "Investment"


class TransactionNotFoundError(NotFoundError):
    """Raised when a wallet holds no transaction with the given id."""

    entity = "Transaction"


class NotificationNotFoundError(NotFoundError):
    """Raised when a notification id is unknown."""

    entity = "Notification"


class InsufficientSharesError(InvestingDomainError):
    """Raised when a purchase asks for more shares than are available."""

    def __init__(self, property_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"Not enough shares available in property {property_id}: "
            f"requested {requested}, available {available}"
        )
        self.property_id = property_id
        self.requested = requested
        self.available = available


class InsufficientBalanceError(InvestingDomainError):
    """Raised when the wallet cannot cover a debit."""

    def __init__(self, required: Decimal, available: Decimal) -> None:
        super().__init__(
            f"Insufficient balance: required {required}, available {available}"
        )
        self.required = required
        self.available = available


class InvalidAmountError(InvestingDomainError):
    """Raised when a monetary amount is not strictly positive."""

    def __init__(self, amount: object) -> None:
        super().__init__(f"Invalid amount: {amount}. Must be greater than zero.")
        self.amount = amount


class InvalidShareCountError(InvalidAmountError):
    """Raised when a share count is not a positive integer."""

    def __init__(self, share_count: object) -> None:
        InvestingDomainError.__init__(
            self, f"Invalid share count: {share_count}. Must be a positive integer."
        )
        self.amount = share_count


class PropertyNotActiveError(InvestingDomainError):
    """Raised when buying into a property that is no longer open."""

    def __init__(self, property_id: str, status: str) -> None:
        super().__init__(f"Property {property_id} is not open for investment ({status})")
        self.property_id = property_id
        self.status = status


class InvalidTransactionStateError(InvestingDomainError):
    """Raised on a transaction status change other than pending -> final."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot move transaction from {current} to {target}")
        self.current = current
        self.target = target
