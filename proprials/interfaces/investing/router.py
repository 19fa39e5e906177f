"""
FastAPI router for the investing bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Query, Request

from proprials.application.investing.deposit_funds import DepositFundsUseCase
from proprials.application.investing.dtos import (
    DepositFundsCommand,
    GetInvestmentQuery,
    GetPortfolioSummaryQuery,
    GetPropertyQuery,
    GetWalletQuery,
    ListInvestmentsQuery,
    ListNotificationsQuery,
    MarkNotificationReadCommand,
    PurchaseSharesCommand,
)
from proprials.application.investing.get_investment import GetInvestmentUseCase
from proprials.application.investing.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from proprials.application.investing.get_property import GetPropertyUseCase
from proprials.application.investing.get_wallet import GetWalletUseCase
from proprials.application.investing.list_investments import ListInvestmentsUseCase
from proprials.application.investing.list_notifications import ListNotificationsUseCase
from proprials.application.investing.list_properties import ListPropertiesUseCase
from proprials.application.investing.mark_notification_read import (
    MarkNotificationReadUseCase,
)
from proprials.application.investing.purchase_shares import PurchaseSharesUseCase
from proprials.domain.investing.entities import (
    InvestmentView,
    Notification,
    Property,
    Transaction,
)
from proprials.interfaces.investing.dependencies import (
    get_deposit_funds_use_case,
    get_investment_use_case,
    get_list_investments_use_case,
    get_list_notifications_use_case,
    get_list_properties_use_case,
    get_mark_notification_read_use_case,
    get_portfolio_summary_use_case,
    get_property_use_case,
    get_purchase_shares_use_case,
    get_wallet_use_case,
)
from proprials.interfaces.investing.schemas import (
    ID_MAX_LEN,
    DepositRequest,
    ErrorResponse,
    InvestmentItem,
    InvestmentListResponse,
    NotificationItem,
    NotificationListResponse,
    PortfolioSummaryResponse,
    PropertyItem,
    PropertyListResponse,
    PurchaseSharesRequest,
    TransactionItem,
    WalletResponse,
)
from proprials.shared.security.rate_limiting import MUTATION_RATE_LIMIT, limiter

router = APIRouter(prefix="/investing", tags=["investing"])


def _property_item(prop: Property) -> PropertyItem:
    return PropertyItem(
        id=prop.id,
        title=prop.title,
        description=prop.description,
        location=prop.location,
        price=prop.price,
        total_shares=prop.total_shares,
        available_shares=prop.available_shares,
        price_per_share=prop.price_per_share,
        expected_return=prop.expected_return,
        duration_months=prop.duration_months,
        images=list(prop.images),
        status=prop.status.value,
        category=prop.category.value,
        funded_pct=prop.funded_pct,
        created_at=prop.created_at,
    )


def _investment_item(view: InvestmentView) -> InvestmentItem:
    inv = view.investment
    return InvestmentItem(
        id=inv.id,
        property_id=inv.property_id,
        user_id=inv.user_id,
        shares=inv.shares,
        amount=inv.amount,
        status=inv.status.value,
        purchased_at=inv.purchased_at,
        expected_return=inv.expected_return,
        expected_return_amount=inv.expected_return_amount,
        projected_value=inv.projected_value,
        property=_property_item(view.property) if view.property is not None else None,
    )


def _transaction_item(tx: Transaction) -> TransactionItem:
    return TransactionItem(
        id=tx.id,
        wallet_id=tx.wallet_id,
        type=tx.kind.value,
        amount=tx.amount,
        description=tx.description,
        status=tx.status.value,
        created_at=tx.created_at,
    )


def _notification_item(notification: Notification) -> NotificationItem:
    return NotificationItem(
        id=notification.id,
        user_id=notification.user_id,
        title=notification.title,
        message=notification.message,
        type=notification.kind.value,
        read=notification.read,
        created_at=notification.created_at,
    )


# ------------------------------------------------------------------
# Properties
# ------------------------------------------------------------------


@router.get(
    "/properties",
    response_model=PropertyListResponse,
    summary="List properties",
    description="Return the full property catalog.",
)
async def list_properties(
    use_case: ListPropertiesUseCase = Depends(get_list_properties_use_case),
) -> PropertyListResponse:
    properties = await use_case.execute()
    return PropertyListResponse(properties=[_property_item(p) for p in properties])


@router.get(
    "/properties/{property_id}",
    response_model=PropertyItem,
    responses={404: {"model": ErrorResponse}},
    summary="Get a property",
)
async def get_property(
    property_id: str,
    use_case: GetPropertyUseCase = Depends(get_property_use_case),
) -> PropertyItem:
    prop = await use_case.execute(GetPropertyQuery(property_id=property_id))
    return _property_item(prop)


# ------------------------------------------------------------------
# Investments
# ------------------------------------------------------------------


@router.post(
    "/investments",
    response_model=InvestmentItem,
    status_code=201,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Buy shares",
    description="Buy shares of a property, paid from the user's wallet.",
)
@limiter.limit(MUTATION_RATE_LIMIT)
async def purchase_shares(
    request: Request,
    body: PurchaseSharesRequest,
    use_case: PurchaseSharesUseCase = Depends(get_purchase_shares_use_case),
) -> InvestmentItem:
    """Buy shares and return the new investment."""
    investment = await use_case.execute(
        PurchaseSharesCommand(
            user_id=body.user_id,
            property_id=body.property_id,
            shares=body.shares,
        )
    )
    return _investment_item(InvestmentView(investment=investment))


@router.get(
    "/investments",
    response_model=InvestmentListResponse,
    summary="List a user's investments",
)
async def list_investments(
    user_id: str = Query(..., min_length=1, max_length=ID_MAX_LEN),
    use_case: ListInvestmentsUseCase = Depends(get_list_investments_use_case),
) -> InvestmentListResponse:
    views = await use_case.execute(ListInvestmentsQuery(user_id=user_id))
    return InvestmentListResponse(investments=[_investment_item(v) for v in views])


@router.get(
    "/investments/{investment_id}",
    response_model=InvestmentItem,
    responses={404: {"model": ErrorResponse}},
    summary="Get an investment",
)
async def get_investment(
    investment_id: str,
    use_case: GetInvestmentUseCase = Depends(get_investment_use_case),
) -> InvestmentItem:
    view = await use_case.execute(GetInvestmentQuery(investment_id=investment_id))
    return _investment_item(view)


@router.get(
    "/portfolio/{user_id}",
    response_model=PortfolioSummaryResponse,
    summary="Portfolio totals",
)
async def get_portfolio_summary(
    user_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    use_case: GetPortfolioSummaryUseCase = Depends(get_portfolio_summary_use_case),
) -> PortfolioSummaryResponse:
    summary = await use_case.execute(GetPortfolioSummaryQuery(user_id=user_id))
    return PortfolioSummaryResponse(
        user_id=summary.user_id,
        total_invested=summary.total_invested,
        total_shares=summary.total_shares,
        expected_returns=summary.expected_returns,
        active_investments=summary.active_investments,
        investment_count=summary.investment_count,
    )


# ------------------------------------------------------------------
# Wallets
# ------------------------------------------------------------------


@router.get(
    "/wallets/{user_id}",
    response_model=WalletResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a wallet",
    description="Return the balance and transaction history of a user's wallet.",
)
async def get_wallet(
    user_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    use_case: GetWalletUseCase = Depends(get_wallet_use_case),
) -> WalletResponse:
    wallet = await use_case.execute(GetWalletQuery(user_id=user_id))
    return WalletResponse(
        id=wallet.id,
        user_id=wallet.user_id,
        balance=wallet.balance,
        transactions=[_transaction_item(tx) for tx in wallet.transactions],
    )


@router.post(
    "/wallets/{user_id}/deposits",
    response_model=TransactionItem,
    status_code=201,
    responses={422: {"model": ErrorResponse}},
    summary="Deposit funds",
    description="Credit a wallet, opening it on the first deposit.",
)
@limiter.limit(MUTATION_RATE_LIMIT)
async def deposit(
    request: Request,
    body: DepositRequest,
    user_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    use_case: DepositFundsUseCase = Depends(get_deposit_funds_use_case),
) -> TransactionItem:
    transaction = await use_case.execute(
        DepositFundsCommand(user_id=user_id, amount=body.amount)
    )
    return _transaction_item(transaction)


# ------------------------------------------------------------------
# Notifications
# ------------------------------------------------------------------


@router.get(
    "/notifications",
    response_model=NotificationListResponse,
    summary="List notifications",
    description="Return a user's notifications, newest first.",
)
async def list_notifications(
    user_id: str = Query(..., min_length=1, max_length=ID_MAX_LEN),
    unread_only: bool = False,
    use_case: ListNotificationsUseCase = Depends(get_list_notifications_use_case),
) -> NotificationListResponse:
    notifications = await use_case.execute(
        ListNotificationsQuery(user_id=user_id, unread_only=unread_only)
    )
    return NotificationListResponse(
        notifications=[_notification_item(n) for n in notifications],
        unread_count=sum(1 for n in notifications if not n.read),
    )


@router.post(
    "/notifications/{notification_id}/read",
    response_model=NotificationItem,
    responses={404: {"model": ErrorResponse}},
    summary="Mark a notification as read",
)
async def mark_notification_read(
    notification_id: str,
    use_case: MarkNotificationReadUseCase = Depends(get_mark_notification_read_use_case),
) -> NotificationItem:
    notification = await use_case.execute(
        MarkNotificationReadCommand(notification_id=notification_id)
    )
    return _notification_item(notification)
