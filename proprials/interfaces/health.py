"""
Liveness endpoint.

Answers with the service version, the number of listed properties and
the seconds elapsed since the module was imported.
"""

import time

from fastapi import APIRouter, Depends

from proprials.core.config import settings
from proprials.domain.investing.ports import LedgerRepository
from proprials.interfaces.investing.dependencies import get_ledger_repository
from proprials.interfaces.investing.schemas import HealthResponse

router = APIRouter(tags=["health"])

_STARTED = time.monotonic()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check(
    ledger_repo: LedgerRepository = Depends(get_ledger_repository),
) -> HealthResponse:
    properties = await ledger_repo.list_properties()
    return HealthResponse(
        status="ok",
        version=settings.version,
        properties=len(properties),
        uptime_seconds=round(time.monotonic() - _STARTED, 3),
    )
