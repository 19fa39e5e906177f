"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits on the
purchase and deposit endpoints.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from proprials.core.config import settings

logger = logging.getLogger(__name__)

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)

MUTATION_RATE_LIMIT = settings.rate_limit_mutations


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer throttled requests with a 429 and a Retry-After header.

    The header carries the length of the limit's window in seconds.
    """
    window = exc.limit.limit.get_expiry()
    logger.warning(
        "Rate limit %s hit by %s on %s",
        exc.detail,
        get_remote_address(request),
        request.url.path,
    )
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests", "detail": f"Limit is {exc.detail}"},
        headers={"Retry-After": str(window)},
    )
