"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Rate limiting
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from proprials.core.config import settings
from proprials.interfaces.health import router as health_router
from proprials.interfaces.investing.dependencies import get_event_publisher
from proprials.interfaces.investing.router import router as investing_router
from proprials.shared.errors.handlers import register_error_handlers
from proprials.shared.logging import configure_logging
from proprials.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers and rate limiting, and builds the
    event publisher so webhook settings are validated at startup.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(investing_router, prefix="/api/v1")

    # --- Event Publisher ---
    get_event_publisher()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("proprials.main:app", host="0.0.0.0", port=8000)
