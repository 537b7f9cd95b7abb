"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See family_circles.core.lifespan and
family_circles.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI

from family_circles.api.fc import fc_router
from family_circles.api.fc.endpoints import health
from family_circles.core.config import get_settings
from family_circles.core.exception_handlers import register_exception_handlers
from family_circles.core.lifespan import create_lifespan
from family_circles.core.limiter import limiter
from family_circles.middleware import BaseUrlMiddleware, RequestIDMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    # RateLimitExceeded is a Starlette HTTPException: answered by the JSON error handler.
    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter

    register_exception_handlers(app)

    # Middleware: first added = innermost. Request ID wraps everything so it is logged
    # for every request; base URL rewriting happens before routing.
    app.add_middleware(BaseUrlMiddleware, base_url=settings.base_url)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(fc_router, prefix="/fc")

    return app


app = create_app()
