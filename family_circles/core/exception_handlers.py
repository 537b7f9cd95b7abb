"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON error bodies of the form {"code": <status>, "error": <message>},
sent with the same headers as every /fc response.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from family_circles.api.fc.responses import FamilyCirclesJSONResponse
from family_circles.core.config import get_settings
from family_circles.domain.exceptions import FamilyCirclesException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "UNSUPPORTED_IDENTIFIER": 400,
    "MISSING_SEARCH_TERM": 400,
    "ACCESS_DENIED": 403,
    "TREE_NOT_FOUND": 404,
    "RECORD_NOT_FOUND": 404,
    "MALFORMED_RECORD": 422,
}


def error_response(
    status: int, message: Any, headers: dict[str, str] | None = None, **extra: Any
) -> FamilyCirclesJSONResponse:
    """Build the error body shared by every handler."""
    return FamilyCirclesJSONResponse(
        status_code=status,
        content={"code": status, "error": message, **extra},
        headers=headers,
    )


def _domain_exception_handler(
    request: Request, exc: FamilyCirclesException
) -> FamilyCirclesJSONResponse:
    """Return {"code", "error"} with the status mapped from error_code (default 400)."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 422:
        logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    else:
        logger.debug("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return error_response(status, exc.message)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> FamilyCirclesJSONResponse:
    """Return 422 with validation error details."""
    return error_response(422, "request validation failed", details=jsonable_encoder(exc.errors()))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> FamilyCirclesJSONResponse:
    """Return JSON for Starlette HTTP exceptions.

    Covers unknown routes, wrong methods and SlowAPI RateLimitExceeded (429).
    """
    return error_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


def _generic_exception_handler(request: Request, exc: Exception) -> FamilyCirclesJSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail = str(exc) if settings.debug else "internal server error"
    return error_response(500, detail)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: FamilyCirclesException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(FamilyCirclesException, _domain_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
