"""Error Handlers — global exception handlers rendering the failure envelope.

Invariants:
    - UserApiError → exc.http_status with {"errors": [{"detail": exc.detail}]}
    - RequestValidationError → 400 "Invalid request"; field errors logged, never surfaced
    - HTTPException (unknown route, wrong method) → its status, enveloped
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (UserApiError), validation (Pydantic),
      framework (HTTPException), catch-all (Exception)
    - Extracted from main.py to keep the composition root small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.core.envelope import error_envelope
from user_api.core.errors import UserApiError, InvalidRequestError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        """Handle all User API domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"UserApiError: {exc.detail}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors; field details stay in the log."""
        logger.warning(
            f"Validation error on {request.url.path}: {_summarize(exc)}",
            extra={"error_code": "INVALID_REQUEST", "path": request.url.path},
        )
        error = InvalidRequestError()
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Envelope framework-level errors (404 route, 405 method)."""
        detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(detail),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope("Internal server error"),
        )


def _summarize(exc: RequestValidationError) -> list[str]:
    return [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
