"""Error Handlers - global exception handlers producing the failure envelope.

Invariants:
    - Every failure body is {"success": false, "error": "<message>"}
    - MatchfeedError -> its own http_status (400 validation/storage, 404 not found)
    - RequestValidationError -> 400 with field-level messages joined
    - Starlette HTTPException (unknown route, wrong method) -> its status
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, request validation, framework HTTP, catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from matchfeed.core.errors import ErrorSeverity, MatchfeedError

logger = logging.getLogger(__name__)

# Leading loc segment FastAPI adds to say where the value came from
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MatchfeedError)
    async def domain_error_handler(request: Request, exc: MatchfeedError):
        """Handle all matchfeed domain/storage errors."""
        log = (
            logger.warning
            if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
            else logger.error
        )
        log(
            f"{exc.__class__.__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
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
        """Handle Pydantic validation errors."""
        message = format_validation_errors(exc.errors())
        logger.warning(
            f"Validation error on {request.url.path}: {message}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return failure(status.HTTP_400_BAD_REQUEST, message)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        response = failure(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return failure(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error",
        )


def format_validation_errors(errors) -> str:
    """One readable line per Pydantic error: "<field>: <msg>" or just "<msg>"."""
    parts = []
    for e in errors:
        loc = [str(p) for p in e.get("loc", ())]
        if loc and loc[0] in _LOCATIONS:
            loc = loc[1:]
        if e.get("type") == "json_invalid":
            # loc holds the character offset, not a field
            loc = []
        msg = e.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request data"
