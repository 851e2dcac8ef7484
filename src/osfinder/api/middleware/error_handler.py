"""Global error handling.

Every failure leaves the API as the same JSON shape:
{error_code, message, user_message, suggestion, retry_allowed[, details]}
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from osfinder.config import settings
from osfinder.core.errors import get_error
from osfinder.core.exceptions import DirectoryError

logger = logging.getLogger(__name__)


def error_body(error_code: str, message: str | None = None, details: dict | None = None) -> dict:
    """Render a catalog entry as a response body."""
    error_info = get_error(error_code)
    body = {
        "error_code": error_code,
        "message": message or error_info["message"],
        "user_message": error_info["user_message"],
        "suggestion": error_info["suggestion"],
        "retry_allowed": error_info["retry_allowed"],
    }
    if details:
        body["details"] = details
    return body


async def handle_directory_error(request: Request, exc: DirectoryError) -> JSONResponse:
    """Handle domain exceptions raised by services."""
    extra = {"error_code": exc.error_code, "path": request.url.path, "method": request.method}
    if settings.debug:
        extra["details"] = exc.details

    # Client mistakes are expected traffic; only 5xx are errors.
    log = logger.error if exc.http_status >= 500 else logger.info
    log(f"Directory error: {exc.error_code}", extra=extra)

    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(exc.error_code, exc.message, exc.details),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle Pydantic validation errors."""
    errors = exc.errors()
    error_messages = []

    for error in errors:
        field = ".".join(str(x) for x in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        error_messages.append(f"{field}: {msg}")

    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        extra["errors"] = errors
    logger.warning(f"Validation error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VAL_001", " | ".join(error_messages)),
    )


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    """Handle database integrity errors.

    Reached when two submissions race past the duplicate check.
    """
    # Do not log str(exc): it can include SQL + bound parameters.
    log = logger.exception if settings.debug else logger.error
    log(
        f"Database integrity error on {request.url.path}",
        extra={"path": request.url.path, "method": request.method},
    )

    error_msg = str(exc).lower()
    if "unique" in error_msg or "duplicate" in error_msg:
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=error_body("DB_002"))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body("DB_001")
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without exposing internals."""
    extra = {
        "error_type": type(exc).__name__,
        "path": request.url.path,
        "method": request.method,
    }
    # In non-debug: do not log str(exc) or traceback (may include submitter data).
    if settings.debug:
        logger.exception(f"Unexpected error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Unexpected error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("SYS_001", "Internal server error"),
    )
