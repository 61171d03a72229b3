"""
API error handling.

Maps domain exceptions and request validation failures onto the uniform
error envelope {success: false, error, code, details} with the matching
HTTP status, logging each failure with its context.

Dependencies: fastapi, bg_remover.core.exceptions, bg_remover.models.common
System role: Exception to HTTP response translation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bg_remover.core.exceptions import (
    BgRemoverException,
    InvalidInputError,
    JobNotFoundError,
    UnauthorizedError,
)
from bg_remover.models.common import ErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION: dict[type[BgRemoverException], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    JobNotFoundError: status.HTTP_404_NOT_FOUND,
}


def _envelope(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def handle_domain_error(request: Request, exc: BgRemoverException) -> JSONResponse:
    """Translate a BgRemoverException into its error envelope."""
    status_code = next(
        (code for cls, code in STATUS_BY_EXCEPTION.items() if isinstance(exc, cls)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    logger.warning(
        "Job action rejected",
        extra={
            "path": request.url.path,
            "code": exc.code,
            "status_code": status_code,
            "error": exc.message,
        },
    )
    return _envelope(
        status_code,
        ErrorResponse(error=exc.message, code=exc.code, details=exc.details or None),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema validation failures as BAD_REQUEST envelopes."""
    errors = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
    logger.warning(
        "Invalid request payload",
        extra={"path": request.url.path, "error_count": len(errors)},
    )
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(
            error="Invalid input.",
            code=InvalidInputError.code,
            details={"errors": errors},
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; the traceback is logged, not returned."""
    logger.exception(
        "Unexpected failure in job action",
        extra={"path": request.url.path, "error": str(exc)},
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error="An internal error occurred.", code="INTERNAL_SERVER_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope handlers to the application."""
    app.add_exception_handler(BgRemoverException, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
