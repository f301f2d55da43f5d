"""
FastAPI exception handlers for structured error responses.

Maps domain exceptions to appropriate HTTP status codes and formats.
"""

from datetime import datetime

import structlog
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from horsekick_service.sanitizer.exceptions import MissingColumnError, SanitizationError

logger = structlog.get_logger(__name__)


async def missing_column_error_handler(request: Request, exc: MissingColumnError) -> JSONResponse:
    """
    Handle batches without the required columns.

    Maps to 422 Unprocessable Entity (well-formed JSON, unusable schema).
    """
    logger.warning(
        "Batch rejected: missing required columns",
        missing_columns=exc.missing_columns,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "missing_columns",
            "message": exc.message,
            "details": exc.details,
            "timestamp": datetime.utcnow().isoformat(),
        },
    )


async def sanitization_error_handler(request: Request, exc: SanitizationError) -> JSONResponse:
    """
    Handle any other sanitization failure.

    Maps to 422 Unprocessable Entity.
    """
    logger.warning(
        "Sanitization error",
        error_type=type(exc).__name__,
        details=exc.details,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "sanitization_failed",
            "message": exc.message,
            "details": exc.details,
            "timestamp": datetime.utcnow().isoformat(),
        },
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (not a list of objects).

    Maps to 400 Bad Request (client error).
    """
    errors = jsonable_encoder(exc.errors())
    logger.warning("Invalid request format", errors=errors)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_request",
            "message": "Request validation failed",
            "details": errors,
            "timestamp": datetime.utcnow().isoformat(),
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "timestamp": datetime.utcnow().isoformat(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    MissingColumnError: missing_column_error_handler,
    SanitizationError: sanitization_error_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: generic_error_handler,
}
