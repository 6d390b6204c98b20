"""
Exception handlers.

Converts module exceptions into JSON error responses so that every
failure ends at the handler boundary:

    {"error": "<CODE>", "message": "...", "details": {...}}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    ExternalServiceError,
    FoodShareError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first; the first isinstance match wins
STATUS_CODES: list[tuple[type[FoodShareError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (ExternalServiceError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_code_for(exc: FoodShareError) -> int:
    for exc_type, code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def foodshare_error_handler(request: Request, exc: FoodShareError) -> JSONResponse:
    """Handle errors raised by services, repositories and the auth gate."""
    status_code = status_code_for(exc)
    headers = None
    if isinstance(exc, AuthenticationError) and exc.challenge:
        headers = {"WWW-Authenticate": exc.challenge}

    if status_code >= 500:
        logger.error("%s on %s: %s", exc.code, request.url.path, exc.message)
    else:
        logger.info("%s on %s", exc.code, request.url.path)

    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request validation errors as 400 Bad Request.

    Only location, message and type are returned; submitted values are
    never echoed back (they may contain passwords).
    """
    errors = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "INVALID_INPUT",
            "message": "Invalid request payload",
            "details": {"errors": errors},
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "INTERNAL_ERROR",
            "message": "Internal server error",
            "details": {},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FoodShareError, foodshare_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
