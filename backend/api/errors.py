"""
Exception handlers.

Maps the shared exception kinds to HTTP responses. Every domain error
leaves the API as ``{"error", "message", "details"}``; anything else is
a 500 with no internal message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AccountsError,
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_KIND: list[tuple[type[AccountsError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ExternalServiceError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: AccountsError) -> int:
    """HTTP status for a domain exception."""
    for kind, code in STATUS_BY_KIND:
        if isinstance(exc, kind):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def accounts_error_handler(request: Request, exc: AccountsError) -> JSONResponse:
    """Render a domain exception."""
    status_code = status_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %d %s", request.method, request.url.path, status_code, exc.code)

    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain exception handler on an app."""
    app.add_exception_handler(AccountsError, accounts_error_handler)
