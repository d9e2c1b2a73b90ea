"""
Exception handlers for the API.

Maps the domain exception hierarchy onto HTTP responses with a uniform
{"detail", "error"} body and logs each failure with its context.

Dependencies: fastapi, backend.core.exceptions
System role: Error-to-response translation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from backend.core.exceptions import (
    AuthError,
    ExtractionError,
    GenerationError,
    IndexingError,
    MemoryVaultException,
    RetrievalError,
    ValidationError,
)
from backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; subclasses before their bases.
STATUS_CODES: list[tuple[type[MemoryVaultException], int]] = [
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ExtractionError, 422),
    (IndexingError, status.HTTP_502_BAD_GATEWAY),
    (RetrievalError, status.HTTP_502_BAD_GATEWAY),
    (GenerationError, status.HTTP_502_BAD_GATEWAY),
]


def status_code_for(exc: MemoryVaultException) -> int:
    for exc_type, code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def memoryvault_exception_handler(request: Request, exc: MemoryVaultException) -> JSONResponse:
    """Render a domain exception as an error response."""
    code = status_code_for(exc)
    extra = {
        "path": request.url.path,
        "error_type": type(exc).__name__,
        "status_code": code,
        "details": exc.details,
    }
    if code >= 500:
        logger.error(exc.message, extra=extra)
    else:
        logger.warning(exc.message, extra=extra)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    body = ErrorResponse(detail=exc.message, error=type(exc).__name__)
    return JSONResponse(status_code=code, content=body.model_dump(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain exception handler on an application."""
    app.add_exception_handler(MemoryVaultException, memoryvault_exception_handler)
