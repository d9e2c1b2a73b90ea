"""
MemoryVault domain errors.

Each layer raises the narrowest error that describes what failed; the API
maps them onto HTTP status codes in one place (backend.api.error_handlers).
`details` carries structured context for logs and is never shown to users.

Dependencies: None (pure domain layer)
System role: Shared error vocabulary for every layer
"""

from typing import Any


def _with_context(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Copy details and add the context values that are set."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value})
    return merged


class MemoryVaultException(Exception):
    """Root of the hierarchy; `message` is safe to return to the caller."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ValidationError(MemoryVaultException):
    """A request is well-formed JSON/multipart but missing something required."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _with_context(details, field=field))


class AuthError(MemoryVaultException):
    """Bearer token missing, malformed, or rejected."""


class DocumentProcessingError(MemoryVaultException):
    """
    An uploaded document could not be made searchable.

    Args:
        message: Error message
        document_id: Row ID of the document being ingested
        details: Additional context
    """

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _with_context(details, document_id=document_id))


class ExtractionError(DocumentProcessingError):
    """No usable text could be read from the upload (unsupported type, blank, or model failure)."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        mime_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, document_id, _with_context(details, mime_type=mime_type))


class IndexingError(DocumentProcessingError):
    """Chunks could not be embedded or written to the vector index."""


class RetrievalError(MemoryVaultException):
    """An owner-scoped vector search failed or was attempted without an owner."""

    def __init__(
        self,
        message: str,
        owner_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _with_context(details, owner_id=owner_id))


class GenerationError(MemoryVaultException):
    """The chat model could not produce an answer."""
