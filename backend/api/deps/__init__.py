"""API-specific dependencies."""

# Re-export common dependencies
from .auth import TokenVerifier, get_current_owner
from .container import ServiceContainer
from .dependencies import (
    get_async_db,
    get_chat_service,
    get_container,
    get_document_service,
    get_settings_dependency,
)

__all__ = [
    "ServiceContainer",
    "TokenVerifier",
    "get_async_db",
    "get_chat_service",
    "get_container",
    "get_current_owner",
    "get_document_service",
    "get_settings_dependency",
]
