"""
Dependency injection providers.

Factory functions for FastAPI dependencies, resolved from the service
container stored on app.state.

Dependencies: backend.configs, backend.application, backend.api.deps.container
System role: DI providers for service injection
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.deps.container import ServiceContainer
from backend.application.services import ChatService, DocumentService
from backend.configs import Settings


def get_container(request: Request) -> ServiceContainer:
    """Get the service container of the running application."""
    return request.app.state.services


def get_settings_dependency(container: ServiceContainer = Depends(get_container)) -> Settings:
    """Get the settings the application was created with."""
    return container.settings


async def get_async_db(
    container: ServiceContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)
    """
    async with container.session_factory() as session:
        yield session


def get_document_service(
    db: AsyncSession = Depends(get_async_db),
    container: ServiceContainer = Depends(get_container),
) -> DocumentService:
    """
    Get document service instance.

    Args:
        db: Async database session (injected via Depends)
        container: Service container (injected via Depends)

    Returns:
        DocumentService: Document service with the shared pipeline and storage
    """
    return DocumentService(
        db=db,
        pipeline=container.pipeline,
        storage=container.storage,
    )


def get_chat_service(container: ServiceContainer = Depends(get_container)) -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Chat service with the shared retriever and synthesizer
    """
    return ChatService(
        retriever=container.retriever,
        synthesizer=container.synthesizer,
    )
