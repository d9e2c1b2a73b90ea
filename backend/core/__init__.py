"""
MemoryVault domain logic.

document_processing turns uploads into indexed chunks, retriever runs
owner-scoped similarity search, and rag_query turns retrieved chunks into
answers. exceptions is the error vocabulary shared with the outer layers.
"""

from backend.core.exceptions import (
    AuthError,
    DocumentProcessingError,
    ExtractionError,
    GenerationError,
    IndexingError,
    MemoryVaultException,
    RetrievalError,
    ValidationError,
)

__all__ = [
    "MemoryVaultException",
    "ValidationError",
    "AuthError",
    "DocumentProcessingError",
    "ExtractionError",
    "IndexingError",
    "RetrievalError",
    "GenerationError",
]
