"""
Vector database boundary layer.

Provides the owner-scoped vector index used for storage and retrieval.
- VectorIndex: S3 Vectors (production) or any dict-filter LangChain store
- InMemoryVectorIndex: langchain_core in-memory store for local dev and tests

Dependencies: langchain_core, langchain_aws
System role: Vector store adapter for RAG retrieval
"""

from backend.boundary.vdb.vector_index import InMemoryVectorIndex, VectorIndex
from backend.boundary.vdb.vector_schemas import VectorMetadata, VectorSearchResult
from backend.boundary.vdb.vector_store_factory import create_vector_index

__all__ = [
    "VectorIndex",
    "InMemoryVectorIndex",
    "VectorMetadata",
    "VectorSearchResult",
    "create_vector_index",
]
