"""
Retrieval logic with owner filtering.

Handles similarity search over the shared vector index, restricted to the
caller's chunks.

Dependencies: backend.boundary.vdb, backend.core.exceptions
System role: RAG retrieval business logic
"""

import logging

from pydantic import BaseModel, Field

from backend.boundary.vdb import VectorIndex
from backend.core.exceptions import RetrievalError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3


class RetrievedChunk(BaseModel):
    """A chunk returned for a query, most relevant first."""

    content: str = Field(description="Chunk text")
    score: float = Field(description="Similarity to the query, higher is better")
    document_id: str = Field(description="Parent document identifier")
    chunk_id: str = Field(description="Chunk identifier")


class Retriever:
    """Retrieval business logic."""

    def __init__(self, vector_index: VectorIndex, top_k: int = DEFAULT_TOP_K) -> None:
        """
        Initialize retriever.

        Args:
            vector_index: Owner-scoped vector index
            top_k: Default number of chunks returned per query
        """
        self._vector_index = vector_index
        self._top_k = top_k

    @property
    def top_k(self) -> int:
        return self._top_k

    def retrieve(
        self,
        query: str,
        owner_id: str,
        k: int | None = None,
    ) -> list[RetrievedChunk]:
        """
        Retrieve the owner's chunks most similar to the query.

        Args:
            query: Free-text question
            owner_id: Owner whose chunks may be returned
            k: Result limit (defaults to top_k; 0 returns no chunks)

        Returns:
            list[RetrievedChunk]: Up to k chunks in store ranking order
                (empty for a blank query)

        Raises:
            RetrievalError: When owner_id is missing or the search fails
            ValidationError: When k is negative
        """
        if not owner_id:
            raise RetrievalError("Owner identifier is required for retrieval")

        if not query or not query.strip():
            return []

        limit = self._top_k if k is None else k
        if limit < 0:
            raise ValidationError("k must not be negative", field="k")
        if limit == 0:
            return []

        try:
            results = self._vector_index.similarity_search(query=query, k=limit, owner_id=owner_id)
        except Exception as e:
            logger.exception(
                "Vector search failed",
                extra={"owner_id": owner_id, "error": str(e)},
            )
            raise RetrievalError(f"Vector search failed: {e}", owner_id=owner_id) from e

        chunks = [
            RetrievedChunk(
                content=result.content,
                score=result.similarity_score,
                document_id=result.metadata.document_id,
                chunk_id=result.chunk_id,
            )
            for result in results[:limit]
        ]

        logger.info(
            "Retrieved chunks",
            extra={"owner_id": owner_id, "k": limit, "result_count": len(chunks)},
        )
        return chunks
