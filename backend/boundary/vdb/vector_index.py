"""
Owner-scoped vector index.

Wraps a LangChain VectorStore holding every owner's chunks in one namespace.
Every search is filtered on owner_id, and results are checked again after the
query so a chunk belonging to another owner is never returned. Scores are
reported as similarities (higher is better); stores that return a cosine
distance are converted with 1 - distance.

Dependencies: langchain_core
System role: Vector store adapter for ingestion and RAG retrieval
"""

import logging
from collections.abc import Callable
from typing import Any

from langchain_core.documents import Document
from langchain_core.vectorstores import VectorStore

from backend.boundary.vdb.vector_schemas import VectorMetadata, VectorSearchResult

logger = logging.getLogger(__name__)


class VectorIndex:
    """Vector store wrapper with owner filtering for multi-tenant isolation."""

    def __init__(
        self,
        vector_store: VectorStore,
        namespace: str = "memoryvault",
        scores_are_distances: bool = False,
    ) -> None:
        """
        Initialize vector index.

        Args:
            vector_store: LangChain vector store (embeds on write and query)
            namespace: Index name shared by all owners
            scores_are_distances: Store reports cosine distance (lower is better)
        """
        self._vector_store = vector_store
        self.namespace = namespace
        self._scores_are_distances = scores_are_distances

    @property
    def vector_store(self) -> VectorStore:
        return self._vector_store

    def _owner_filter(self, owner_id: str) -> Any:
        """Metadata filter restricting a search to one owner."""
        return {"owner_id": owner_id}

    def add_chunks(self, documents: list[Document], ids: list[str]) -> list[str]:
        """
        Embed and store chunks.

        Args:
            documents: Chunks with owner/document metadata
            ids: Chunk identifiers, one per document

        Returns:
            list[str]: Identifiers reported by the store
        """
        return self._vector_store.add_documents(documents=documents, ids=ids)

    def similarity_search(
        self,
        query: str,
        k: int,
        owner_id: str,
    ) -> list[VectorSearchResult]:
        """
        Search the owner's chunks, most relevant first.

        Args:
            query: Search query text
            k: Number of results to return
            owner_id: Owner whose chunks may be returned

        Returns:
            list[VectorSearchResult]: Results in the order produced by the store,
                scored as similarities

        Raises:
            ValueError: When owner_id is empty
        """
        if not owner_id:
            raise ValueError("owner_id is required for vector search")

        results = self._vector_store.similarity_search_with_score(
            query=query,
            k=k,
            filter=self._owner_filter(owner_id),
        )

        search_results = []
        for doc, score in results:
            metadata = doc.metadata
            if metadata.get("owner_id") != owner_id:
                logger.error(
                    "Vector store returned a chunk outside the owner filter",
                    extra={"owner_id": owner_id, "chunk_id": metadata.get("chunk_id")},
                )
                continue
            search_results.append(
                VectorSearchResult(
                    chunk_id=metadata.get("chunk_id", ""),
                    content=doc.page_content,
                    metadata=VectorMetadata(
                        owner_id=metadata.get("owner_id", ""),
                        document_id=str(metadata.get("document_id", "")),
                        chunk_id=metadata.get("chunk_id", ""),
                        chunk_index=metadata.get("chunk_index"),
                        start_index=metadata.get("start_index"),
                    ),
                    similarity_score=self._similarity(score),
                )
            )

        logger.info(
            f"{__name__}:similarity_search - Found {len(search_results)} results",
            extra={"owner_id": owner_id, "k": k, "namespace": self.namespace},
        )
        return search_results[:k]

    def _similarity(self, score: float) -> float:
        if self._scores_are_distances:
            return 1.0 - float(score)
        return float(score)


class InMemoryVectorIndex(VectorIndex):
    """VectorIndex over langchain_core's InMemoryVectorStore (callable filters)."""

    def _owner_filter(self, owner_id: str) -> Callable[[Document], bool]:
        return lambda doc: doc.metadata.get("owner_id") == owner_id
