"""
Vector index upload task.

Tags chunks with owner and document identifiers and stores them in the shared
vector index. Embeddings are generated by the index's embedding model.

Dependencies: langchain_core, backend.boundary.vdb
System role: Final stage of document ingestion pipeline
"""

import logging

from langchain_core.documents import Document

from backend.boundary.vdb.vector_index import VectorIndex
from backend.core.document_processing.models.chunk import ChunkMetadata
from backend.core.exceptions import IndexingError

logger = logging.getLogger(__name__)


class IndexingTask:
    """Upload document chunks to the vector index with owner metadata."""

    def __init__(self, vector_index: VectorIndex) -> None:
        """
        Initialize indexing task.

        Args:
            vector_index: Owner-scoped vector index wrapper
        """
        self._vector_index = vector_index

    @property
    def namespace(self) -> str:
        return self._vector_index.namespace

    def index(
        self,
        documents: list[Document],
        owner_id: str,
        document_id: str,
    ) -> list[str]:
        """
        Store chunks under the owner's identity.

        Each chunk's metadata is replaced with ChunkMetadata so every stored
        vector carries the owner of its parent document.

        Args:
            documents: Chunked LangChain Documents (start_index in metadata)
            owner_id: Owner of the parent document
            document_id: Parent document identifier

        Returns:
            list[str]: Stored chunk IDs

        Raises:
            IndexingError: When there is nothing to index or the store call fails
        """
        if not documents:
            raise IndexingError("No chunks to index", document_id=document_id)

        chunk_ids = []
        tagged = []
        for i, doc in enumerate(documents):
            start_index = doc.metadata.get("start_index", 0)
            chunk_id = ChunkMetadata.generate_chunk_id(document_id, start_index, doc.page_content)
            chunk_ids.append(chunk_id)

            metadata = ChunkMetadata(
                owner_id=owner_id,
                document_id=document_id,
                chunk_id=chunk_id,
                chunk_index=i,
                start_index=start_index,
            )
            tagged.append(Document(page_content=doc.page_content, metadata=metadata.model_dump()))

        try:
            self._vector_index.add_chunks(tagged, ids=chunk_ids)
        except Exception as e:
            logger.exception(
                "Failed to upload chunks to vector index",
                extra={
                    "document_id": document_id,
                    "owner_id": owner_id,
                    "error": str(e),
                },
            )
            raise IndexingError(
                f"Failed to index chunks: {e}",
                document_id=document_id,
                details={
                    "owner_id": owner_id,
                    "chunk_count": len(tagged),
                    "namespace": self.namespace,
                },
            ) from e

        logger.info(
            "Uploaded chunks to vector index",
            extra={
                "chunk_count": len(tagged),
                "document_id": document_id,
                "owner_id": owner_id,
                "namespace": self.namespace,
            },
        )
        return chunk_ids
