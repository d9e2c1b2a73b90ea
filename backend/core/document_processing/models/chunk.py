"""
Chunk metadata model for document processing pipeline.

Describes the metadata attached to every chunk stored in the vector index.
The owner_id field is the tenant key filtered on at query time.

Dependencies: pydantic
System role: Metadata contract between indexing and retrieval
"""

import hashlib

from pydantic import BaseModel, Field


class ChunkMetadata(BaseModel):
    """Filterable metadata stored alongside each chunk vector."""

    owner_id: str = Field(description="Owner of the parent document (token subject)")
    document_id: str = Field(description="Parent document identifier")
    chunk_id: str = Field(description="Deterministic chunk identifier (content hash)")
    chunk_index: int = Field(ge=0, description="Position of the chunk in the document")
    start_index: int = Field(ge=0, description="Character offset of the chunk in the extracted text")

    @staticmethod
    def generate_chunk_id(document_id: str, start_index: int, content: str) -> str:
        """
        Generate deterministic chunk ID.

        Args:
            document_id: Parent document identifier
            start_index: Character offset of the chunk
            content: Chunk text content

        Returns:
            str: SHA-256 hash prefix (16 chars)
        """
        hash_input = f"{document_id}:{start_index}:{content}"
        return hashlib.sha256(hash_input.encode()).hexdigest()[:16]
