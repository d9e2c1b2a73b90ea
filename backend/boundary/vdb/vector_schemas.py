"""
Vector chunk metadata and search result schemas.

Every stored chunk carries the owner and parent document it came from;
owner_id is the key the index filters on for tenant isolation.

Dependencies: pydantic
System role: Typed view over vector store documents
"""

from pydantic import BaseModel, Field


class VectorMetadata(BaseModel):
    """
    Metadata stamped on every chunk at indexing time.

    document_id is the string form of the document row's UUID since
    S3 Vectors metadata values are plain strings and numbers.
    """

    owner_id: str = Field(description="Token subject of the uploading user")
    document_id: str = Field(description="Parent document ID")
    chunk_id: str = Field(description="Deterministic chunk identifier")
    chunk_index: int | None = Field(default=None, description="Position in the parent document")
    start_index: int | None = Field(default=None, description="Character offset in the extracted text")


class VectorSearchResult(BaseModel):
    """One chunk returned by an owner-filtered similarity search."""

    chunk_id: str
    content: str = Field(description="Chunk text")
    metadata: VectorMetadata
    similarity_score: float = Field(description="Similarity to the query, higher is better")
