"""
Outcome of one document ingestion.

Dependencies: pydantic
System role: Return type for DocumentPipeline.ingest()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """What was written to the vector index for one document."""

    document_id: str
    chunk_count: int = Field(ge=0, description="Chunks written to the index")
    chunk_ids: list[str] = Field(default_factory=list, description="Deterministic IDs of the written chunks")
    namespace: str = Field(description="Index the chunks landed in")
    processing_time_ms: float = Field(description="Wall time of extract + chunk + index")
