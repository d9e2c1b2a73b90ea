"""
Document processing pipeline for ingestion.

Extracts text from uploads, chunks it, and stores owner-tagged chunks in the
vector index.

Dependencies: langchain_core, langchain_text_splitters, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import DocumentPipeline
from .models import ChunkMetadata, PipelineResult

__all__ = [
    "DocumentPipeline",
    "ChunkMetadata",
    "PipelineResult",
]
