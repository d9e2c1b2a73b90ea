"""
Models for document processing pipeline.

Exports: ChunkMetadata, PipelineResult
"""

from .chunk import ChunkMetadata
from .pipeline_result import PipelineResult

__all__ = [
    "ChunkMetadata",
    "PipelineResult",
]
