"""
Task modules for document processing pipeline.

Exports: ExtractionTask, ChunkingTask, SlidingWindowTextSplitter, IndexingTask
"""

from .chunking_task import ChunkingTask, SlidingWindowTextSplitter
from .extraction_task import ExtractionTask
from .indexing_task import IndexingTask

__all__ = [
    "ExtractionTask",
    "ChunkingTask",
    "SlidingWindowTextSplitter",
    "IndexingTask",
]
