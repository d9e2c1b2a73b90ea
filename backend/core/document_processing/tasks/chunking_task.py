"""
Text chunking task using a fixed-size sliding window.

Splits extracted text into overlapping passages of a fixed character length.
Chunk i starts at i * (chunk_size - chunk_overlap), so concatenating the first
chunk with every later chunk minus its overlap reproduces the input exactly.

Dependencies: langchain_text_splitters, langchain_core
System role: Second stage of document ingestion pipeline
"""

import copy
from collections.abc import Iterator
from typing import Any

from langchain_core.documents import Document
from langchain_text_splitters import TextSplitter


class SlidingWindowTextSplitter(TextSplitter):
    """Split text into fixed-size character windows with a fixed overlap."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200, **kwargs: Any) -> None:
        """
        Initialize splitter.

        Args:
            chunk_size: Characters per chunk (every chunk but the last is exactly this long)
            chunk_overlap: Characters shared by consecutive chunks

        Raises:
            ValueError: When chunk_size <= 0, chunk_overlap < 0, or chunk_overlap >= chunk_size
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap < 0:
            raise ValueError(f"chunk_overlap must be non-negative, got {chunk_overlap}")
        if chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be less than chunk_size ({chunk_size})"
            )
        kwargs.setdefault("add_start_index", True)
        kwargs.setdefault("strip_whitespace", False)
        super().__init__(chunk_size=chunk_size, chunk_overlap=chunk_overlap, **kwargs)

    @property
    def step(self) -> int:
        return self._chunk_size - self._chunk_overlap

    def iter_windows(self, text: str) -> Iterator[tuple[int, str]]:
        """Yield (start_index, chunk) pairs in document order."""
        start = 0
        while start < len(text):
            end = start + self._chunk_size
            yield start, text[start:end]
            if end >= len(text):
                break
            start += self.step

    def split_text(self, text: str) -> list[str]:
        return [chunk for _, chunk in self.iter_windows(text)]

    def create_documents(
        self,
        texts: list[str],
        metadatas: list[dict] | None = None,
    ) -> list[Document]:
        """Create Documents carrying the exact window offset as start_index."""
        _metadatas = metadatas or [{}] * len(texts)
        documents = []
        for i, text in enumerate(texts):
            for start, chunk in self.iter_windows(text):
                metadata = copy.deepcopy(_metadatas[i])
                if self._add_start_index:
                    metadata["start_index"] = start
                documents.append(Document(page_content=chunk, metadata=metadata))
        return documents


class ChunkingTask:
    """Split extracted text into chunks using SlidingWindowTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValueError: When the size/overlap combination is invalid
        """
        self._splitter = SlidingWindowTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
        )

    @property
    def chunk_size(self) -> int:
        return self._splitter._chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self._splitter._chunk_overlap

    def chunk(self, text: str, metadata: dict | None = None) -> list[Document]:
        """
        Split text into chunks.

        Args:
            text: Extracted document text
            metadata: Metadata copied onto every chunk

        Returns:
            list[Document]: Ordered chunks with start_index metadata (empty for empty text)
        """
        if not text:
            return []
        return self._splitter.create_documents([text], metadatas=[metadata or {}])
