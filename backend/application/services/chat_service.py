"""
Chat service for single-turn Q&A with RAG.

Exposes semantic search and answer generation over the caller's documents.
Stateless: no conversation history is stored or replayed.

Dependencies: backend.core.retriever, backend.core.rag_query
System role: Chat service orchestration layer
"""

import logging

from fastapi.concurrency import run_in_threadpool

from backend.core.rag_query.answer_synthesizer import AnswerSynthesizer
from backend.core.retriever import RetrievedChunk, Retriever

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for question answering.

    Runs the synchronous retriever and synthesizer off the event loop.
    """

    def __init__(
        self,
        retriever: Retriever,
        synthesizer: AnswerSynthesizer,
    ) -> None:
        """
        Initialize chat service.

        Args:
            retriever: Owner-scoped retriever
            synthesizer: Answer synthesizer
        """
        self.retriever = retriever
        self.synthesizer = synthesizer

    async def search(self, query: str, owner_id: str) -> list[RetrievedChunk]:
        """
        Return the owner's chunks most relevant to the query.

        Raises:
            RetrievalError: If the vector search fails
        """
        logger.info("Search request", extra={"owner_id": owner_id, "query_len": len(query)})
        return await run_in_threadpool(self.retriever.retrieve, query, owner_id)

    async def answer(self, query: str, owner_id: str) -> str:
        """
        Answer a question from the owner's documents.

        Raises:
            GenerationError: If retrieval or generation fails
        """
        logger.info("Chat request", extra={"owner_id": owner_id, "query_len": len(query)})
        return await run_in_threadpool(self.synthesizer.answer, query, owner_id)
