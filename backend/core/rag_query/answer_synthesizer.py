"""
Answer synthesis over retrieved context.

Retrieves the caller's most relevant chunks, fills the RAG prompt, and asks
the chat model for an answer. When nothing is retrieved the model is not
called and a fixed answer is returned instead.

Dependencies: langchain_core, backend.core.retriever
System role: Question answering business logic
"""

import logging

from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable

from backend.core.exceptions import GenerationError, RetrievalError
from backend.core.rag_query.prompt import NO_CONTEXT_ANSWER, RAG_ANSWER_PROMPT, build_context
from backend.core.retriever import Retriever

logger = logging.getLogger(__name__)


class AnswerSynthesizer:
    """Answer questions from the caller's documents."""

    def __init__(self, retriever: Retriever, model: Runnable) -> None:
        """
        Initialize synthesizer.

        Args:
            retriever: Owner-scoped retriever
            model: Chat model configured with temperature 0
        """
        self._retriever = retriever
        self._chain = RAG_ANSWER_PROMPT | model | StrOutputParser()

    def answer(self, query: str, owner_id: str) -> str:
        """
        Answer a question using the owner's documents.

        Args:
            query: Free-text question
            owner_id: Owner whose documents may be used

        Returns:
            str: Model answer, or the no-context answer when nothing matched

        Raises:
            GenerationError: When retrieval or generation fails
        """
        try:
            chunks = self._retriever.retrieve(query, owner_id)
        except RetrievalError as e:
            raise GenerationError(
                f"Could not retrieve context: {e.message}",
                details=e.details,
            ) from e

        if not chunks:
            logger.info("No context found for question", extra={"owner_id": owner_id})
            return NO_CONTEXT_ANSWER

        context = build_context([chunk.content for chunk in chunks])

        try:
            answer = self._chain.invoke({"context": context, "question": query})
        except Exception as e:
            logger.exception(
                "Answer generation failed",
                extra={"owner_id": owner_id, "error": str(e)},
            )
            raise GenerationError(
                f"Failed to generate answer: {e}",
                details={"owner_id": owner_id},
            ) from e

        logger.info(
            "Generated answer",
            extra={"owner_id": owner_id, "context_chunks": len(chunks), "answer_len": len(answer)},
        )
        return answer
