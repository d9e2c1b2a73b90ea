"""RAG query business logic.

Includes the answer prompt and the answer synthesizer.
"""

from .answer_synthesizer import AnswerSynthesizer
from .prompt import NO_CONTEXT_ANSWER, RAG_ANSWER_PROMPT

__all__ = ["AnswerSynthesizer", "NO_CONTEXT_ANSWER", "RAG_ANSWER_PROMPT"]
