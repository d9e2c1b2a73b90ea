"""
Google Gemini model factories.

Builds the LangChain Gemini clients used across the pipeline: a multimodal
model for text extraction, a deterministic chat model for answers, and the
embedding model behind the vector index.

Dependencies: langchain_google_genai
System role: Hosted model client construction
"""

import logging
from typing import Any

from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from backend.configs.llm import LLMSettings

logger = logging.getLogger(__name__)


def _credentials(settings: LLMSettings) -> dict[str, Any]:
    """API key kwargs; empty so the client falls back to GOOGLE_API_KEY."""
    if settings.google_api_key is None:
        return {}
    return {"google_api_key": settings.google_api_key}


def create_chat_model(settings: LLMSettings) -> ChatGoogleGenerativeAI:
    """
    Create the answer-generation model.

    Temperature is pinned to 0 so identical context and question produce
    the same answer.
    """
    logger.info(f"{__name__}:create_chat_model - model={settings.chat_model}")
    return ChatGoogleGenerativeAI(
        model=settings.chat_model,
        temperature=0,
        **_credentials(settings),
    )


def create_extraction_model(settings: LLMSettings) -> ChatGoogleGenerativeAI:
    """Create the multimodal model used to transcribe PDFs and image scans."""
    logger.info(f"{__name__}:create_extraction_model - model={settings.extraction_model}")
    return ChatGoogleGenerativeAI(
        model=settings.extraction_model,
        temperature=0,
        **_credentials(settings),
    )


def create_embeddings(settings: LLMSettings) -> GoogleGenerativeAIEmbeddings:
    """Create the embedding model used on write and query."""
    logger.info(f"{__name__}:create_embeddings - model={settings.embedding_model}")
    return GoogleGenerativeAIEmbeddings(
        model=settings.embedding_model,
        **_credentials(settings),
    )
