"""
Language model boundary layer.

Factories for the hosted Gemini chat and embedding models.
"""

from backend.boundary.llm.gemini import (
    create_chat_model,
    create_embeddings,
    create_extraction_model,
)

__all__ = ["create_chat_model", "create_embeddings", "create_extraction_model"]
