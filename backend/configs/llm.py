"""
Language model configuration settings.

Google Gemini models used for text extraction, embeddings, and answer
generation.

Dependencies: pydantic_settings
System role: Model client configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Gemini model identifiers and credentials."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    google_api_key: SecretStr | None = Field(
        default=None,
        description="Google AI API key (falls back to GOOGLE_API_KEY when unset)",
    )
    chat_model: str = Field(
        default="gemini-2.0-flash",
        description="Model answering questions over retrieved context",
    )
    extraction_model: str = Field(
        default="gemini-2.0-flash",
        description="Multimodal model extracting text from PDFs and scans",
    )
    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Embedding model (768 dimensions)",
    )
