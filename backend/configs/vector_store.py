"""
Vector store configuration settings.

Manages the vector index backend and retrieval defaults. All owners share a
single namespace; isolation is logical through the owner_id metadata filter.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (in-memory for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="s3",
        description="Vector store type: 'memory' for local dev, 's3' for production",
    )
    namespace: str = Field(
        default="memoryvault",
        description="Index name shared by every owner and document",
    )
    vectors_bucket: str = Field(
        default="memoryvault-vectors",
        description="S3 Vectors bucket name",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")

    top_k: int = Field(default=3, ge=1, description="Number of chunks retrieved per query")
