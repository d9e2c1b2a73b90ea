"""
Vector index factory for selecting between in-memory (dev) and S3 Vectors (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: langchain_core, langchain_aws, backend.configs
System role: Vector index instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore

from backend.boundary.vdb.vector_index import InMemoryVectorIndex, VectorIndex
from backend.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def create_vector_index(settings: VectorStoreSettings, embeddings: Embeddings) -> VectorIndex:
    """
    Build the vector index described by configuration.

    Args:
        settings: Vector store settings
        embeddings: Embedding model used on write and query

    Returns:
        VectorIndex: Configured index wrapper

    Raises:
        ValueError: If store_type is invalid
    """
    store_type = settings.store_type.lower()

    if store_type == "memory":
        logger.info(f"{__name__}:create_vector_index - Creating in-memory vector store (local dev mode)")
        return InMemoryVectorIndex(
            InMemoryVectorStore(embedding=embeddings),
            namespace=settings.namespace,
        )

    elif store_type == "s3":
        from langchain_aws.vectorstores import AmazonS3Vectors

        logger.info(f"{__name__}:create_vector_index - Creating S3 Vectors store (production mode)")
        return VectorIndex(
            AmazonS3Vectors(
                vector_bucket_name=settings.vectors_bucket,
                index_name=settings.namespace,
                embedding=embeddings,
                region_name=settings.aws_region,
            ),
            namespace=settings.namespace,
            scores_are_distances=True,
        )

    else:
        raise ValueError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'memory' (dev) or 's3' (production)."
        )
