"""
S3 client for document bucket operations.

Stores raw uploaded files at owner-scoped keys. The bucket is write-only from
the API's point of view; ingestion works on the in-memory upload.

Dependencies: boto3
System role: Object storage adapter for raw documents
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class S3DocumentClient:
    """S3 client for document bucket operations."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        client: Any | None = None,
    ) -> None:
        """
        Initialize S3 client for document bucket.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
            client: Pre-built boto3 S3 client (created from region when omitted)
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = client or boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def upload_document(
        self,
        key: str,
        body: bytes,
        content_type: str = "application/octet-stream",
    ) -> str:
        """
        Put a document at the given key.

        Args:
            key: S3 object key (path in bucket)
            body: Raw file bytes
            content_type: MIME type of the file

        Returns:
            str: The key the object was stored at

        Raises:
            ClientError: If the upload fails
        """
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except ClientError as e:
            logger.error(
                f"{__name__}:upload_document - S3 upload failed",
                extra={"bucket": self._bucket, "key": key, "error": str(e)},
            )
            raise

        logger.info(
            "Stored document in S3",
            extra={"bucket": self._bucket, "key": key, "size_bytes": len(body)},
        )
        return key
