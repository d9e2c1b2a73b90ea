"""
Text extraction task.

Converts uploaded bytes into plain text. PDFs and image scans are
transcribed by a multimodal Gemini model; every other declared type
(including a missing one or application/octet-stream) is decoded as UTF-8.
Bytes that are not valid UTF-8 become U+FFFD so one stray byte does not
reject the whole document.

Dependencies: langchain_core
System role: First stage of document ingestion pipeline
"""

import base64
import logging

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage

from backend.core.exceptions import ExtractionError

logger = logging.getLogger(__name__)

EXTRACTION_INSTRUCTION = "Extract all text from this document. Return only the raw text."

MODEL_MIME_TYPES = frozenset(
    {
        "application/pdf",
        "image/png",
        "image/jpeg",
        "image/webp",
    }
)


def normalize_mime_type(mime_type: str | None) -> str:
    """Strip parameters (e.g. charset) and lowercase a MIME type."""
    if not mime_type:
        return ""
    return mime_type.split(";", 1)[0].strip().lower()


def _message_text(message: BaseMessage) -> str:
    """Flatten chat model output that may arrive as a list of content blocks."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class ExtractionTask:
    """Extract plain text from uploaded document bytes."""

    def __init__(self, model: BaseChatModel) -> None:
        """
        Initialize extraction task.

        Args:
            model: Multimodal chat model used for PDFs and image scans
        """
        self._model = model

    def extract(
        self,
        data: bytes,
        mime_type: str,
        document_id: str | None = None,
    ) -> str:
        """
        Extract plain text from a document.

        Args:
            data: Raw document bytes
            mime_type: Declared MIME type of the upload
            document_id: Document identifier for error context

        Returns:
            str: Extracted text

        Raises:
            ExtractionError: When model transcription fails or the document
                has no extractable text
        """
        normalized = normalize_mime_type(mime_type)

        if normalized in MODEL_MIME_TYPES:
            if not data:
                raise ExtractionError(
                    "Document has no extractable text",
                    document_id=document_id,
                    mime_type=normalized,
                )
            text = self._transcribe(data, normalized, document_id)
        else:
            text = self._decode(data, normalized, document_id)

        if not text.strip():
            raise ExtractionError(
                "Document has no extractable text",
                document_id=document_id,
                mime_type=normalized,
            )

        logger.info(
            "Extracted document text",
            extra={
                "document_id": document_id,
                "mime_type": normalized,
                "char_count": len(text),
            },
        )
        return text

    def _decode(self, data: bytes, mime_type: str, document_id: str | None) -> str:
        text = data.decode("utf-8", errors="replace")
        if "\ufffd" in text:
            logger.warning(
                "Replaced bytes that are not valid UTF-8",
                extra={"document_id": document_id, "mime_type": mime_type},
            )
        return text

    def _transcribe(self, data: bytes, mime_type: str, document_id: str | None) -> str:
        message = HumanMessage(
            content=[
                {"type": "text", "text": EXTRACTION_INSTRUCTION},
                {
                    "type": "media",
                    "mime_type": mime_type,
                    "data": base64.b64encode(data).decode("ascii"),
                },
            ]
        )

        try:
            response = self._model.invoke([message])
        except Exception as e:
            logger.exception(
                "Model extraction failed",
                extra={"document_id": document_id, "mime_type": mime_type, "error": str(e)},
            )
            raise ExtractionError(
                f"Failed to extract text with model: {e}",
                document_id=document_id,
                mime_type=mime_type,
            ) from e

        return _message_text(response)
