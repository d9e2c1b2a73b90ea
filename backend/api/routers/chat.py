"""Chat API endpoints.

Routes:
- POST /documents/chat - Answer a question from the caller's documents

Dependencies: backend.application.services.chat_service
System role: Question answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps import get_chat_service, get_current_owner
from backend.application.services.chat_service import ChatService
from backend.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    owner_id: str = Depends(get_current_owner),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer a question using only the caller's documents.

    Args:
        request: ChatRequest with the question
        owner_id: Caller identity (injected)
        chat_service: Injected ChatService

    Returns:
        ChatResponse: The model's answer, or a fixed reply when nothing relevant was found

    Raises:
        GenerationError(502): Retrieval or generation failed
    """
    answer = await chat_service.answer(request.query, owner_id)
    logger.info("Chat answered", extra={"owner_id": owner_id, "answer_len": len(answer)})
    return ChatResponse(answer=answer)
