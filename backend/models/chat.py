"""
Chat domain models and schemas.

Request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    """Request schema for chat questions."""

    query: str = Field(description="User question")

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Query is required")
        return value


class ChatResponse(BaseModel):
    """Response schema for chat questions."""

    message: str = "Chat successful"
    answer: str
