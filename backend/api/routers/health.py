"""
Liveness endpoint.

Routes: GET /health (no authentication)

Dependencies: fastapi
System role: Load balancer and container health check
"""

from fastapi import APIRouter
from pydantic import BaseModel

SERVICE_NAME = "MemoryVault API"


class HealthResponse(BaseModel):
    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is up; does not touch the database or vector store."""
    return HealthResponse(status="healthy", message=f"{SERVICE_NAME} is running")
