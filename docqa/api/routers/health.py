"""
Liveness endpoint.

Routes: GET /health

Dependencies: fastapi, docqa
System role: Health check HTTP API
"""

from fastapi import APIRouter
from pydantic import BaseModel

from docqa import __version__


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str
    version: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness only; the vector store and model providers are not contacted."""
    return HealthResponse(status="healthy", version=__version__)
