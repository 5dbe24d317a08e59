from fastapi import APIRouter, status
from pydantic import BaseModel

from session_auth.domain.base import utc_now

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: str


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check():
    """Liveness probe; does not touch the database"""
    return HealthResponse(status="ok", timestamp=utc_now().isoformat() + "Z")
