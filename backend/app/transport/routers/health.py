"""Health check router."""
from fastapi import APIRouter

from app.logging_config import SERVICE_NAME

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness probe; does not touch the fragment service."""
    return {"status": "ok", "service": SERVICE_NAME}
