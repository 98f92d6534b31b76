"""Health check endpoint"""

from fastapi import APIRouter

from src.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint"""
    return {"status": "healthy", "service": settings.app_name}
