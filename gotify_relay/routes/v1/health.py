"""Health endpoint"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness check")
async def health() -> dict[str, str]:
    """Report that the relay is up, without contacting Gotify"""
    return {"status": "healthy"}
