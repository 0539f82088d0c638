"""Health check endpoint."""

from fastapi import APIRouter, Request

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """Return service health status."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "skill": request.app.state.skill.name,
    }
