"""Health Probe — liveness endpoint for container orchestration."""

from fastapi import APIRouter, status

from oss_register.config import get_settings

router = APIRouter(prefix="/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "oss-register-api",
        "version": get_settings().api_version,
    }
