"""Health check endpoints."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "swapactions"}


@router.get("/health/detailed")
async def detailed_health(request: Request):
    """Detailed health check with configuration info."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": "swapactions",
        "version": "0.1.0",
        "router": request.app.state.pipeline.router.name,
        "config": settings.get_safe_dict(),
    }
