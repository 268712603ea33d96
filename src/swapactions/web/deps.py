"""Request-scoped dependencies resolved from FastAPI app state."""

from fastapi import Request

from swapactions.swap.pipeline import SwapPipeline
from swapactions.web.services.action_service import ActionService


def get_pipeline(request: Request) -> SwapPipeline:
    """Resolve the swap pipeline from app.state."""
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        raise RuntimeError("Swap pipeline is not initialized in app.state.pipeline")
    return pipeline


def get_action_service(request: Request) -> ActionService:
    """Resolve the action descriptor service from app.state."""
    service = getattr(request.app.state, "action_service", None)
    if service is None:
        raise RuntimeError("Action service is not initialized in app.state.action_service")
    return service
