"""Factory for creating the swap router.

Creates the Jupiter router unless dry-run mode is on, otherwise
falls back to the simulated router.
"""

import logging
from typing import Optional

from swapactions.config import Settings, get_settings
from swapactions.routing.base import SwapRouter

logger = logging.getLogger(__name__)


def create_router(settings: Optional[Settings] = None) -> SwapRouter:
    """Create the router for the current settings."""
    settings = settings or get_settings()

    if not settings.dry_run:
        from swapactions.routing.jupiter import JupiterRouter

        logger.info("Using Jupiter router")
        return JupiterRouter(
            api_key=settings.jupiter_api_key,
            quote_api_url=settings.jupiter_quote_api_url,
            price_api_url=settings.jupiter_price_api_url,
            token_api_url=settings.jupiter_token_api_url,
            timeout=settings.http_timeout_seconds,
        )

    from swapactions.routing.dry_run import DryRunRouter

    logger.info("Dry-run mode - using simulated router")
    return DryRunRouter()
