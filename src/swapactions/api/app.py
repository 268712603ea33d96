"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swapactions.config import Settings, get_settings
from swapactions.routing.base import SwapRouter
from swapactions.routing.factory import create_router
from swapactions.swap.pipeline import SwapPipeline
from swapactions.swap.selection import SelectionPolicy
from swapactions.web.services.action_service import ActionService
from swapactions.web.services.variants import RANDOM_VARIANT, TRADE_VARIANT, get_variant

logger = logging.getLogger(__name__)

JUPITER_SWAP_PREFIX = "/api/jupiter/swap"
TRADER_SWAP_PREFIX = "/api/trader/swap"
TRADER_TRADE_PREFIX = "/api/trader/trade"

# Headers Solana Actions clients expect on every response
ACTIONS_HEADERS = ["Content-Type", "Authorization", "Content-Encoding", "Accept-Encoding"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Swap router: {app.state.pipeline.router.name}")
    yield
    # Shutdown
    await app.state.pipeline.router.close()


def create_app(
    settings: Optional[Settings] = None,
    router: Optional[SwapRouter] = None,
    selection: Optional[SelectionPolicy] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (cached environment settings if None)
        router: Swap router (built from settings if None)
        selection: Token selection policy for random swap actions
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Swap Actions API",
        description="Solana Actions for Jupiter token swaps",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Actions are fetched cross-origin by wallets and blink renderers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=ACTIONS_HEADERS,
        expose_headers=ACTIONS_HEADERS,
    )

    config = settings.pipeline_config()
    app.state.settings = settings
    app.state.pipeline = SwapPipeline(router or create_router(settings), config)
    app.state.action_service = ActionService(config)
    app.state.action_prefixes = [JUPITER_SWAP_PREFIX, TRADER_SWAP_PREFIX, TRADER_TRADE_PREFIX]

    # Register routes
    from swapactions.api.routes import health
    from swapactions.web.controllers import actions_router, create_swap_router, create_trade_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(actions_router)
    app.include_router(
        create_swap_router(JUPITER_SWAP_PREFIX, get_variant(settings.jupiter_swap_variant))
    )
    app.include_router(
        create_swap_router(
            TRADER_SWAP_PREFIX,
            get_variant(settings.trader_swap_variant),
            random_variant=RANDOM_VARIANT,
            selection=selection,
        )
    )
    app.include_router(create_trade_router(TRADER_TRADE_PREFIX, TRADE_VARIANT))

    return app


# Default app instance
app = create_app()
