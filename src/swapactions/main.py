"""Main entry point - serves the swap actions API with uvicorn."""

import asyncio
import logging

import uvicorn

from swapactions.api.app import create_app
from swapactions.config import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Root logging at DEBUG in debug mode, INFO otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
    )


async def serve(settings: Settings) -> None:
    """Run the API until uvicorn receives SIGINT/SIGTERM."""
    logger.info(f"Environment: {settings.environment}")
    if settings.dry_run:
        logger.warning("DRY_RUN enabled - transactions are simulated placeholders")
    elif not settings.jupiter_api_key:
        logger.warning("JUPITER_API_KEY not set - using public Jupiter rate limits")

    server = uvicorn.Server(
        uvicorn.Config(
            create_app(settings),
            host=settings.api_host,
            port=settings.api_port,
            log_level="debug" if settings.debug else "info",
        )
    )
    logger.info(f"Starting API server on {settings.api_host}:{settings.api_port}")
    try:
        await server.serve()
    except Exception as e:
        logger.error(f"API error: {e}")
        raise
    logger.info("Shutdown complete")


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")


if __name__ == "__main__":
    main()
