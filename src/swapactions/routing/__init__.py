"""Routing module for token lookup, pricing and swap construction.

Routers:
- Jupiter: Solana DEX aggregator (token list, price, quote, swap APIs)
- Dry run: simulated Solana tokens and prices, no network access
"""

from swapactions.routing.base import (
    FeePolicy,
    RouterError,
    SlippagePolicy,
    SwapRouter,
    SwapTransaction,
    TokenMetadata,
    TokenPrice,
)
from swapactions.routing.dry_run import DryRunRouter
from swapactions.routing.factory import create_router
from swapactions.routing.jupiter import JupiterRouter

__all__ = [
    # Base classes
    "TokenMetadata",
    "TokenPrice",
    "SlippagePolicy",
    "FeePolicy",
    "SwapTransaction",
    "SwapRouter",
    "RouterError",
    # Routers
    "JupiterRouter",
    "DryRunRouter",
    # Factory
    "create_router",
]
