"""HTTP controllers for swap action endpoints.

SECURITY: These controllers MUST NOT:
- Access private keys
- Sign or broadcast transactions

All operations are read-only or prepare data for client-side signing.
"""

from swapactions.web.controllers.actions import router as actions_router
from swapactions.web.controllers.swaps import create_swap_router, create_trade_router

__all__ = [
    "actions_router",
    "create_swap_router",
    "create_trade_router",
]
