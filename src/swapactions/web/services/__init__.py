"""Web services for swap actions.

SECURITY: These services MUST NOT:
- Access private keys or seed phrases
- Sign or broadcast transactions

They build action descriptors and hand unsigned transactions back to
the client for signing.
"""

from swapactions.web.services.action_service import ActionService, format_usd
from swapactions.web.services.variants import (
    BUY_VARIANT,
    MEME_VARIANT,
    RANDOM_VARIANT,
    TRADE_VARIANT,
    PresentationVariant,
    get_variant,
)

__all__ = [
    "ActionService",
    "format_usd",
    "PresentationVariant",
    "BUY_VARIANT",
    "MEME_VARIANT",
    "RANDOM_VARIANT",
    "TRADE_VARIANT",
    "get_variant",
]
