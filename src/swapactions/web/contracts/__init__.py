"""Request and response contracts for the web layer.

These Pydantic models define the Solana Actions interface for web clients.
"""

from swapactions.web.contracts.actions import (
    ActionError,
    ActionGetResponse,
    ActionLinks,
    ActionParameter,
    ActionPostRequest,
    ActionPostResponse,
    ActionRule,
    ActionsJsonResponse,
    LinkedAction,
)

__all__ = [
    "ActionError",
    "ActionGetResponse",
    "ActionLinks",
    "ActionParameter",
    "ActionPostRequest",
    "ActionPostResponse",
    "ActionRule",
    "ActionsJsonResponse",
    "LinkedAction",
]
