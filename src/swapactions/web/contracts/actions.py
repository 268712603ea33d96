"""Solana Actions request and response contracts.

Field names follow the Solana Actions protocol (camelCase where it uses it),
so clients such as wallets and blink renderers can consume them directly.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ActionParameter(BaseModel):
    """A user-supplied value substituted into a linked action's href."""

    name: str = Field(..., description="Placeholder name used in the href template")
    label: Optional[str] = Field(None, description="Input placeholder text")
    required: Optional[bool] = Field(None, description="Whether the value is required")


class LinkedAction(BaseModel):
    """A follow-up action rendered as a button or input."""

    href: str = Field(..., description="Action URL, may contain {parameter} templates")
    label: str = Field(..., description="Button text")
    parameters: Optional[list[ActionParameter]] = Field(None, description="Inputs for the href")


class ActionLinks(BaseModel):
    """Linked actions offered by a descriptor."""

    actions: list[LinkedAction] = Field(default_factory=list)


class ActionError(BaseModel):
    """Error body for failed actions."""

    message: str = Field(..., description="Human-readable error message")


class ActionGetResponse(BaseModel):
    """Descriptor returned by GET on an action URL."""

    icon: str = Field(..., description="Absolute icon URL")
    title: str = Field(..., description="Action title")
    description: str = Field(..., description="Action description")
    label: str = Field(..., description="Default button text")
    disabled: Optional[bool] = Field(None, description="Whether the action is disabled")
    error: Optional[ActionError] = Field(None, description="Why the action is unavailable")
    links: Optional[ActionLinks] = Field(None, description="Linked follow-up actions")


class ActionPostRequest(BaseModel):
    """Body of a POST to an action URL."""

    account: Optional[str] = Field(None, description="Payer wallet public key (base58)")


class ActionPostResponse(BaseModel):
    """Unsigned transaction for the wallet to sign."""

    transaction: str = Field(..., description="Base64-encoded unsigned transaction")
    message: Optional[str] = Field(None, description="Optional message for the user")


class ActionRule(BaseModel):
    """Mapping from website paths to action API paths (actions.json)."""

    pathPattern: str
    apiPath: str


class ActionsJsonResponse(BaseModel):
    """Contents of /actions.json."""

    rules: list[ActionRule] = Field(default_factory=list)
