"""actions.json endpoint for Solana Actions discovery."""

from fastapi import APIRouter, Request

from swapactions.web.contracts.actions import ActionRule, ActionsJsonResponse

router = APIRouter(tags=["Actions"])


@router.get("/actions.json", response_model=ActionsJsonResponse)
async def actions_json(request: Request) -> ActionsJsonResponse:
    """Map website paths to the action API paths served here."""
    prefixes = getattr(request.app.state, "action_prefixes", [])
    rules = [
        ActionRule(pathPattern=f"{prefix}/**", apiPath=f"{prefix}/**") for prefix in prefixes
    ]
    rules.append(ActionRule(pathPattern="/api/**", apiPath="/api/**"))
    return ActionsJsonResponse(rules=rules)
