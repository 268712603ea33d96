"""Swap action endpoints.

Each route group is one parameterized set of endpoints; groups differ
only by prefix and presentation variant.

NO signing or broadcasting happens server-side. POST returns an unsigned
transaction for the wallet to sign.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from swapactions.swap.errors import SwapActionError
from swapactions.swap.pipeline import SwapPipeline
from swapactions.swap.selection import RandomChoice, SelectionPolicy
from swapactions.web.contracts.actions import (
    ActionGetResponse,
    ActionPostRequest,
    ActionPostResponse,
)
from swapactions.web.deps import get_action_service, get_pipeline
from swapactions.web.services.action_service import ActionService
from swapactions.web.services.variants import PresentationVariant

logger = logging.getLogger(__name__)


def _error_json(
    service: ActionService,
    variant: PresentationVariant,
    error: SwapActionError,
) -> JSONResponse:
    status_code, body = service.error_response(variant, error)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_swap_router(
    prefix: str,
    variant: PresentationVariant,
    random_variant: Optional[PresentationVariant] = None,
    selection: Optional[SelectionPolicy] = None,
    tag: str = "Jupiter Swap",
) -> APIRouter:
    """Build the swap endpoints for one route group.

    Args:
        prefix: Mount path, e.g. "/api/jupiter/swap"
        variant: Copy used for pair and amount descriptors
        random_variant: If set, also serve GET "/" picking a random input token
        selection: Policy for the random pick (uniform random by default)
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    selection = selection or RandomChoice()

    if random_variant is not None:

        @router.get("/", response_model=ActionGetResponse, response_model_exclude_none=True)
        async def describe_random_swap(
            pipeline: SwapPipeline = Depends(get_pipeline),
            service: ActionService = Depends(get_action_service),
        ):
            """Describe a swap of a randomly selected token."""
            config = pipeline.config
            symbol = selection.choose(config.random_candidates)
            pair = f"{symbol}-{config.random_output_symbol}"
            try:
                _, resolved = await pipeline.resolve(pair)
            except SwapActionError as e:
                return service.unavailable(random_variant, pair, e)
            return service.describe_pair(random_variant, prefix, pair, resolved)

    @router.get(
        "/{token_pair}", response_model=ActionGetResponse, response_model_exclude_none=True
    )
    async def describe_swap(
        token_pair: str,
        pipeline: SwapPipeline = Depends(get_pipeline),
        service: ActionService = Depends(get_action_service),
    ):
        """Describe swap options for a pair: preset USD amounts and a custom amount."""
        try:
            _, resolved = await pipeline.resolve(token_pair)
        except SwapActionError as e:
            return service.unavailable(variant, token_pair, e)
        return service.describe_pair(variant, prefix, token_pair, resolved)

    @router.get(
        "/{token_pair}/{amount}",
        response_model=ActionGetResponse,
        response_model_exclude_none=True,
    )
    async def describe_swap_amount(
        token_pair: str,
        amount: str,
        pipeline: SwapPipeline = Depends(get_pipeline),
        service: ActionService = Depends(get_action_service),
    ):
        """Describe a swap of a specific USD amount."""
        try:
            _, resolved = await pipeline.resolve(token_pair)
        except SwapActionError as e:
            return service.unavailable(variant, token_pair, e)
        return service.describe_amount(variant, token_pair, resolved)

    @router.post(
        "/{token_pair}", response_model=ActionPostResponse, response_model_exclude_none=True
    )
    @router.post(
        "/{token_pair}/{amount}",
        response_model=ActionPostResponse,
        response_model_exclude_none=True,
    )
    async def execute_swap(
        token_pair: str,
        amount: Optional[str] = None,
        payload: Optional[ActionPostRequest] = None,
        pipeline: SwapPipeline = Depends(get_pipeline),
        service: ActionService = Depends(get_action_service),
    ):
        """Build an unsigned swap transaction for a USD amount (default if omitted).

        The client must sign and submit the returned transaction itself.
        """
        account = payload.account if payload else None
        try:
            result = await pipeline.swap_usd(token_pair, amount, account)
        except SwapActionError as e:
            logger.info(f"Swap {token_pair} failed: {e.kind}: {e.message}")
            return _error_json(service, variant, e)
        return ActionPostResponse(transaction=result.transaction.transaction)

    return router


def create_trade_router(
    prefix: str,
    variant: PresentationVariant,
    tag: str = "Jupiter Trade",
) -> APIRouter:
    """Build the profit-target trade endpoints."""
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get(
        "/{token_pair}", response_model=ActionGetResponse, response_model_exclude_none=True
    )
    async def describe_trade(
        token_pair: str,
        pipeline: SwapPipeline = Depends(get_pipeline),
        service: ActionService = Depends(get_action_service),
    ):
        """Describe selling the input token at the configured profit target."""
        try:
            _, resolved = await pipeline.resolve(token_pair)
            target = await pipeline.profit_target_price(resolved.input_token)
        except SwapActionError as e:
            return service.unavailable(variant, token_pair, e)
        return service.describe_trade(variant, token_pair, resolved, target)

    @router.post(
        "/{token_pair}", response_model=ActionPostResponse, response_model_exclude_none=True
    )
    async def execute_trade(
        token_pair: str,
        payload: Optional[ActionPostRequest] = None,
        pipeline: SwapPipeline = Depends(get_pipeline),
        service: ActionService = Depends(get_action_service),
    ):
        """Build an unsigned transaction swapping one whole input token."""
        account = payload.account if payload else None
        try:
            result = await pipeline.swap_whole_token(token_pair, account)
        except SwapActionError as e:
            logger.info(f"Trade {token_pair} failed: {e.kind}: {e.message}")
            return _error_json(service, variant, e)
        return ActionPostResponse(transaction=result.transaction.transaction)

    return router
