"""Swap action pipeline.

Resolves a token pair, converts a USD amount into the input token's
smallest unit, requests a quote and builds the unsigned transaction.

The pipeline never signs or submits anything. The returned transaction
is for the caller's wallet to sign.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from swapactions.config import PipelineConfig
from swapactions.routing.base import (
    FeePolicy,
    RouterError,
    SlippagePolicy,
    SwapRouter,
    SwapTransaction,
    TokenMetadata,
)
from swapactions.swap.amount import convert_usd_amount, fetch_usd_price, parse_usd_amount
from swapactions.swap.errors import MissingAccount, QuoteFailure, TransactionBuildFailure
from swapactions.swap.pair import ResolvedPair, TokenPairSpec, parse_pair, resolve_pair

logger = logging.getLogger(__name__)


@dataclass
class SwapResult:
    """Outcome of a successful pipeline run."""

    pair: TokenPairSpec
    input_token: TokenMetadata
    output_token: TokenMetadata
    token_amount: int
    transaction: SwapTransaction
    usd_amount: Optional[Decimal] = None


class SwapPipeline:
    """Pair resolution, amount conversion, quoting and transaction building."""

    def __init__(
        self,
        router: SwapRouter,
        config: Optional[PipelineConfig] = None,
        fee_policy: Optional[FeePolicy] = None,
    ):
        self.router = router
        self.config = config or PipelineConfig()
        self.slippage = SlippagePolicy(auto=True, max_bps=self.config.max_auto_slippage_bps)
        self.fee_policy = fee_policy or FeePolicy()

    async def resolve(self, pair: Union[str, TokenPairSpec]) -> tuple[TokenPairSpec, ResolvedPair]:
        """Parse (if needed) and resolve a token pair."""
        spec = parse_pair(pair) if isinstance(pair, str) else pair
        return spec, await resolve_pair(self.router, spec)

    async def price(self, token: TokenMetadata) -> Decimal:
        """Current USD price of a token."""
        return await fetch_usd_price(self.router, token)

    async def profit_target_price(self, token: TokenMetadata) -> Decimal:
        """USD price at which selling meets the configured profit target."""
        price = await self.price(token)
        return price * (1 + self.config.profit_percentage / 100)

    async def quote(self, input_address: str, output_address: str, amount: int) -> dict:
        """Request a quote under the auto-slippage policy."""
        try:
            return await self.router.get_swap_quote(
                input_address, output_address, amount, self.slippage
            )
        except RouterError as e:
            logger.warning(
                f"{self.router.name} quote failed for {amount} {input_address} -> "
                f"{output_address}: {e}"
            )
            raise QuoteFailure(f"No swap route available: {e}") from e

    async def build_transaction(self, quote: dict, payer: str) -> SwapTransaction:
        """Build the unsigned transaction for quote, paid by payer."""
        try:
            return await self.router.build_swap_transaction(quote, payer, self.fee_policy)
        except RouterError as e:
            logger.warning(f"{self.router.name} transaction build failed for {payer}: {e}")
            raise TransactionBuildFailure(f"Failed to build swap transaction: {e}") from e

    async def swap_usd(
        self,
        pair: Union[str, TokenPairSpec],
        amount: Optional[Union[str, Decimal]],
        account: Optional[str],
    ) -> SwapResult:
        """Swap a USD-denominated amount of the pair's input token.

        A missing amount means the configured default.
        """
        payer = self._require_account(account)
        usd_amount = parse_usd_amount(amount, self.config.default_amount_usd)
        spec, resolved = await self.resolve(pair)

        token_amount = await convert_usd_amount(self.router, usd_amount, resolved.input_token)
        logger.info(
            f"Swapping {token_amount} {resolved.input_token.symbol} to "
            f"{resolved.output_token.symbol} (${usd_amount}) for {payer}"
        )

        transaction = await self._quote_and_build(resolved, token_amount, payer)
        return SwapResult(
            pair=spec,
            input_token=resolved.input_token,
            output_token=resolved.output_token,
            token_amount=token_amount,
            transaction=transaction,
            usd_amount=usd_amount,
        )

    async def swap_whole_token(
        self,
        pair: Union[str, TokenPairSpec],
        account: Optional[str],
    ) -> SwapResult:
        """Swap exactly one whole input token.

        The input price must still be available; trade actions are
        described against it.
        """
        payer = self._require_account(account)
        spec, resolved = await self.resolve(pair)
        target = await self.profit_target_price(resolved.input_token)

        token_amount = 10 ** resolved.input_token.decimals
        logger.info(
            f"Trading 1 {resolved.input_token.symbol} for {resolved.output_token.symbol} "
            f"(profit target {target:.2f}) for {payer}"
        )

        transaction = await self._quote_and_build(resolved, token_amount, payer)
        return SwapResult(
            pair=spec,
            input_token=resolved.input_token,
            output_token=resolved.output_token,
            token_amount=token_amount,
            transaction=transaction,
        )

    async def _quote_and_build(
        self,
        resolved: ResolvedPair,
        token_amount: int,
        payer: str,
    ) -> SwapTransaction:
        quote = await self.quote(
            resolved.input_token.address, resolved.output_token.address, token_amount
        )
        return await self.build_transaction(quote, payer)

    @staticmethod
    def _require_account(account: Optional[str]) -> str:
        if not account or not account.strip():
            raise MissingAccount()
        return account.strip()
