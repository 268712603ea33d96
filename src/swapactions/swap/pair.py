"""Token pair parsing and resolution."""

import asyncio
import logging
from typing import NamedTuple

from swapactions.routing.base import RouterError, SwapRouter, TokenMetadata
from swapactions.swap.errors import MalformedPairSpec, TokenMetadataNotFound

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = "-"


class TokenPairSpec(NamedTuple):
    """Ordered pair of symbols: swap from input to output."""

    input_symbol: str
    output_symbol: str

    def __str__(self) -> str:
        return f"{self.input_symbol}{PAIR_SEPARATOR}{self.output_symbol}"


class ResolvedPair(NamedTuple):
    """Token metadata for both sides of a pair."""

    input_token: TokenMetadata
    output_token: TokenMetadata


def parse_pair(pair: str) -> TokenPairSpec:
    """Split 'A-B' into its two symbols.

    Raises:
        MalformedPairSpec: unless there are exactly two non-empty parts
    """
    parts = pair.strip().split(PAIR_SEPARATOR)
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise MalformedPairSpec(pair)
    return TokenPairSpec(parts[0].strip(), parts[1].strip())


async def resolve_pair(router: SwapRouter, pair: TokenPairSpec) -> ResolvedPair:
    """Look up both symbols concurrently.

    Raises:
        TokenMetadataNotFound: if either symbol is unknown or the lookup fails
    """
    try:
        input_token, output_token = await asyncio.gather(
            router.lookup_token(pair.input_symbol),
            router.lookup_token(pair.output_symbol),
        )
    except RouterError as e:
        logger.warning(f"{router.name} token lookup failed for {pair}: {e}")
        raise TokenMetadataNotFound() from e

    if input_token is None or output_token is None:
        missing = tuple(
            symbol
            for symbol, token in (
                (pair.input_symbol, input_token),
                (pair.output_symbol, output_token),
            )
            if token is None
        )
        logger.info(f"Token metadata not found for {pair}: missing {', '.join(missing)}")
        raise TokenMetadataNotFound(missing)

    return ResolvedPair(input_token, output_token)
