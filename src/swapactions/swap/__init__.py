"""Swap action pipeline: pair resolution, amount conversion, quote, transaction."""

from swapactions.swap.amount import (
    convert_usd_amount,
    fetch_usd_price,
    parse_usd_amount,
    to_smallest_unit,
)
from swapactions.swap.errors import (
    InvalidAmount,
    MalformedPairSpec,
    MissingAccount,
    PriceUnavailable,
    QuoteFailure,
    SwapActionError,
    TokenMetadataNotFound,
    TransactionBuildFailure,
)
from swapactions.swap.pair import ResolvedPair, TokenPairSpec, parse_pair, resolve_pair
from swapactions.swap.pipeline import SwapPipeline, SwapResult
from swapactions.swap.selection import FixedChoice, RandomChoice, SelectionPolicy

__all__ = [
    # Pipeline
    "SwapPipeline",
    "SwapResult",
    # Selection
    "SelectionPolicy",
    "RandomChoice",
    "FixedChoice",
    # Stages
    "TokenPairSpec",
    "ResolvedPair",
    "parse_pair",
    "resolve_pair",
    "parse_usd_amount",
    "to_smallest_unit",
    "fetch_usd_price",
    "convert_usd_amount",
    # Errors
    "SwapActionError",
    "MalformedPairSpec",
    "InvalidAmount",
    "MissingAccount",
    "TokenMetadataNotFound",
    "PriceUnavailable",
    "QuoteFailure",
    "TransactionBuildFailure",
]
