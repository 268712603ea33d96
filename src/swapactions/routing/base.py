"""Abstract routing interface for token lookup, pricing and swap construction."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenMetadata:
    """Token metadata resolved from a token list."""

    address: str  # mint address on Solana
    symbol: str
    decimals: int


@dataclass(frozen=True)
class TokenPrice:
    """USD price of a token at lookup time."""

    address: str
    price: Decimal


@dataclass(frozen=True)
class SlippagePolicy:
    """Slippage settings passed to the router.

    With auto=True the router picks slippage itself, capped at max_bps.
    """

    auto: bool = True
    max_bps: int = 500

    def to_params(self) -> dict:
        if self.auto:
            return {"autoSlippage": "true", "maxAutoSlippageBps": str(self.max_bps)}
        return {"slippageBps": str(self.max_bps)}


@dataclass(frozen=True)
class FeePolicy:
    """Prioritization fee settings for transaction construction."""

    prioritization_fee: Any = "auto"  # "auto" or lamports as int


@dataclass
class SwapTransaction:
    """Unsigned swap transaction returned by the router."""

    transaction: str  # base64-encoded, unsigned
    last_valid_block_height: Optional[int] = None


class RouterError(Exception):
    """Raised when the routing service fails or rejects a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class SwapRouter(ABC):
    """Abstract base class for swap routing services."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Router name identifier."""
        pass

    @abstractmethod
    async def lookup_token(self, symbol: str) -> Optional[TokenMetadata]:
        """
        Resolve a token symbol.

        Args:
            symbol: Token symbol (e.g., "USDC")

        Returns:
            TokenMetadata if the symbol is known, None otherwise
        """
        pass

    @abstractmethod
    async def get_usd_prices(self, addresses: Iterable[str]) -> dict[str, TokenPrice]:
        """
        Get USD prices for a batch of token addresses.

        Addresses without a price are left out of the result.
        """
        pass

    @abstractmethod
    async def get_swap_quote(
        self,
        input_address: str,
        output_address: str,
        amount: int,
        slippage: SlippagePolicy,
    ) -> dict:
        """
        Get a swap quote for an amount in smallest units.

        Returns:
            The router's quote payload, passed through untouched

        Raises:
            RouterError: if no route is available or the request fails
        """
        pass

    @abstractmethod
    async def build_swap_transaction(
        self,
        quote: dict,
        payer: str,
        fee: FeePolicy,
    ) -> SwapTransaction:
        """
        Build an unsigned transaction for a quote, paid by payer.

        Raises:
            RouterError: if the transaction cannot be built
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None
