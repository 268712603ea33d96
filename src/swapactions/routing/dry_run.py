"""Dry-run router for simulated swaps.

Serves a fixed Solana token table with simulated USD prices so the
actions can be exercised without reaching Jupiter. Transactions it
returns are placeholders and cannot be submitted on-chain.
"""

import base64
import hashlib
import json
from decimal import Decimal
from typing import Iterable, Optional

from swapactions.routing.base import (
    FeePolicy,
    RouterError,
    SlippagePolicy,
    SwapRouter,
    SwapTransaction,
    TokenMetadata,
    TokenPrice,
)

# Token mint addresses and decimals on Solana mainnet
SIMULATED_TOKENS: dict[str, TokenMetadata] = {
    "SOL": TokenMetadata("So11111111111111111111111111111111111111112", "SOL", 9),
    "USDC": TokenMetadata("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", "USDC", 6),
    "USDT": TokenMetadata("Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB", "USDT", 6),
    "JUP": TokenMetadata("JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN", "JUP", 6),
    "BONK": TokenMetadata("DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263", "Bonk", 5),
    "WIF": TokenMetadata("EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm", "WIF", 6),
    "RAY": TokenMetadata("4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R", "RAY", 6),
    "ORCA": TokenMetadata("orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE", "ORCA", 6),
    "PYTH": TokenMetadata("HZ1JovNiVvGrGNiiYvEozEVgZ58xaU3RKwX8eACQBCt3", "PYTH", 6),
}

# Simulated market prices in USD, keyed by symbol
# These are for demonstration purposes only and should not be used for real trading
SIMULATED_PRICES: dict[str, Decimal] = {
    "SOL": Decimal("225.00"),
    "USDC": Decimal("1.00"),
    "USDT": Decimal("1.00"),
    "JUP": Decimal("1.15"),
    "BONK": Decimal("0.000035"),
    "WIF": Decimal("3.20"),
    "RAY": Decimal("5.10"),
    "ORCA": Decimal("4.30"),
    "PYTH": Decimal("0.48"),
}


class DryRunRouter(SwapRouter):
    """Simulated router for local development and tests.

    Quotes convert at the simulated prices less a flat fee; nothing
    leaves the process.
    """

    def __init__(self, fee_bps: int = 0):
        self.fee_bps = fee_bps
        self._tokens = dict(SIMULATED_TOKENS)
        self._prices: dict[str, Decimal] = {
            self._tokens[symbol].address: price for symbol, price in SIMULATED_PRICES.items()
        }

    @property
    def name(self) -> str:
        return "dry_run"

    def add_token(self, token: TokenMetadata, price: Optional[Decimal] = None) -> None:
        """Register a simulated token, optionally with a price."""
        self._tokens[token.symbol.upper()] = token
        if price is not None:
            self._prices[token.address] = price

    def set_price(self, address: str, price: Optional[Decimal]) -> None:
        """Set or clear the simulated price for an address."""
        if price is None:
            self._prices.pop(address, None)
        else:
            self._prices[address] = price

    async def lookup_token(self, symbol: str) -> Optional[TokenMetadata]:
        return self._tokens.get(symbol.upper())

    async def get_usd_prices(self, addresses: Iterable[str]) -> dict[str, TokenPrice]:
        return {
            address: TokenPrice(address=address, price=self._prices[address])
            for address in addresses
            if address in self._prices
        }

    def _token_by_address(self, address: str) -> Optional[TokenMetadata]:
        for token in self._tokens.values():
            if token.address == address:
                return token
        return None

    async def get_swap_quote(
        self,
        input_address: str,
        output_address: str,
        amount: int,
        slippage: SlippagePolicy,
    ) -> dict:
        """Generate a simulated quote shaped like a Jupiter quote response."""
        input_token = self._token_by_address(input_address)
        output_token = self._token_by_address(output_address)
        input_price = self._prices.get(input_address)
        output_price = self._prices.get(output_address)

        if not input_token or not output_token or not input_price or not output_price:
            raise RouterError(f"No route found for {input_address} -> {output_address}")

        if amount <= 0:
            raise RouterError("Amount must be positive")

        usd_value = Decimal(amount) / Decimal(10**input_token.decimals) * input_price
        fee_factor = 1 - Decimal(self.fee_bps) / Decimal(10000)
        out_amount = int(
            usd_value / output_price * fee_factor * Decimal(10**output_token.decimals)
        )

        return {
            "inputMint": input_address,
            "outputMint": output_address,
            "inAmount": str(amount),
            "outAmount": str(out_amount),
            "slippageBps": slippage.max_bps,
            "priceImpactPct": "0",
            "routePlan": [
                {"swapInfo": {"label": "simulated", "ammKey": "dry_run"}, "percent": 100}
            ],
            "simulated": True,
        }

    async def build_swap_transaction(
        self,
        quote: dict,
        payer: str,
        fee: FeePolicy,
    ) -> SwapTransaction:
        """Return a placeholder transaction payload bound to the payer."""
        body = json.dumps(
            {
                "payer": payer,
                "inputMint": quote.get("inputMint"),
                "outputMint": quote.get("outputMint"),
                "inAmount": quote.get("inAmount"),
                "prioritizationFeeLamports": fee.prioritization_fee,
                "simulated": True,
            },
            sort_keys=True,
        ).encode()
        digest = hashlib.sha256(body).hexdigest()

        return SwapTransaction(
            transaction=base64.b64encode(body).decode(),
            last_valid_block_height=int(digest[:8], 16),
        )
