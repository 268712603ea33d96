"""Jupiter DEX aggregator integration for Solana.

Uses the Jupiter token, price and swap APIs.
API docs: https://station.jup.ag/docs/apis/swap-api
"""

import asyncio
import logging
import time
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional

import httpx

from swapactions.routing.base import (
    FeePolicy,
    RouterError,
    SlippagePolicy,
    SwapRouter,
    SwapTransaction,
    TokenMetadata,
    TokenPrice,
)

logger = logging.getLogger(__name__)

# Jupiter API endpoints
JUPITER_QUOTE_API = "https://quote-api.jup.ag/v6"
JUPITER_PRICE_API = "https://api.jup.ag/price/v2"
JUPITER_TOKEN_API = "https://tokens.jup.ag"

# Token list refresh interval
TOKEN_LIST_TTL_SECONDS = 300


class JupiterRouter(SwapRouter):
    """Jupiter aggregator client.

    Jupiter aggregates liquidity from Raydium, Orca, Meteora and other
    Solana DEXes. Transactions come back unsigned; the wallet signs them.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        quote_api_url: str = JUPITER_QUOTE_API,
        price_api_url: str = JUPITER_PRICE_API,
        token_api_url: str = JUPITER_TOKEN_API,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Jupiter router.

        Args:
            api_key: Optional API key for higher rate limits
            timeout: Per-request timeout in seconds
            client: Pre-built HTTP client (tests inject a MockTransport here)
        """
        self.api_key = api_key
        self.quote_api_url = quote_api_url.rstrip("/")
        self.price_api_url = price_api_url.rstrip("/")
        self.token_api_url = token_api_url.rstrip("/")
        self.timeout = timeout
        self._http_client = client
        self._tokens: dict[str, TokenMetadata] = {}
        self._tokens_loaded_at: float = 0.0
        self._tokens_lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return "Jupiter"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    def _get_headers(self) -> dict:
        """Get API headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """Send a request and return the decoded JSON body."""
        client = await self._get_client()
        try:
            response = await client.request(method, url, headers=self._get_headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Jupiter request failed: {method} {url}: {type(e).__name__}: {e}")
            raise RouterError(f"Jupiter request failed: {e}") from e

        if response.status_code != 200:
            logger.warning(f"Jupiter API error: {response.status_code} - {response.text}")
            raise RouterError(
                f"Jupiter API error: {response.status_code}",
                status_code=response.status_code,
            )

        return response.json()

    def _tokens_fresh(self) -> bool:
        return bool(self._tokens) and (
            time.monotonic() - self._tokens_loaded_at < TOKEN_LIST_TTL_SECONDS
        )

    async def _load_tokens(self) -> dict[str, TokenMetadata]:
        """Fetch the verified token list, refreshing it after the TTL."""
        if self._tokens_fresh():
            return self._tokens

        async with self._tokens_lock:
            # Double-check after acquiring lock
            if self._tokens_fresh():
                return self._tokens

            data = await self._request(
                "GET", f"{self.token_api_url}/tokens", params={"tags": "verified"}
            )

            tokens: dict[str, TokenMetadata] = {}
            for entry in data:
                symbol = (entry.get("symbol") or "").upper()
                # First listing wins; the list is ordered by relevance.
                if not symbol or symbol in tokens:
                    continue
                tokens[symbol] = TokenMetadata(
                    address=entry["address"],
                    symbol=entry["symbol"],
                    decimals=int(entry["decimals"]),
                )

            logger.info(f"Loaded {len(tokens)} tokens from Jupiter token list")
            self._tokens = tokens
            self._tokens_loaded_at = time.monotonic()
            return tokens

    async def lookup_token(self, symbol: str) -> Optional[TokenMetadata]:
        """Resolve a token symbol via the Jupiter verified token list."""
        tokens = await self._load_tokens()
        token = tokens.get(symbol.upper())
        if token is None:
            logger.debug(f"Token not found: {symbol}")
        return token

    async def get_usd_prices(self, addresses: Iterable[str]) -> dict[str, TokenPrice]:
        """Get USD prices from the Jupiter price API."""
        ids = sorted(set(addresses))
        if not ids:
            return {}

        data = await self._request("GET", self.price_api_url, params={"ids": ",".join(ids)})

        prices: dict[str, TokenPrice] = {}
        for address, entry in (data.get("data") or {}).items():
            if not entry or entry.get("price") is None:
                continue
            try:
                price = Decimal(str(entry["price"]))
            except InvalidOperation:
                logger.warning(f"Unparseable Jupiter price for {address}: {entry['price']!r}")
                continue
            prices[address] = TokenPrice(address=address, price=price)

        return prices

    async def get_swap_quote(
        self,
        input_address: str,
        output_address: str,
        amount: int,
        slippage: SlippagePolicy,
    ) -> dict:
        """Get swap quote from Jupiter.

        Args:
            input_address: Input token mint
            output_address: Output token mint
            amount: Input amount in smallest units
            slippage: Slippage policy (auto with a cap, or fixed bps)

        Returns:
            Raw Jupiter quote response
        """
        params = {
            "inputMint": input_address,
            "outputMint": output_address,
            "amount": str(amount),
            "onlyDirectRoutes": "false",
        }
        params.update(slippage.to_params())

        quote = await self._request("GET", f"{self.quote_api_url}/quote", params=params)

        if "error" in quote:
            raise RouterError(f"Jupiter quote error: {quote['error']}")

        route_plan = quote.get("routePlan", [])
        dex_path = [step.get("swapInfo", {}).get("label", "Unknown") for step in route_plan]
        logger.debug(
            f"Jupiter quote: {amount} {input_address} -> {quote.get('outAmount')} "
            f"{output_address} via {' > '.join(dex_path) or 'direct'}"
        )
        return quote

    async def build_swap_transaction(
        self,
        quote: dict,
        payer: str,
        fee: FeePolicy,
    ) -> SwapTransaction:
        """Build an unsigned swap transaction for the user's wallet to sign."""
        data = await self._request(
            "POST",
            f"{self.quote_api_url}/swap",
            json={
                "quoteResponse": quote,
                "userPublicKey": payer,
                "wrapAndUnwrapSol": True,
                "dynamicComputeUnitLimit": True,
                "prioritizationFeeLamports": fee.prioritization_fee,
            },
        )

        transaction = data.get("swapTransaction")
        if not transaction:
            raise RouterError("Jupiter swap response has no transaction")

        return SwapTransaction(
            transaction=transaction,
            last_valid_block_height=data.get("lastValidBlockHeight"),
        )

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
