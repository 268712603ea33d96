"""Pytest configuration and fixtures."""

import os
from decimal import Decimal
from typing import Iterable, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DRY_RUN"] = "true"
os.environ["DEBUG"] = "true"

from swapactions.api.app import create_app
from swapactions.config import PipelineConfig, Settings
from swapactions.routing.base import (
    FeePolicy,
    SlippagePolicy,
    SwapRouter,
    SwapTransaction,
    TokenMetadata,
    TokenPrice,
)
from swapactions.swap.pipeline import SwapPipeline
from swapactions.swap.selection import FixedChoice

USDC = TokenMetadata("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", "USDC", 6)
SOL = TokenMetadata("So11111111111111111111111111111111111111112", "SOL", 9)
WIF = TokenMetadata("EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm", "WIF", 6)
BONK = TokenMetadata("DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263", "Bonk", 5)

PAYER = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
TRANSACTION = "AQAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA=="


class FakeRouter(SwapRouter):
    """In-memory router that records every call."""

    def __init__(
        self,
        tokens: Optional[dict[str, TokenMetadata]] = None,
        prices: Optional[dict[str, Decimal]] = None,
        transaction: str = TRANSACTION,
    ):
        self.tokens = tokens if tokens is not None else {
            t.symbol.upper(): t for t in (USDC, SOL, WIF, BONK)
        }
        self.prices = prices if prices is not None else {
            USDC.address: Decimal("1.0"),
            SOL.address: Decimal("150"),
            WIF.address: Decimal("2.5"),
            BONK.address: Decimal("0.00002"),
        }
        self.transaction = transaction
        self.lookup_error: Optional[Exception] = None
        self.price_error: Optional[Exception] = None
        self.quote_error: Optional[Exception] = None
        self.build_error: Optional[Exception] = None
        self.calls: list[tuple] = []
        self.closed = False

    @property
    def name(self) -> str:
        return "fake"

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    async def lookup_token(self, symbol: str) -> Optional[TokenMetadata]:
        self.calls.append(("lookup_token", symbol))
        if self.lookup_error:
            raise self.lookup_error
        return self.tokens.get(symbol.upper())

    async def get_usd_prices(self, addresses: Iterable[str]) -> dict[str, TokenPrice]:
        addresses = list(addresses)
        self.calls.append(("get_usd_prices", addresses))
        if self.price_error:
            raise self.price_error
        return {
            a: TokenPrice(address=a, price=self.prices[a]) for a in addresses if a in self.prices
        }

    async def get_swap_quote(
        self,
        input_address: str,
        output_address: str,
        amount: int,
        slippage: SlippagePolicy,
    ) -> dict:
        self.calls.append(("get_swap_quote", input_address, output_address, amount, slippage))
        if self.quote_error:
            raise self.quote_error
        return {"inputMint": input_address, "outputMint": output_address, "inAmount": str(amount)}

    async def build_swap_transaction(
        self,
        quote: dict,
        payer: str,
        fee: FeePolicy,
    ) -> SwapTransaction:
        self.calls.append(("build_swap_transaction", quote, payer, fee))
        if self.build_error:
            raise self.build_error
        return SwapTransaction(transaction=self.transaction)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_router() -> FakeRouter:
    """Router with USDC, SOL, WIF and BONK resolvable and priced."""
    return FakeRouter()


@pytest.fixture
def pipeline(fake_router: FakeRouter) -> SwapPipeline:
    """Pipeline over the fake router with default configuration."""
    return SwapPipeline(fake_router, PipelineConfig())


@pytest.fixture
def settings() -> Settings:
    """Settings for the test app."""
    return Settings(environment="test", dry_run=True, debug=True)


@pytest.fixture
def test_app(settings: Settings, fake_router: FakeRouter):
    """Application wired to the fake router, random swaps always pick WIF."""
    return create_app(settings=settings, router=fake_router, selection=FixedChoice("WIF"))


@pytest_asyncio.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
