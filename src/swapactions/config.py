"""Application configuration using pydantic-settings.

Pipeline constants (preset amounts, slippage cap, profit target) live here
and are handed to the swap pipeline as a PipelineConfig.
"""

from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class PipelineConfig:
    """Values injected into the swap pipeline and descriptor assembler."""

    preset_amounts_usd: tuple[int, ...] = (10, 100, 1000)
    default_amount_usd: Decimal = Decimal("10")
    max_auto_slippage_bps: int = 500
    profit_percentage: Decimal = Decimal("5")
    random_candidates: tuple[str, ...] = ("WIF", "BONK")
    random_output_symbol: str = "SOL"
    amount_parameter_name: str = "amount"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")
    dry_run: bool = Field(
        default=True, description="Use the simulated router instead of Jupiter"
    )

    # ======================
    # Jupiter
    # ======================
    jupiter_api_key: Optional[str] = Field(default=None, description="Jupiter API key")
    jupiter_quote_api_url: str = Field(
        default="https://quote-api.jup.ag/v6", description="Jupiter quote/swap API"
    )
    jupiter_price_api_url: str = Field(
        default="https://api.jup.ag/price/v2", description="Jupiter price API"
    )
    jupiter_token_api_url: str = Field(
        default="https://tokens.jup.ag", description="Jupiter token list API"
    )
    http_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Timeout for calls to Jupiter"
    )

    # ======================
    # Swap pipeline
    # ======================
    preset_amounts_usd: str = Field(
        default="10,100,1000", description="Comma-separated preset USD amounts"
    )
    default_amount_usd: Decimal = Field(
        default=Decimal("10"), ge=0, description="USD amount when none is given"
    )
    max_auto_slippage_bps: int = Field(
        default=500, ge=0, le=10000, description="Auto slippage cap (500 = 5%)"
    )
    profit_percentage: Decimal = Field(
        default=Decimal("5"), description="Profit target for trade actions"
    )
    random_swap_tokens: str = Field(
        default="WIF,BONK", description="Comma-separated candidates for random swaps"
    )
    random_swap_output: str = Field(default="SOL", description="Output token for random swaps")

    # ======================
    # Presentation
    # ======================
    jupiter_swap_variant: str = Field(
        default="meme", description="Copy variant for /api/jupiter/swap"
    )
    trader_swap_variant: str = Field(
        default="buy", description="Copy variant for /api/trader/swap"
    )

    @property
    def preset_amounts(self) -> tuple[int, ...]:
        """Parse preset amounts into a tuple of integers."""
        return tuple(
            int(amount.strip()) for amount in self.preset_amounts_usd.split(",") if amount.strip()
        )

    @property
    def random_tokens(self) -> tuple[str, ...]:
        """Parse random swap candidates."""
        return tuple(
            symbol.strip().upper()
            for symbol in self.random_swap_tokens.split(",")
            if symbol.strip()
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def pipeline_config(self) -> PipelineConfig:
        """Build the pipeline configuration from settings."""
        return PipelineConfig(
            preset_amounts_usd=self.preset_amounts,
            default_amount_usd=self.default_amount_usd,
            max_auto_slippage_bps=self.max_auto_slippage_bps,
            profit_percentage=self.profit_percentage,
            random_candidates=self.random_tokens,
            random_output_symbol=self.random_swap_output.upper(),
        )

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "dry_run": self.dry_run,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "jupiter": {
                "quote_api": self.jupiter_quote_api_url,
                "price_api": self.jupiter_price_api_url,
                "token_api": self.jupiter_token_api_url,
                "api_key": "***" if self.jupiter_api_key else "(not set)",
                "timeout": self.http_timeout_seconds,
            },
            "pipeline": {
                "preset_amounts_usd": list(self.preset_amounts),
                "default_amount_usd": str(self.default_amount_usd),
                "max_auto_slippage_bps": self.max_auto_slippage_bps,
                "profit_percentage": str(self.profit_percentage),
                "random_swap_tokens": list(self.random_tokens),
            },
            "variants": {
                "jupiter_swap": self.jupiter_swap_variant,
                "trader_swap": self.trader_swap_variant,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
