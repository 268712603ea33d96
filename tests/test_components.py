"""Tests for configuration, selection policies and descriptor assembly."""

import random
from decimal import Decimal

import pytest
from pydantic import ValidationError

from conftest import SOL, USDC
from swapactions.config import PipelineConfig, Settings
from swapactions.swap import (
    FixedChoice,
    InvalidAmount,
    PriceUnavailable,
    RandomChoice,
    ResolvedPair,
    SelectionPolicy,
    TokenMetadataNotFound,
)
from swapactions.web.services import (
    BUY_VARIANT,
    MEME_VARIANT,
    TRADE_VARIANT,
    ActionService,
    format_usd,
    get_variant,
)


class TestSettings:
    """Tests for settings parsing."""

    def test_defaults(self):
        """Test default pipeline configuration."""
        config = Settings().pipeline_config()

        assert config == PipelineConfig()
        assert config.preset_amounts_usd == (10, 100, 1000)
        assert config.max_auto_slippage_bps == 500

    def test_parse_lists(self):
        """Test comma-separated settings are parsed."""
        settings = Settings(preset_amounts_usd=" 5, 50 ,", random_swap_tokens="jup, bonk")

        assert settings.preset_amounts == (5, 50)
        assert settings.random_tokens == ("JUP", "BONK")

    def test_from_env(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("MAX_AUTO_SLIPPAGE_BPS", "300")
        monkeypatch.setenv("PROFIT_PERCENTAGE", "7.5")

        config = Settings().pipeline_config()

        assert config.max_auto_slippage_bps == 300
        assert config.profit_percentage == Decimal("7.5")

    def test_rejects_bad_slippage(self):
        """Test the slippage cap must be within 0-10000 bps."""
        with pytest.raises(ValidationError):
            Settings(max_auto_slippage_bps=20000)

    def test_safe_dict_redacts_key(self):
        """Test the API key is never exposed."""
        safe = Settings(jupiter_api_key="secret").get_safe_dict()

        assert safe["jupiter"]["api_key"] == "***"
        assert "secret" not in str(safe)

    def test_is_production(self):
        assert Settings(environment="Production").is_production
        assert not Settings(environment="test").is_production


class TestSelection:
    """Tests for random swap token selection."""

    def test_fixed_by_value(self):
        assert FixedChoice("BONK").choose(("WIF", "BONK")) == "BONK"

    def test_fixed_by_index(self):
        assert FixedChoice(index=1).choose(("WIF", "BONK")) == "BONK"

    def test_fixed_unknown_value(self):
        with pytest.raises(ValueError):
            FixedChoice("SOL").choose(("WIF", "BONK"))

    def test_random_choice_is_member(self):
        """Test seeded picks are reproducible and always a candidate."""
        first = [RandomChoice(random.Random(7)).choose(("WIF", "BONK")) for _ in range(5)]
        second = [RandomChoice(random.Random(7)).choose(("WIF", "BONK")) for _ in range(5)]

        assert first == second
        assert set(first) <= {"WIF", "BONK"}

    def test_random_choice_covers_candidates(self):
        policy = RandomChoice(random.Random(1))

        picks = {policy.choose(("WIF", "BONK")) for _ in range(100)}

        assert picks == {"WIF", "BONK"}

    def test_empty_candidates(self):
        with pytest.raises(ValueError):
            RandomChoice().choose(())

    def test_policy_is_abstract(self):
        """Test the base policy cannot be used without choose()."""
        with pytest.raises(TypeError):
            SelectionPolicy()


class TestVariants:
    """Tests for presentation variants."""

    def test_get_variant(self):
        assert get_variant("meme") is MEME_VARIANT
        assert get_variant("buy") is BUY_VARIANT

    def test_unknown_variant(self):
        with pytest.raises(ValueError, match="Unknown presentation variant"):
            get_variant("nope")

    def test_preset_suffix(self):
        """Test suffixes past the configured list are empty."""
        assert MEME_VARIANT.preset_suffix(1) == '(Your entire "food" budget)'
        assert MEME_VARIANT.preset_suffix(3) == ""
        assert BUY_VARIANT.preset_suffix(0) == ""


class TestActionService:
    """Tests for descriptor assembly."""

    @pytest.fixture
    def service(self) -> ActionService:
        return ActionService(PipelineConfig())

    @pytest.fixture
    def resolved(self) -> ResolvedPair:
        return ResolvedPair(USDC, SOL)

    @pytest.mark.parametrize(
        "amount,expected", [(10, "$10"), (100, "$100"), (1000, "$1,000"), (25000, "$25,000")]
    )
    def test_format_usd(self, amount, expected):
        assert format_usd(amount) == expected

    def test_amount_links(self, service, resolved):
        """Test one link per preset plus one custom link, in order."""
        descriptor = service.describe_pair(BUY_VARIANT, "/api/x/", "USDC-SOL", resolved)

        actions = descriptor.links.actions
        assert len(actions) == 4
        assert [a.href for a in actions] == [
            "/api/x/USDC-SOL/10",
            "/api/x/USDC-SOL/100",
            "/api/x/USDC-SOL/1000",
            "/api/x/USDC-SOL/{amount}",
        ]
        assert actions[3].parameters[0].name == "amount"
        assert all(a.parameters is None for a in actions[:3])

    def test_custom_presets(self, resolved):
        """Test preset amounts come from configuration."""
        service = ActionService(PipelineConfig(preset_amounts_usd=(5, 50)))

        descriptor = service.describe_pair(BUY_VARIANT, "/api/x", "USDC-SOL", resolved)

        assert [a.label for a in descriptor.links.actions[:2]] == ["$5", "$50"]
        assert len(descriptor.links.actions) == 3

    def test_uses_resolved_symbols(self, service):
        """Test copy shows the canonical symbols rather than the request casing."""
        descriptor = service.describe_pair(
            BUY_VARIANT, "/api/x", "usdc-sol", ResolvedPair(USDC, SOL)
        )

        assert descriptor.label == "Buy SOL"
        assert descriptor.links.actions[0].href == "/api/x/usdc-sol/10"

    def test_describe_trade(self, service, resolved):
        descriptor = service.describe_trade(
            TRADE_VARIANT, "USDC-SOL", resolved, Decimal("157.5")
        )

        assert descriptor.label == "Sell USDC at 157.50 SOL"
        assert "(5% profit)" in descriptor.description
        assert descriptor.links is None

    def test_unavailable(self, service):
        """Test disabled descriptors carry the error and no links."""
        error = TokenMetadataNotFound(("NOPE",))

        descriptor = service.unavailable(MEME_VARIANT, "USDC-NOPE", error)

        assert descriptor.disabled is True
        assert descriptor.label == "Not Available"
        assert descriptor.title == "Ape into NOPE"
        assert descriptor.error.message == "Token metadata ghosted us. Much sadness."
        assert descriptor.links is None

    def test_error_response(self, service):
        """Test POST errors keep the error's status code."""
        status, body = service.error_response(BUY_VARIANT, PriceUnavailable("WIF"))
        assert (status, body.message) == (422, "Failed to get price for WIF.")

        status, body = service.error_response(BUY_VARIANT, InvalidAmount("x"))
        assert status == 400
        assert "'x'" in body.message
