"""Builds Solana Action descriptors and error bodies for swap route groups.

GET failures are reported as disabled descriptors with HTTP 200; POST
failures become an ActionError body with the error's status code.
"""

import logging
from decimal import Decimal
from typing import Optional

from swapactions.config import PipelineConfig
from swapactions.swap.errors import PriceUnavailable, SwapActionError, TokenMetadataNotFound
from swapactions.swap.pair import PAIR_SEPARATOR, ResolvedPair
from swapactions.web.contracts.actions import (
    ActionError,
    ActionGetResponse,
    ActionLinks,
    ActionParameter,
    LinkedAction,
)
from swapactions.web.services.variants import PresentationVariant

logger = logging.getLogger(__name__)


def format_usd(amount: int) -> str:
    """Format whole US dollars, e.g. 1000 -> '$1,000'."""
    return f"${amount:,.0f}"


class ActionService:
    """Assembles action descriptors from resolved pairs and variant copy."""

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig()

    @staticmethod
    def _fields(pair: str, resolved: Optional[ResolvedPair] = None) -> dict:
        if resolved is not None:
            input_symbol = resolved.input_token.symbol
            output_symbol = resolved.output_token.symbol
        else:
            input_symbol, _, output_symbol = pair.partition(PAIR_SEPARATOR)
        return {
            "input": input_symbol or pair,
            "output": output_symbol or pair,
            "pair": pair,
        }

    def amount_links(
        self,
        variant: PresentationVariant,
        base_path: str,
        pair: str,
        fields: dict,
    ) -> ActionLinks:
        """One link per preset USD amount plus a custom-amount link."""
        base = f"{base_path.rstrip('/')}/{pair}"
        parameter = self.config.amount_parameter_name

        actions = []
        for index, amount in enumerate(self.config.preset_amounts_usd):
            suffix = variant.preset_suffix(index)
            label = format_usd(amount)
            if suffix:
                label = f"{label} {suffix}"
            actions.append(LinkedAction(href=f"{base}/{amount}", label=label))

        actions.append(
            LinkedAction(
                href=f"{base}/{{{parameter}}}",
                label=variant.custom_amount_label.format(**fields),
                parameters=[
                    ActionParameter(name=parameter, label=variant.custom_amount_placeholder)
                ],
            )
        )
        return ActionLinks(actions=actions)

    def describe_pair(
        self,
        variant: PresentationVariant,
        base_path: str,
        pair: str,
        resolved: ResolvedPair,
    ) -> ActionGetResponse:
        """Enabled descriptor with preset and custom amount links."""
        fields = self._fields(pair, resolved)
        return ActionGetResponse(
            icon=variant.icon,
            label=variant.label.format(**fields),
            title=variant.title.format(**fields),
            description=variant.description.format(**fields),
            links=self.amount_links(variant, base_path, pair, fields),
        )

    def describe_amount(
        self,
        variant: PresentationVariant,
        pair: str,
        resolved: ResolvedPair,
    ) -> ActionGetResponse:
        """Descriptor for a single amount; no further links."""
        fields = self._fields(pair, resolved)
        return ActionGetResponse(
            icon=variant.icon,
            label=variant.label.format(**fields),
            title=variant.detail_title.format(**fields),
            description=variant.detail_description.format(**fields),
        )

    def describe_trade(
        self,
        variant: PresentationVariant,
        pair: str,
        resolved: ResolvedPair,
        target_price: Decimal,
    ) -> ActionGetResponse:
        """Descriptor for selling the input token at the profit target."""
        fields = self._fields(pair, resolved)
        fields["target"] = f"{target_price:.2f}"
        fields["profit"] = f"{self.config.profit_percentage:g}"
        return ActionGetResponse(
            icon=variant.icon,
            label=variant.label.format(**fields),
            title=variant.title.format(**fields),
            description=variant.description.format(**fields),
        )

    def error_message(self, variant: PresentationVariant, error: SwapActionError) -> str:
        """User-facing message for an error, in the variant's voice."""
        if isinstance(error, TokenMetadataNotFound):
            return variant.not_found_message
        if isinstance(error, PriceUnavailable):
            return variant.price_unavailable_message.format(symbol=error.symbol)
        return error.message

    def unavailable(
        self,
        variant: PresentationVariant,
        pair: str,
        error: SwapActionError,
    ) -> ActionGetResponse:
        """Disabled descriptor explaining why the action cannot run."""
        fields = self._fields(pair)
        logger.info(f"Action {variant.name} unavailable for {pair}: {error.kind}")
        return ActionGetResponse(
            icon=variant.icon,
            label="Not Available",
            title=variant.unavailable_title.format(**fields),
            description=variant.unavailable_description.format(**fields),
            disabled=True,
            error=ActionError(message=self.error_message(variant, error)),
        )

    def error_response(
        self,
        variant: PresentationVariant,
        error: SwapActionError,
    ) -> tuple[int, ActionError]:
        """Status code and body for a failed POST."""
        return error.status_code, ActionError(message=self.error_message(variant, error))
