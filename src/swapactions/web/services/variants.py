"""Presentation variants for swap action route groups.

Route groups share one pipeline and differ only in the copy and icon
defined here. Templates are str.format strings; available fields are
listed on PresentationVariant.
"""

from dataclasses import dataclass

JUPITER_LOGO = (
    "https://ucarecdn.com/09c80208-f27c-45dd-b716-75e1e55832c4/-/preview/1000x981/"
    "-/quality/smart/-/format/auto/"
)
MADLADS_LOGO = "https://madlads.s3.us-west-2.amazonaws.com/images/1405.png"


@dataclass(frozen=True)
class PresentationVariant:
    """Copy and branding for one route group.

    Template fields:
        input, output: resolved token symbols (raw symbols when unresolved)
        pair: the pair string as requested
        symbol: token whose price is missing (price_unavailable_message)
        target, profit: trade target price and profit percentage
    """

    name: str
    icon: str
    label: str = "Buy {output}"
    title: str = "Buy {output}"
    description: str = (
        "Buy {output} with {input}. Choose a USD amount of {input} from the options "
        "below, or enter a custom amount."
    )
    detail_title: str = "Buy {output} with {input}"
    detail_description: str = "Buy {output} with {input}."
    custom_amount_label: str = "Buy {output}"
    custom_amount_placeholder: str = "Enter a custom USD amount"
    preset_suffixes: tuple[str, ...] = ()
    unavailable_title: str = "Buy {output}"
    unavailable_description: str = "Buy {output} with {input}."
    not_found_message: str = "Token metadata not found."
    price_unavailable_message: str = "Failed to get price for {symbol}."

    def preset_suffix(self, index: int) -> str:
        if index < len(self.preset_suffixes):
            return self.preset_suffixes[index]
        return ""


BUY_VARIANT = PresentationVariant(name="buy", icon=MADLADS_LOGO)

MEME_VARIANT = PresentationVariant(
    name="meme",
    icon=MADLADS_LOGO,
    label="Ape into {output}",
    title="Ape into {output}",
    description=(
        "Ape into {output} with your {input} stash. Pick a YOLO amount of {input} from "
        "the options below, or go full degen with a custom amount."
    ),
    detail_title="Ape into {output} with {input}",
    detail_description=(
        "Ape into {output} with {input}. Warning: This Action is as unregistered as your "
        "crypto gains. Only use it if you trust the source more than your ex. This Action "
        "won't go viral on X until it's officially a thing."
    ),
    custom_amount_label="Ape into {output} like there's no tomorrow",
    custom_amount_placeholder="Enter a custom YOLO amount",
    preset_suffixes=(
        "(AKA one ramen packet)",
        '(Your entire "food" budget)',
        "(Rent? What rent?)",
    ),
    unavailable_title="Ape into {output}",
    unavailable_description="Ape into {output} with {input}.",
    not_found_message="Token metadata ghosted us. Much sadness.",
    price_unavailable_message="Failed to get price for {symbol}. The oracle must be on vacation.",
)

RANDOM_VARIANT = PresentationVariant(
    name="random",
    icon=MADLADS_LOGO,
    label="Swap {input} for {output}",
    title="Random Swap: {input} to {output}",
    description=(
        "Randomly selected to swap {input} for {output}. Choose a USD amount or enter "
        "a custom amount."
    ),
    custom_amount_label="Swap {input}",
    unavailable_title="Random Swap",
    unavailable_description="Swap randomly selected token with {output}.",
)

TRADE_VARIANT = PresentationVariant(
    name="trade",
    icon=JUPITER_LOGO,
    label="Sell {input} at {target} {output}",
    title="Trade {pair}",
    description=(
        "Place a sell order for {input} when the price reaches {target} {output} "
        "({profit}% profit)."
    ),
    unavailable_title="Trade {pair}",
    unavailable_description="Unable to trade {pair}.",
)

VARIANTS: dict[str, PresentationVariant] = {
    variant.name: variant
    for variant in (BUY_VARIANT, MEME_VARIANT, RANDOM_VARIANT, TRADE_VARIANT)
}


def get_variant(name: str) -> PresentationVariant:
    """Look up a variant by name."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(f"Unknown presentation variant: {name}. Known: {', '.join(VARIANTS)}")
