"""USD to token smallest-unit conversion."""

import logging
from decimal import ROUND_CEILING, Decimal, InvalidOperation, Overflow, localcontext
from typing import Optional, Union

from swapactions.routing.base import RouterError, SwapRouter, TokenMetadata
from swapactions.swap.errors import InvalidAmount, PriceUnavailable

logger = logging.getLogger(__name__)

# Working precision for the division; well beyond any token's decimals
CONVERSION_PRECISION = 60

# Largest USD amount accepted from a request
MAX_USD_AMOUNT = Decimal("1000000000")


def parse_usd_amount(raw: Optional[Union[str, int, Decimal]], default: Decimal) -> Decimal:
    """Parse a USD amount from a path segment, falling back to default.

    Raises:
        InvalidAmount: if the value is not a finite number between 0 and MAX_USD_AMOUNT
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default

    try:
        amount = Decimal(str(raw).strip())
    except InvalidOperation:
        raise InvalidAmount(raw)

    if not amount.is_finite() or amount < 0 or amount > MAX_USD_AMOUNT:
        raise InvalidAmount(raw)

    return amount


def to_smallest_unit(usd_amount: Decimal, price: Decimal, decimals: int) -> int:
    """Convert a USD amount to token smallest units at the given price.

    Always rounds up so the paying side covers at least usd_amount.
    """
    if price <= 0:
        raise ValueError(f"Price must be positive, got {price}")
    if decimals < 0:
        raise ValueError(f"Decimals must be non-negative, got {decimals}")

    with localcontext() as ctx:
        ctx.prec = CONVERSION_PRECISION
        scaled = usd_amount / price * (Decimal(10) ** decimals)
        return int(scaled.to_integral_value(rounding=ROUND_CEILING))


async def fetch_usd_price(router: SwapRouter, token: TokenMetadata) -> Decimal:
    """Fetch the token's current USD price.

    Raises:
        PriceUnavailable: if the price lookup fails or has no positive price for the token
    """
    try:
        prices = await router.get_usd_prices([token.address])
    except RouterError as e:
        logger.warning(f"{router.name} price lookup failed for {token.symbol}: {e}")
        raise PriceUnavailable(token.symbol) from e

    token_price = prices.get(token.address)

    if token_price is None or token_price.price <= 0:
        logger.warning(f"No USD price for {token.symbol} ({token.address})")
        raise PriceUnavailable(token.symbol)

    return token_price.price


async def convert_usd_amount(
    router: SwapRouter,
    usd_amount: Decimal,
    token: TokenMetadata,
) -> int:
    """Convert a USD amount to the token's smallest unit at the live price.

    Raises:
        PriceUnavailable: if no price is available for the token
        InvalidAmount: if the converted amount is out of range
    """
    price = await fetch_usd_price(router, token)

    try:
        with localcontext() as ctx:
            ctx.prec = CONVERSION_PRECISION
            token_amount = usd_amount / price
        amount = to_smallest_unit(usd_amount, price, token.decimals)
    except Overflow as e:
        raise InvalidAmount(usd_amount) from e

    logger.info(
        f"Converted {token.symbol} amount\n"
        f"  usd amount: {usd_amount}\n"
        f"  token usd price: {price}\n"
        f"  token amount: {token_amount}\n"
        f"  token amount fractional: {amount}"
    )
    return amount
