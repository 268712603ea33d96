"""Errors raised by the swap action pipeline.

Every stage failure is a SwapActionError. The HTTP layer turns them into
an ActionError body (POST) or a disabled descriptor (GET).
"""

from typing import Optional


class SwapActionError(Exception):
    """Base exception for swap pipeline failures."""

    kind = "swap_error"
    status_code = 422
    default_message = "Swap failed."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedPairSpec(SwapActionError):
    """Token pair is not of the form SYMBOL_A-SYMBOL_B."""

    kind = "malformed_pair"
    status_code = 400

    def __init__(self, pair: str):
        self.pair = pair
        super().__init__(
            f"Invalid token pair '{pair}'. Expected the form INPUT-OUTPUT, e.g. USDC-SOL."
        )


class InvalidAmount(SwapActionError):
    """USD amount is not a non-negative number."""

    kind = "invalid_amount"
    status_code = 400

    def __init__(self, amount: object):
        self.amount = amount
        super().__init__(f"Invalid amount '{amount}'. Enter a non-negative USD amount.")


class MissingAccount(SwapActionError):
    """POST body has no account public key."""

    kind = "missing_account"
    status_code = 400
    default_message = "Missing 'account' in request body."


class TokenMetadataNotFound(SwapActionError):
    """One or both symbols of the pair could not be resolved."""

    kind = "token_not_found"
    default_message = "Token metadata not found."

    def __init__(self, symbols: tuple[str, ...] = (), message: Optional[str] = None):
        self.symbols = symbols
        super().__init__(message)


class PriceUnavailable(SwapActionError):
    """No USD price was returned for the input token."""

    kind = "price_unavailable"

    def __init__(self, symbol: str, message: Optional[str] = None):
        self.symbol = symbol
        super().__init__(message or f"Failed to get price for {symbol}.")


class QuoteFailure(SwapActionError):
    """The router returned no usable quote."""

    kind = "quote_failed"
    default_message = "No swap route available."


class TransactionBuildFailure(SwapActionError):
    """The router failed to build the swap transaction."""

    kind = "build_failed"
    default_message = "Failed to build swap transaction."
