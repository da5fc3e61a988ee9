"""Error classes for market order construction.

Every error raised by this package derives from MarketFillError so callers
can catch the whole family at once.
"""


class MarketFillError(Exception):
    """Base error for market order operations."""

    pass


class InvalidArgument(MarketFillError, ValueError):
    """Caller supplied input that violates a function's contract.

    Examples: mismatched parallel arrays passed to the valuator, a negative
    target amount, a candidate whose filled amount exceeds its size.
    """

    pass


class UnknownToken(MarketFillError, LookupError):
    """Token metadata lookup missed (by address or by asset data)."""

    pass


class RelayerError(MarketFillError):
    """The relayer order-configuration request failed."""

    pass
