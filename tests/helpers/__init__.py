"""Test helpers module for shared test utilities.

- constants: Token and participant addresses
- factories: Order, candidate and token registry factories
"""

from tests.helpers.constants import (
    BASE,
    DAI,
    EXCHANGE,
    FEE_RECIPIENT,
    KITTIES,
    MAKER,
    QUOTE,
    TENTHS,
    USDC,
    WETH,
    WHOLE_BASE,
    WHOLE_QUOTE,
)
from tests.helpers.factories import make_candidate, make_signed_order, make_tokens

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "BASE",
    "QUOTE",
    "WHOLE_BASE",
    "WHOLE_QUOTE",
    "TENTHS",
    "KITTIES",
    "EXCHANGE",
    "MAKER",
    "FEE_RECIPIENT",
    # Factories
    "make_tokens",
    "make_signed_order",
    "make_candidate",
]
