"""Conversions between raw token amounts and human decimal units.

A raw (base-unit) amount of a token with `decimals` decimals equals
`amount / 10**decimals` whole tokens. All conversions here are exact:
they only scale by powers of ten and multiply, never divide, so they run
under an unbounded-precision context that traps any inexact result.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_CEILING, Decimal

# Unbounded precision for exact scaling and multiplication. Division is
# never performed under this context.
DECIMAL_EXACT_CONTEXT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.Inexact, decimal.InvalidOperation, decimal.DivisionByZero],
)

# 78 digits of precision, enough for uint256 values (up to ~10^77). Used
# where a quotient has to be materialized; rounds up so totals are never
# under-reported.
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78, rounding=ROUND_CEILING)


def _check_decimals(decimals: int) -> None:
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")


def to_decimal_units(amount: int | Decimal, decimals: int) -> Decimal:
    """Convert a base-unit amount into whole-token decimal units.

    >>> to_decimal_units(1_500_000, 6)
    Decimal('1.500000')
    """
    _check_decimals(decimals)
    return Decimal(amount).scaleb(-decimals, context=DECIMAL_EXACT_CONTEXT)


def scale_to_base_units(amount: Decimal | int | str, decimals: int) -> Decimal:
    """Convert a whole-token decimal amount into base units, without rounding.

    The result may carry a fractional part when `amount` has more decimal
    places than the token supports.
    """
    _check_decimals(decimals)
    return Decimal(amount).scaleb(decimals, context=DECIMAL_EXACT_CONTEXT)


def to_base_units(
    amount: Decimal | int | str,
    decimals: int,
    rounding: str = ROUND_CEILING,
) -> int:
    """Convert a whole-token decimal amount into an integer base-unit amount.

    Args:
        amount: Amount in whole-token units
        decimals: Token decimals
        rounding: decimal rounding mode for any fractional base unit
            (default: ROUND_CEILING)

    Returns:
        Base-unit amount as int
    """
    scaled = scale_to_base_units(amount, decimals)
    return int(scaled.to_integral_value(rounding=rounding))


def exact_mul(a: Decimal | int, b: Decimal | int) -> Decimal:
    """Multiply two decimals without any rounding."""
    return DECIMAL_EXACT_CONTEXT.multiply(Decimal(a), Decimal(b))


def ceil_to_int(value: Decimal) -> int:
    """Round a decimal toward positive infinity to an int."""
    return int(value.to_integral_value(rounding=ROUND_CEILING))


__all__ = [
    "DECIMAL_EXACT_CONTEXT",
    "DECIMAL_HIGH_PREC_CONTEXT",
    "to_decimal_units",
    "scale_to_base_units",
    "to_base_units",
    "exact_mul",
    "ceil_to_int",
]
