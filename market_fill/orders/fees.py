"""Worst-case 0x protocol fee for filling a batch of orders.

Every filled order pays protocol_fee_multiplier * gas_price, so the worst
case is paying it for every order in the batch.
"""

from __future__ import annotations

from collections.abc import Sized
from decimal import Decimal

import structlog

from market_fill.config import DEFAULT_PROTOCOL_CONFIG, ProtocolConfig
from market_fill.errors import InvalidArgument
from market_fill.tokens.units import exact_mul

logger = structlog.get_logger()


def estimate_fee(
    order_count: int,
    gas_price: int | Decimal,
    config: ProtocolConfig | None = None,
) -> int | Decimal:
    """Return order_count * protocol_fee_multiplier * gas_price, exactly.

    Integer gas prices give an integer fee; Decimal gas prices are
    multiplied without rounding.

    Raises:
        InvalidArgument: If order_count or gas_price is negative
    """
    config = config or DEFAULT_PROTOCOL_CONFIG
    if order_count < 0:
        raise InvalidArgument(f"order_count must be non-negative, got {order_count}")
    if gas_price < 0:
        raise InvalidArgument(f"gas_price must be non-negative, got {gas_price}")

    per_order = order_count * config.protocol_fee_multiplier
    if isinstance(gas_price, Decimal):
        fee: int | Decimal = exact_mul(per_order, gas_price)
    else:
        fee = per_order * gas_price

    logger.debug(
        "protocol_fee_estimated",
        order_count=order_count,
        gas_price=str(gas_price),
        multiplier=config.protocol_fee_multiplier,
        fee=str(fee),
    )
    return fee


def calculate_worst_case_protocol_fee(
    orders: Sized,
    gas_price: int | Decimal,
    config: ProtocolConfig | None = None,
) -> int | Decimal:
    """estimate_fee() for every order in `orders`."""
    return estimate_fee(len(orders), gas_price, config)


__all__ = ["estimate_fee", "calculate_worst_case_protocol_fee"]
