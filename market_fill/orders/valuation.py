"""Total taker-asset consideration of a fill plan.

BUY plans already carry taker-asset amounts (see allocator), so each
amount is taken at price 1. SELL amounts are base-asset amounts taken at
each order's notional price makerAssetAmount / takerAssetAmount.

The sum is accumulated as an exact rational and converted to Decimal once,
rounding up, so the total is never under-reported.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction

from market_fill.errors import InvalidArgument
from market_fill.models.orders import FillPlan, Order, OrderSide
from market_fill.tokens.units import DECIMAL_HIGH_PREC_CONTEXT


def _order_price(side: OrderSide, order: Order) -> Fraction:
    if side == OrderSide.BUY:
        return Fraction(1)
    taker_amount = order.taker_asset_amount_int
    if taker_amount <= 0:
        raise InvalidArgument("takerAssetAmount must be positive to value an order")
    return Fraction(order.maker_asset_amount_int, taker_amount)


def _fraction_to_decimal(value: Fraction) -> Decimal:
    if value.denominator == 1:
        return Decimal(value.numerator)
    return DECIMAL_HIGH_PREC_CONTEXT.divide(Decimal(value.numerator), Decimal(value.denominator))


def valuate(
    side: OrderSide,
    orders_to_fill: Sequence[Order],
    amounts: Sequence[int | Decimal],
) -> Decimal:
    """Sum the taker-asset value of filling `orders_to_fill` by `amounts`.

    Raises:
        InvalidArgument: If the sequences differ in length, or a SELL order
            has a zero takerAssetAmount
    """
    if len(orders_to_fill) != len(amounts):
        raise InvalidArgument("ordersToFill and amount array lengths must be the same.")
    if not orders_to_fill:
        return Decimal(0)

    total = Fraction(0)
    for order, amount in zip(orders_to_fill, amounts, strict=True):
        total += Fraction(amount) * _order_price(side, order)
    return _fraction_to_decimal(total)


def valuate_plan(side: OrderSide, plan: FillPlan) -> Decimal:
    """valuate() over a FillPlan."""
    return valuate(side, plan.orders, plan.amounts)


# Name used by the order-book UI code this mirrors
sum_taker_asset_fillable_orders = valuate

__all__ = ["valuate", "valuate_plan", "sum_taker_asset_fillable_orders"]
