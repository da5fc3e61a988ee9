"""Greedy allocation of a market order across standing limit orders.

Algorithm:
1. Rank candidates best price first (ascending for BUY, descending for SELL).
   The sort is stable, so candidates at the same price keep their input order.
2. Walk the ranking, taking each candidate's available amount until the
   requested base amount is reached. The last candidate taken may be filled
   partially.
3. For BUY plans, each base fill is re-expressed in taker-asset (quote) base
   units: maker decimals -> whole units, times price, -> taker base units.
4. Round every returned amount up to an integer so fills never under-deliver.

Rounding policy: the maker->taker conversion is exact. The only rounding is
the single ceiling applied to each returned amount (step 4).
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

import structlog

from market_fill.errors import InvalidArgument
from market_fill.models.orders import FillPlan, OrderSide, SignedOrder, UIOrder
from market_fill.tokens.known_tokens import KnownTokens, get_known_tokens
from market_fill.tokens.units import (
    ceil_to_int,
    exact_mul,
    scale_to_base_units,
    to_decimal_units,
)

logger = structlog.get_logger()


def opposite_side(side: OrderSide) -> OrderSide:
    return OrderSide.SELL if side == OrderSide.BUY else OrderSide.BUY


def rank_candidates(side: OrderSide, candidates: Sequence[UIOrder]) -> list[UIOrder]:
    """Return candidates sorted from best to worst price for `side`.

    Returns a new list; the input sequence is left untouched.
    """
    return sorted(candidates, key=lambda c: c.price, reverse=side == OrderSide.SELL)


def to_taker_asset_amount(candidate: UIOrder, base_amount: int, tokens: KnownTokens) -> Decimal:
    """Convert a base-asset fill of a BUY candidate into taker-asset base units.

    The candidate's maker asset is the base token and its taker asset the
    quote token. The result is exact and may carry a fractional base unit.

    Raises:
        UnknownToken: If either asset's decimals are not known
    """
    order = candidate.raw_order
    maker_decimals = tokens.decimals_for_asset_data(order.maker_asset_data)
    taker_decimals = tokens.decimals_for_asset_data(order.taker_asset_data)

    buy_amount = to_decimal_units(base_amount, maker_decimals)
    return scale_to_base_units(exact_mul(buy_amount, candidate.price), taker_decimals)


def allocate(
    side: OrderSide,
    target_amount: int,
    candidates: Sequence[UIOrder],
    tokens: KnownTokens | None = None,
) -> FillPlan:
    """Select the orders and fill amounts needed to take `target_amount`.

    Args:
        side: Side the requester is taking
        target_amount: Base-asset amount to fill, in base units
        candidates: Standing orders on the opposite side of the book, in any order
        tokens: Token registry used for BUY-side unit conversion
            (default: the mainnet registry)

    Returns:
        FillPlan whose `amounts` are in taker-asset base units for BUY and
        base-asset units for SELL. `fully_filled` is True only when the
        chosen orders cover exactly `target_amount`.

    Raises:
        InvalidArgument: If target_amount is negative, or a candidate rests on
            the same side as the market order
        UnknownToken: If a BUY candidate references an unlisted token
    """
    if target_amount < 0:
        raise InvalidArgument(f"target_amount must be non-negative, got {target_amount}")
    if tokens is None:
        tokens = get_known_tokens()

    book_side = opposite_side(side)
    for candidate in candidates:
        if candidate.side is not None and candidate.side != book_side:
            raise InvalidArgument(
                f"{side.value} market order cannot take an order resting on "
                f"the {candidate.side.value} side"
            )

    ranked = rank_candidates(side, candidates)

    orders: list[SignedOrder] = []
    amounts: list[Decimal] = []
    base_amounts: list[int] = []
    filled_amount = 0

    for candidate in ranked:
        if filled_amount >= target_amount:
            break

        available = candidate.available
        if filled_amount + available > target_amount:
            fill = target_amount - filled_amount
            filled_amount = target_amount
        else:
            fill = available
            filled_amount += available

        orders.append(candidate.raw_order)
        base_amounts.append(fill)
        if side == OrderSide.BUY:
            amounts.append(to_taker_asset_amount(candidate, fill, tokens))
        else:
            amounts.append(Decimal(fill))

    fully_filled = filled_amount == target_amount

    plan = FillPlan(
        orders=tuple(orders),
        amounts=tuple(ceil_to_int(amount) for amount in amounts),
        fully_filled=fully_filled,
        base_amounts=tuple(base_amounts),
    )

    logger.debug(
        "fill_plan_built",
        side=side.value,
        target_amount=target_amount,
        filled_amount=filled_amount,
        candidate_count=len(candidates),
        order_count=len(plan.orders),
        fully_filled=fully_filled,
    )
    if not fully_filled:
        logger.info(
            "fill_plan_insufficient_liquidity",
            side=side.value,
            target_amount=target_amount,
            filled_amount=filled_amount,
        )

    return plan


build_market_orders = allocate

__all__ = [
    "allocate",
    "build_market_orders",
    "opposite_side",
    "rank_candidates",
    "to_taker_asset_amount",
]
