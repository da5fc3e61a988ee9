"""Market order allocation, valuation, fees and order builders.

Usage:
    from market_fill.orders import allocate, valuate_plan, estimate_fee

    plan = allocate(OrderSide.BUY, amount, candidates, tokens)
    total = valuate_plan(OrderSide.BUY, plan)
    fee = calculate_worst_case_protocol_fee(plan.orders, gas_price)
"""

from market_fill.orders.allocator import (
    allocate,
    build_market_orders,
    opposite_side,
    rank_candidates,
    to_taker_asset_amount,
)
from market_fill.orders.auctions import (
    DEFAULT_AUCTION_CLASSIFIER,
    AuctionClassifier,
    AuctionKind,
    StandardOrdersOnly,
    is_dutch_auction,
    is_special_auction,
)
from market_fill.orders.builders import (
    BuildLimitOrderParams,
    BuildSellCollectibleOrderParams,
    build_limit_order,
    build_sell_collectible_order,
    get_expiration_time_seconds,
    get_order_with_taker_and_fee_config_from_relayer,
)
from market_fill.orders.fees import calculate_worst_case_protocol_fee, estimate_fee
from market_fill.orders.valuation import (
    sum_taker_asset_fillable_orders,
    valuate,
    valuate_plan,
)

__all__ = [
    # Allocation
    "allocate",
    "build_market_orders",
    "opposite_side",
    "rank_candidates",
    "to_taker_asset_amount",
    # Valuation
    "valuate",
    "valuate_plan",
    "sum_taker_asset_fillable_orders",
    # Fees
    "estimate_fee",
    "calculate_worst_case_protocol_fee",
    # Auction classification
    "AuctionKind",
    "AuctionClassifier",
    "StandardOrdersOnly",
    "DEFAULT_AUCTION_CLASSIFIER",
    "is_special_auction",
    "is_dutch_auction",
    # Builders
    "BuildLimitOrderParams",
    "BuildSellCollectibleOrderParams",
    "build_limit_order",
    "build_sell_collectible_order",
    "get_expiration_time_seconds",
    "get_order_with_taker_and_fee_config_from_relayer",
]
