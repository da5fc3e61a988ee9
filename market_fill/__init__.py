"""0x market order allocation and order building."""

from market_fill.models.orders import FillPlan, OrderSide, SignedOrder, UIOrder
from market_fill.orders import (
    allocate,
    calculate_worst_case_protocol_fee,
    estimate_fee,
    is_dutch_auction,
    valuate,
    valuate_plan,
)

__version__ = "0.1.0"
__all__ = [
    "FillPlan",
    "OrderSide",
    "SignedOrder",
    "UIOrder",
    "allocate",
    "valuate",
    "valuate_plan",
    "estimate_fee",
    "calculate_worst_case_protocol_fee",
    "is_dutch_auction",
    "__version__",
]
