"""Pydantic models for 0x orders, tokens and relayer payloads."""

from market_fill.models.orders import FillPlan, Order, OrderSide, SignedOrder, UIOrder
from market_fill.models.relayer import OrderConfigRequest, OrderConfigResponse
from market_fill.models.tokens import Token
from market_fill.models.types import Address, Bytes, Uint256

__all__ = [
    # Types
    "Address",
    "Bytes",
    "Uint256",
    # Orders
    "Order",
    "SignedOrder",
    "OrderSide",
    "UIOrder",
    "FillPlan",
    # Tokens
    "Token",
    # Relayer payloads
    "OrderConfigRequest",
    "OrderConfigResponse",
]
