"""Pydantic models for 0x v3 orders and the candidates built from them.

Field names follow the 0x v3 order schema, exposed in snake_case with the
camelCase wire names as aliases.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from market_fill.constants import ZERO_ADDRESS
from market_fill.errors import InvalidArgument
from market_fill.models.types import Address, Bytes, Uint256


class OrderSide(str, Enum):
    """Which side of the book the requester is taking."""

    BUY = "buy"
    SELL = "sell"


class Order(BaseModel):
    """An unsigned 0x v3 order."""

    chain_id: int = Field(default=1, alias="chainId")
    exchange_address: Address = Field(alias="exchangeAddress")
    maker_address: Address = Field(alias="makerAddress")
    taker_address: Address = Field(default=ZERO_ADDRESS, alias="takerAddress")
    fee_recipient_address: Address = Field(default=ZERO_ADDRESS, alias="feeRecipientAddress")
    sender_address: Address = Field(default=ZERO_ADDRESS, alias="senderAddress")
    maker_asset_amount: Uint256 = Field(alias="makerAssetAmount")
    taker_asset_amount: Uint256 = Field(alias="takerAssetAmount")
    maker_fee: Uint256 = Field(default="0", alias="makerFee")
    taker_fee: Uint256 = Field(default="0", alias="takerFee")
    expiration_time_seconds: Uint256 = Field(alias="expirationTimeSeconds")
    salt: Uint256 = Field(default="0")
    maker_asset_data: Bytes = Field(alias="makerAssetData")
    taker_asset_data: Bytes = Field(alias="takerAssetData")
    maker_fee_asset_data: Bytes = Field(default="0x", alias="makerFeeAssetData")
    taker_fee_asset_data: Bytes = Field(default="0x", alias="takerFeeAssetData")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def maker_asset_amount_int(self) -> int:
        """Maker asset amount as integer for calculations."""
        return int(self.maker_asset_amount)

    @property
    def taker_asset_amount_int(self) -> int:
        """Taker asset amount as integer for calculations."""
        return int(self.taker_asset_amount)

    @property
    def expiration_time_seconds_int(self) -> int:
        return int(self.expiration_time_seconds)


class SignedOrder(Order):
    """A 0x v3 order together with the maker's signature."""

    signature: Bytes = Field(default="0x")


@dataclass(frozen=True)
class UIOrder:
    """A standing order as shown in the order book.

    Wraps the raw signed order with its unit price (quote per base) and the
    base-asset size still on offer.

    Attributes:
        raw_order: The signed 0x order backing this entry
        price: Quote per base, as an exact decimal
        size: Total base units offered
        filled: Base units already consumed elsewhere, if known
        side: Side of the book the order rests on, if known. An ask rests
            on SELL and is taken by a BUY market order.
    """

    raw_order: SignedOrder
    price: Decimal
    size: int
    filled: int | None = None
    side: OrderSide | None = None

    def __post_init__(self) -> None:
        """Validate amounts and coerce the price to Decimal."""
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if not self.price.is_finite():
            raise InvalidArgument(f"price must be finite, got {self.price}")
        if self.price <= 0:
            raise InvalidArgument(f"price must be positive, got {self.price}")
        if self.size < 0:
            raise InvalidArgument(f"size must be non-negative, got {self.size}")
        if self.filled is not None:
            if self.filled < 0:
                raise InvalidArgument(f"filled must be non-negative, got {self.filled}")
            if self.filled > self.size:
                raise InvalidArgument(f"filled ({self.filled}) exceeds size ({self.size})")

    @property
    def available(self) -> int:
        """Base units still available to fill."""
        if self.filled:
            return self.size - self.filled
        return self.size


@dataclass(frozen=True)
class FillPlan:
    """The orders chosen to satisfy a market order and how much to take of each.

    `orders` and `amounts` are index-aligned. Amounts are in taker-asset
    base units for BUY plans and base-asset units for SELL plans, rounded
    up to integers. `base_amounts` keeps the exact pre-conversion fills in
    base-asset units.

    Unpacks as the `(orders, amounts, fully_filled)` triple.
    """

    orders: tuple[SignedOrder, ...] = ()
    amounts: tuple[int, ...] = ()
    fully_filled: bool = False
    base_amounts: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        if len(self.orders) != len(self.amounts):
            raise InvalidArgument(
                f"orders ({len(self.orders)}) and amounts ({len(self.amounts)}) "
                "lengths must be the same"
            )

    def __iter__(self) -> Iterator[Any]:
        return iter((list(self.orders), list(self.amounts), self.fully_filled))

    @property
    def total_base_amount(self) -> int:
        """Base-asset units covered by the plan."""
        return sum(self.base_amounts)
