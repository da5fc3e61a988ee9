"""Request and response bodies for the HTTP API."""

from decimal import Decimal

from pydantic import BaseModel, Field

from market_fill.models.orders import OrderSide, SignedOrder, UIOrder
from market_fill.models.tokens import Token
from market_fill.models.types import Uint256


class UIOrderPayload(BaseModel):
    """A standing order as sent by the order-book UI."""

    raw_order: SignedOrder = Field(alias="rawOrder")
    price: Decimal = Field(description="Quote per base, whole-token units.")
    size: Uint256
    filled: Uint256 | None = None
    side: OrderSide | None = None

    model_config = {"populate_by_name": True}

    def to_ui_order(self) -> UIOrder:
        return UIOrder(
            raw_order=self.raw_order,
            price=self.price,
            size=int(self.size),
            filled=int(self.filled) if self.filled is not None else None,
            side=self.side,
        )


class MarketOrderRequest(BaseModel):
    """Amount to take and the standing orders to take it from."""

    amount: Uint256 = Field(description="Base-asset amount in base units.")
    orders: list[UIOrderPayload] = Field(default_factory=list)
    tokens: list[Token] | None = Field(
        default=None,
        description="Token metadata to use instead of the default registry.",
    )


class MarketOrderResponse(BaseModel):
    """The fill plan and its taker-asset total."""

    orders: list[SignedOrder]
    amounts: list[Uint256]
    fully_filled: bool = Field(alias="fullyFilled")
    taker_asset_total: str = Field(alias="takerAssetTotal")

    model_config = {"populate_by_name": True}


class ProtocolFeeRequest(BaseModel):
    order_count: int = Field(alias="orderCount", ge=0)
    gas_price: Uint256 = Field(alias="gasPrice")

    model_config = {"populate_by_name": True}


class ProtocolFeeResponse(BaseModel):
    protocol_fee: Uint256 = Field(alias="protocolFee")

    model_config = {"populate_by_name": True}
