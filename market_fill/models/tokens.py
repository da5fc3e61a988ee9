"""Pydantic model for token metadata."""

from pydantic import BaseModel, Field

from market_fill.models.types import Address


class Token(BaseModel):
    """ERC20 token metadata as listed by the venue."""

    address: Address
    symbol: str
    name: str | None = None
    # Some exotic tokens use more than 18 decimals, so we allow up to 77 (max for uint256)
    decimals: int = Field(ge=0, le=77)

    model_config = {"frozen": True}
