"""Pydantic models for the Standard Relayer API v3 order configuration call."""

from pydantic import BaseModel, Field

from market_fill.models.types import Address, Bytes, Uint256


class OrderConfigRequest(BaseModel):
    """Order parameters sent to the relayer for taker and fee configuration."""

    exchange_address: Address = Field(alias="exchangeAddress")
    maker_address: Address = Field(alias="makerAddress")
    taker_address: Address = Field(alias="takerAddress")
    maker_asset_amount: Uint256 = Field(alias="makerAssetAmount")
    taker_asset_amount: Uint256 = Field(alias="takerAssetAmount")
    maker_asset_data: Bytes = Field(alias="makerAssetData")
    taker_asset_data: Bytes = Field(alias="takerAssetData")
    expiration_time_seconds: Uint256 = Field(alias="expirationTimeSeconds")

    model_config = {"populate_by_name": True, "frozen": True}


class OrderConfigResponse(BaseModel):
    """Taker, sender and fee fields the relayer wants on the order."""

    fee_recipient_address: Address = Field(alias="feeRecipientAddress")
    sender_address: Address = Field(alias="senderAddress")
    maker_fee: Uint256 = Field(alias="makerFee")
    taker_fee: Uint256 = Field(alias="takerFee")
    maker_fee_asset_data: Bytes = Field(alias="makerFeeAssetData")
    taker_fee_asset_data: Bytes = Field(alias="takerFeeAssetData")

    model_config = {"populate_by_name": True, "frozen": True}
