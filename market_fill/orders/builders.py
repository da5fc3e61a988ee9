"""Builders for new limit and collectible orders.

Each builder shapes an OrderConfigRequest, asks the relayer for taker and
fee configuration, and returns the merged (unsigned) order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import ROUND_FLOOR, Decimal

import structlog

from market_fill.config import DEFAULT_PROTOCOL_CONFIG, ProtocolConfig
from market_fill.errors import InvalidArgument
from market_fill.models.orders import Order, OrderSide
from market_fill.models.relayer import OrderConfigRequest
from market_fill.relayer.client import RelayerClient
from market_fill.tokens.asset_data import encode_erc20_asset_data, encode_erc721_asset_data
from market_fill.tokens.known_tokens import KnownTokens, get_known_tokens
from market_fill.tokens.units import exact_mul, to_base_units, to_decimal_units

logger = structlog.get_logger()


@dataclass(frozen=True)
class BuildLimitOrderParams:
    """Parameters for a base/quote limit order.

    Attributes:
        account: Maker address
        amount: Base token amount in base units
        base_token_address: Token being traded
        exchange_address: 0x Exchange contract address
        price: Quote per base in whole-token units
        quote_token_address: Token used to price the base token
    """

    account: str
    amount: int
    base_token_address: str
    exchange_address: str
    price: Decimal
    quote_token_address: str


@dataclass(frozen=True)
class BuildSellCollectibleOrderParams:
    """Parameters for an ERC721 collectible order priced in WETH.

    Attributes:
        collectible_address: ERC721 contract address
        collectible_id: ERC721 token id
        account: Maker address
        amount: Amount in base units
        exchange_address: 0x Exchange contract address
        expiration_date: Unix timestamp in seconds
        weth_address: WETH token address
        price: WETH per collectible unit
    """

    collectible_address: str
    collectible_id: int
    account: str
    amount: int
    exchange_address: str
    expiration_date: int
    weth_address: str
    price: Decimal


def _floor(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


def _now_seconds(now: datetime | None) -> int:
    return int((now or datetime.now(UTC)).timestamp())


def get_expiration_time_seconds(
    config: ProtocolConfig | None = None,
    now: datetime | None = None,
) -> int:
    """Expiration timestamp for a new order: now + configured lifetime."""
    config = config or DEFAULT_PROTOCOL_CONFIG
    return _now_seconds(now) + config.order_expiration_seconds


def get_order_with_taker_and_fee_config_from_relayer(
    order_config_request: OrderConfigRequest,
    relayer: RelayerClient,
    config: ProtocolConfig | None = None,
    now: datetime | None = None,
) -> Order:
    """Merge the request with the relayer's configuration into an Order.

    Adds the configured chain id and a salt derived from the current time
    in milliseconds.

    Raises:
        RelayerError: If the relayer request fails
    """
    config = config or DEFAULT_PROTOCOL_CONFIG
    order_result = relayer.get_order_config(order_config_request)
    salt = int((now or datetime.now(UTC)).timestamp() * 1000)

    return Order.model_validate(
        {
            **order_config_request.model_dump(by_alias=True),
            **order_result.model_dump(by_alias=True),
            "chainId": config.chain_id,
            "salt": salt,
        }
    )


def build_limit_order(
    params: BuildLimitOrderParams,
    side: OrderSide,
    relayer: RelayerClient,
    tokens: KnownTokens | None = None,
    config: ProtocolConfig | None = None,
    now: datetime | None = None,
) -> Order:
    """Build a limit order for `params.amount` base units at `params.price`.

    A BUY order offers the quote token for the base token; a SELL order
    offers the base token for the quote token. The quote amount is rounded
    down to whole base units.

    Raises:
        InvalidArgument: If amount or price is not positive
        UnknownToken: If either token is not listed
        RelayerError: If the relayer request fails
    """
    if params.amount <= 0:
        raise InvalidArgument(f"amount must be positive, got {params.amount}")
    if params.price <= 0:
        raise InvalidArgument(f"price must be positive, got {params.price}")
    tokens = tokens or get_known_tokens()
    config = config or DEFAULT_PROTOCOL_CONFIG

    base_asset_data = encode_erc20_asset_data(params.base_token_address)
    quote_asset_data = encode_erc20_asset_data(params.quote_token_address)

    base_decimals = tokens.get_token_by_address(params.base_token_address).decimals
    quote_decimals = tokens.get_token_by_address(params.quote_token_address).decimals

    base_amount_in_units = to_decimal_units(params.amount, base_decimals)
    quote_amount_in_units = exact_mul(base_amount_in_units, Decimal(params.price))
    quote_amount = to_base_units(quote_amount_in_units, quote_decimals, rounding=ROUND_FLOOR)

    is_buy = side == OrderSide.BUY
    request = OrderConfigRequest(
        exchange_address=params.exchange_address,
        maker_asset_data=quote_asset_data if is_buy else base_asset_data,
        taker_asset_data=base_asset_data if is_buy else quote_asset_data,
        maker_asset_amount=quote_amount if is_buy else params.amount,
        taker_asset_amount=params.amount if is_buy else quote_amount,
        maker_address=params.account,
        taker_address=config.zero_address,
        expiration_time_seconds=get_expiration_time_seconds(config, now),
    )

    logger.debug(
        "limit_order_request_built",
        side=side.value,
        base_token=params.base_token_address[-8:],
        quote_token=params.quote_token_address[-8:],
        amount=params.amount,
        quote_amount=quote_amount,
    )
    return get_order_with_taker_and_fee_config_from_relayer(request, relayer, config, now)


def build_sell_collectible_order(
    params: BuildSellCollectibleOrderParams,
    side: OrderSide,
    relayer: RelayerClient,
    config: ProtocolConfig | None = None,
    now: datetime | None = None,
) -> Order:
    """Build an order trading an ERC721 collectible against WETH.

    The collectible is always the maker asset. On BUY the maker amount is
    amount * price (rounded down) and the taker amount is `amount`; on SELL
    the two are swapped.

    Raises:
        RelayerError: If the relayer request fails
    """
    config = config or DEFAULT_PROTOCOL_CONFIG

    collectible_data = encode_erc721_asset_data(params.collectible_address, params.collectible_id)
    weth_asset_data = encode_erc20_asset_data(params.weth_address)

    priced_amount = _floor(exact_mul(params.amount, Decimal(params.price)))
    is_buy = side == OrderSide.BUY
    request = OrderConfigRequest(
        exchange_address=params.exchange_address,
        maker_asset_data=collectible_data,
        taker_asset_data=weth_asset_data,
        maker_asset_amount=priced_amount if is_buy else params.amount,
        taker_asset_amount=params.amount if is_buy else priced_amount,
        maker_address=params.account,
        taker_address=config.zero_address,
        expiration_time_seconds=params.expiration_date,
    )

    logger.debug(
        "collectible_order_request_built",
        side=side.value,
        collectible=params.collectible_address[-8:],
        collectible_id=params.collectible_id,
    )
    return get_order_with_taker_and_fee_config_from_relayer(request, relayer, config, now)


__all__ = [
    "BuildLimitOrderParams",
    "BuildSellCollectibleOrderParams",
    "build_limit_order",
    "build_sell_collectible_order",
    "get_expiration_time_seconds",
    "get_order_with_taker_and_fee_config_from_relayer",
]
