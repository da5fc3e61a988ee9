"""API endpoints for market order allocation."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from market_fill.api.schemas import (
    MarketOrderRequest,
    MarketOrderResponse,
    ProtocolFeeRequest,
    ProtocolFeeResponse,
)
from market_fill.config import ProtocolConfig
from market_fill.errors import InvalidArgument, UnknownToken
from market_fill.models.orders import OrderSide
from market_fill.models.types import UINT256_MAX
from market_fill.orders.allocator import allocate
from market_fill.orders.fees import estimate_fee
from market_fill.orders.valuation import valuate_plan
from market_fill.tokens.known_tokens import KnownTokens, get_known_tokens

logger = structlog.get_logger()

router = APIRouter()


def get_tokens() -> KnownTokens:
    """Dependency provider for the token registry.

    Override this in tests to inject a custom registry:
        app.dependency_overrides[get_tokens] = lambda: my_tokens
    """
    return get_known_tokens()


def get_config() -> ProtocolConfig:
    """Dependency provider for the protocol configuration."""
    return ProtocolConfig.from_env()


@router.post("/v1/market-orders/{side}", response_model_by_alias=True)
async def market_orders(
    side: OrderSide,
    request: MarketOrderRequest,
    tokens: KnownTokens = Depends(get_tokens),
) -> MarketOrderResponse:
    """Allocate `amount` across the given standing orders.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Contract violations and unknown tokens: 400
    """
    logger.info(
        "received_market_order",
        side=side.value,
        amount=request.amount,
        candidate_count=len(request.orders),
    )

    try:
        registry = KnownTokens(request.tokens) if request.tokens is not None else tokens
        candidates = [payload.to_ui_order() for payload in request.orders]
        plan = allocate(side, int(request.amount), candidates, registry)
        total = valuate_plan(side, plan)
    except (InvalidArgument, UnknownToken) as err:
        logger.warning("market_order_rejected", side=side.value, error=str(err))
        raise HTTPException(status_code=400, detail=str(err)) from err

    return MarketOrderResponse(
        orders=list(plan.orders),
        amounts=[str(amount) for amount in plan.amounts],
        fully_filled=plan.fully_filled,
        taker_asset_total=str(total),
    )


@router.post("/v1/protocol-fee", response_model_by_alias=True)
async def protocol_fee(
    request: ProtocolFeeRequest,
    config: ProtocolConfig = Depends(get_config),
) -> ProtocolFeeResponse:
    """Worst-case protocol fee for filling `orderCount` orders.

    A fee that does not fit in uint256 is rejected with 400.
    """
    try:
        fee = estimate_fee(request.order_count, int(request.gas_price), config)
    except InvalidArgument as err:
        raise HTTPException(status_code=400, detail=str(err)) from err

    if fee > UINT256_MAX:
        logger.warning(
            "protocol_fee_overflow",
            order_count=request.order_count,
            gas_price=request.gas_price,
        )
        raise HTTPException(status_code=400, detail="Protocol fee exceeds uint256")

    return ProtocolFeeResponse(protocol_fee=str(fee))
