"""Pytest configuration and fixtures."""

from datetime import UTC, datetime

import pytest

from market_fill.config import ProtocolConfig
from market_fill.models.relayer import OrderConfigRequest, OrderConfigResponse
from market_fill.tokens.known_tokens import KnownTokens
from tests.helpers import FEE_RECIPIENT, make_tokens

# =============================================================================
# Mock classes for dependency injection
# =============================================================================


class MockRelayer:
    """In-memory relayer that records requests and returns a fixed config.

    Usage:
        relayer = MockRelayer()
        order = build_limit_order(params, OrderSide.BUY, relayer, tokens)
        assert relayer.requests[0].maker_address == MAKER
    """

    def __init__(self, response: OrderConfigResponse | None = None) -> None:
        self.response = response or OrderConfigResponse(
            feeRecipientAddress=FEE_RECIPIENT,
            senderAddress="0x" + "00" * 20,
            makerFee="0",
            takerFee="0",
            makerFeeAssetData="0x",
            takerFeeAssetData="0x",
        )
        self.requests: list[OrderConfigRequest] = []  # Track calls for assertions

    def get_order_config(self, request: OrderConfigRequest) -> OrderConfigResponse:
        self.requests.append(request)
        return self.response


# =============================================================================
# Pytest fixtures
# =============================================================================


@pytest.fixture
def tokens() -> KnownTokens:
    """Token registry with mainnet and synthetic test tokens."""
    return make_tokens()


@pytest.fixture
def mock_relayer() -> MockRelayer:
    return MockRelayer()


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed point in time for expiration and salt calculations."""
    return datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def protocol_config() -> ProtocolConfig:
    return ProtocolConfig(chain_id=1337, protocol_fee_multiplier=70_000)
