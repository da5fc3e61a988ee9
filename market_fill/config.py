"""Protocol configuration for order building and fee estimation."""

import os
from dataclasses import dataclass

from market_fill.constants import (
    DEFAULT_CHAIN_ID,
    DEFAULT_ORDER_EXPIRATION_SECONDS,
    PROTOCOL_FEE_MULTIPLIER,
    ZERO_ADDRESS,
)


@dataclass(frozen=True)
class ProtocolConfig:
    """Centralized protocol parameters.

    Passed explicitly to the fee estimator and the order builders so they
    can be exercised with arbitrary parameters in tests.

    Attributes:
        chain_id: Chain the orders are created for (default: 1, mainnet)
        zero_address: Sentinel used as "any taker" (default: 0x00..00)
        protocol_fee_multiplier: Per-order protocol fee multiplier applied
            to the gas price (default: 150,000)
        order_expiration_seconds: Lifetime of built orders (default: 1 week)
        relayer_url: Base URL of the Standard Relayer API
        relayer_timeout: Timeout in seconds for relayer requests
    """

    chain_id: int = DEFAULT_CHAIN_ID
    zero_address: str = ZERO_ADDRESS
    protocol_fee_multiplier: int = PROTOCOL_FEE_MULTIPLIER
    order_expiration_seconds: int = DEFAULT_ORDER_EXPIRATION_SECONDS
    relayer_url: str = "http://localhost:3000"
    relayer_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "ProtocolConfig":
        """Build a config from MARKET_FILL_* environment variables.

        Unset variables fall back to the defaults above.
        """
        defaults = cls()
        return cls(
            chain_id=int(os.environ.get("MARKET_FILL_CHAIN_ID", defaults.chain_id)),
            zero_address=defaults.zero_address,
            protocol_fee_multiplier=int(
                os.environ.get(
                    "MARKET_FILL_PROTOCOL_FEE_MULTIPLIER", defaults.protocol_fee_multiplier
                )
            ),
            order_expiration_seconds=int(
                os.environ.get(
                    "MARKET_FILL_ORDER_EXPIRATION_SECONDS", defaults.order_expiration_seconds
                )
            ),
            relayer_url=os.environ.get("MARKET_FILL_RELAYER_URL", defaults.relayer_url),
            relayer_timeout=float(
                os.environ.get("MARKET_FILL_RELAYER_TIMEOUT", defaults.relayer_timeout)
            ),
        )


# Default configuration instance
DEFAULT_PROTOCOL_CONFIG = ProtocolConfig()
