"""Standard Relayer API v3 client for order configuration.

A single synchronous request/response call. No retry policy is applied
here; callers wrap it with their own.
"""

from __future__ import annotations

from typing import Protocol

import httpx
import structlog
from pydantic import ValidationError

from market_fill.config import DEFAULT_PROTOCOL_CONFIG, ProtocolConfig
from market_fill.errors import RelayerError
from market_fill.models.relayer import OrderConfigRequest, OrderConfigResponse

logger = structlog.get_logger()

ORDER_CONFIG_PATH = "/v3/order_config"


class RelayerClient(Protocol):
    """Protocol for fetching taker and fee configuration for a new order."""

    def get_order_config(self, request: OrderConfigRequest) -> OrderConfigResponse:
        """Return the relayer's fee and sender configuration for `request`."""
        ...


class HttpRelayerClient:
    """RelayerClient backed by an httpx client.

    Args:
        config: Supplies relayer_url, relayer_timeout and chain_id
        client: Optional pre-built httpx.Client (e.g. with a mock transport)
    """

    def __init__(
        self,
        config: ProtocolConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or DEFAULT_PROTOCOL_CONFIG
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.config.relayer_timeout)

    @property
    def order_config_url(self) -> str:
        return self.config.relayer_url.rstrip("/") + ORDER_CONFIG_PATH

    def get_order_config(self, request: OrderConfigRequest) -> OrderConfigResponse:
        """POST the order to /v3/order_config.

        Raises:
            RelayerError: On transport errors, non-2xx responses, or a
                response body that does not match the expected schema
        """
        try:
            response = self._client.post(
                self.order_config_url,
                params={"chainId": self.config.chain_id},
                json=request.model_dump(by_alias=True),
            )
            response.raise_for_status()
            result = OrderConfigResponse.model_validate(response.json())
        except httpx.HTTPStatusError as err:
            logger.warning(
                "relayer_order_config_rejected",
                url=self.order_config_url,
                status_code=err.response.status_code,
            )
            raise RelayerError(
                f"Relayer rejected order config request: HTTP {err.response.status_code}"
            ) from err
        except httpx.HTTPError as err:
            logger.warning("relayer_order_config_failed", url=self.order_config_url, error=str(err))
            raise RelayerError(f"Relayer order config request failed: {err}") from err
        except (ValidationError, ValueError) as err:
            logger.warning("relayer_order_config_invalid_response", url=self.order_config_url)
            raise RelayerError("Relayer returned an invalid order config response") from err

        logger.debug(
            "relayer_order_config_received",
            maker=request.maker_address[-8:],
            fee_recipient=result.fee_recipient_address[-8:],
        )
        return result

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpRelayerClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def get_relayer(config: ProtocolConfig | None = None) -> HttpRelayerClient:
    """Build an HTTP relayer client for the configured relayer URL."""
    return HttpRelayerClient(config=config)


__all__ = ["ORDER_CONFIG_PATH", "RelayerClient", "HttpRelayerClient", "get_relayer"]
