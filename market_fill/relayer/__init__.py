"""Relayer (Standard Relayer API v3) integration."""

from market_fill.relayer.client import (
    ORDER_CONFIG_PATH,
    HttpRelayerClient,
    RelayerClient,
    get_relayer,
)

__all__ = ["ORDER_CONFIG_PATH", "RelayerClient", "HttpRelayerClient", "get_relayer"]
