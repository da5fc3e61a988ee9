"""Token metadata, asset data encoding and unit conversion."""

from market_fill.tokens.asset_data import (
    AssetData,
    decode_asset_data,
    encode_erc20_asset_data,
    encode_erc721_asset_data,
)
from market_fill.tokens.known_tokens import MAINNET_TOKENS, KnownTokens, get_known_tokens
from market_fill.tokens.units import (
    ceil_to_int,
    exact_mul,
    scale_to_base_units,
    to_base_units,
    to_decimal_units,
)

__all__ = [
    # Asset data
    "AssetData",
    "encode_erc20_asset_data",
    "encode_erc721_asset_data",
    "decode_asset_data",
    # Registry
    "KnownTokens",
    "MAINNET_TOKENS",
    "get_known_tokens",
    # Units
    "to_decimal_units",
    "scale_to_base_units",
    "to_base_units",
    "exact_mul",
    "ceil_to_int",
]
