"""0x v3 asset data encoding.

Asset data is the 4-byte proxy id followed by the ABI-encoded asset
parameters:
- ERC20:  erc20Token(address)                 -> 0xf47261b0 + address
- ERC721: erc721Token(address,uint256)        -> 0x02571792 + address + token id
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_abi import decode, encode  # type: ignore[attr-defined]
from eth_abi.exceptions import DecodingError

from market_fill.constants import ERC20_PROXY_ID, ERC721_PROXY_ID
from market_fill.errors import InvalidArgument
from market_fill.models.types import normalize_address


@dataclass(frozen=True)
class AssetData:
    """Decoded asset data.

    Attributes:
        proxy_id: 4-byte asset proxy id as 0x-prefixed hex
        token_address: Token contract address (lowercase)
        token_id: ERC721 token id, None for ERC20
    """

    proxy_id: str
    token_address: str
    token_id: int | None = None

    @property
    def is_erc20(self) -> bool:
        return self.proxy_id == ERC20_PROXY_ID

    @property
    def is_erc721(self) -> bool:
        return self.proxy_id == ERC721_PROXY_ID


def encode_erc20_asset_data(token_address: str) -> str:
    """Encode ERC20 asset data for a token address."""
    encoded = encode(["address"], [normalize_address(token_address, validate=True)])
    return ERC20_PROXY_ID + encoded.hex()


def encode_erc721_asset_data(token_address: str, token_id: int) -> str:
    """Encode ERC721 asset data for a collectible."""
    if token_id < 0:
        raise InvalidArgument(f"token_id must be non-negative, got {token_id}")
    encoded = encode(
        ["address", "uint256"],
        [normalize_address(token_address, validate=True), token_id],
    )
    return ERC721_PROXY_ID + encoded.hex()


def decode_asset_data(asset_data: str) -> AssetData:
    """Decode ERC20 or ERC721 asset data.

    Raises:
        InvalidArgument: If the proxy id is unsupported or the payload is malformed
    """
    data = asset_data.lower()
    if not data.startswith("0x"):
        data = "0x" + data
    proxy_id = data[:10]

    try:
        payload = bytes.fromhex(data[10:])
        if proxy_id == ERC20_PROXY_ID:
            (address,) = decode(["address"], payload)
            return AssetData(proxy_id=proxy_id, token_address=normalize_address(address))
        if proxy_id == ERC721_PROXY_ID:
            address, token_id = decode(["address", "uint256"], payload)
            return AssetData(
                proxy_id=proxy_id,
                token_address=normalize_address(address),
                token_id=token_id,
            )
    except (ValueError, DecodingError) as err:
        raise InvalidArgument(f"Malformed asset data: {asset_data}") from err

    raise InvalidArgument(f"Unsupported asset proxy id: {proxy_id}")


__all__ = [
    "AssetData",
    "encode_erc20_asset_data",
    "encode_erc721_asset_data",
    "decode_asset_data",
]
