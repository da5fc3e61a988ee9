"""Registry of tokens listed by the venue.

Lookups never default: a token that is not listed raises UnknownToken,
since assuming zero decimals would silently corrupt unit conversion.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from market_fill.constants import DAI, USDC, USDT, WBTC, WETH, ZRX
from market_fill.errors import InvalidArgument, UnknownToken
from market_fill.models.tokens import Token
from market_fill.models.types import normalize_address
from market_fill.tokens.asset_data import decode_asset_data

logger = structlog.get_logger()


class KnownTokens:
    """Read-only token metadata keyed by address.

    Addresses are matched case-insensitively.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._by_address: dict[str, Token] = {}
        for token in tokens:
            address = normalize_address(token.address)
            if address in self._by_address:
                raise InvalidArgument(f"Duplicate token address: {address}")
            self._by_address[address] = token

    def __len__(self) -> int:
        return len(self._by_address)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._by_address.values())

    def __contains__(self, address: object) -> bool:
        return isinstance(address, str) and normalize_address(address) in self._by_address

    def get_token_by_address(self, address: str) -> Token:
        """Return the token listed at `address`.

        Raises:
            UnknownToken: If no token is listed at the address
        """
        token = self._by_address.get(normalize_address(address))
        if token is None:
            logger.warning("unknown_token_address", token=normalize_address(address)[-8:])
            raise UnknownToken(f"Token with address {address} not found in known tokens")
        return token

    def get_token_by_asset_data(self, asset_data: str) -> Token:
        """Return the ERC20 token encoded in `asset_data`.

        Raises:
            UnknownToken: If the asset data is not ERC20 or the token is not listed
        """
        try:
            decoded = decode_asset_data(asset_data)
        except InvalidArgument as err:
            raise UnknownToken(f"Cannot resolve token from asset data {asset_data}") from err
        if not decoded.is_erc20:
            raise UnknownToken(f"Asset data {asset_data[:10]} does not encode an ERC20 token")
        return self.get_token_by_address(decoded.token_address)

    def get_token_by_symbol(self, symbol: str) -> Token:
        """Return the token with the given symbol (case-insensitive)."""
        wanted = symbol.lower()
        for token in self._by_address.values():
            if token.symbol.lower() == wanted:
                return token
        raise UnknownToken(f"Token with symbol {symbol} not found in known tokens")

    def decimals_for_asset_data(self, asset_data: str) -> int:
        return self.get_token_by_asset_data(asset_data).decimals


MAINNET_TOKENS: tuple[Token, ...] = (
    Token(address=WETH, symbol="WETH", name="Wrapped Ether", decimals=18),
    Token(address=USDC, symbol="USDC", name="USD Coin", decimals=6),
    Token(address=USDT, symbol="USDT", name="Tether USD", decimals=6),
    Token(address=DAI, symbol="DAI", name="Dai Stablecoin", decimals=18),
    Token(address=WBTC, symbol="WBTC", name="Wrapped BTC", decimals=8),
    Token(address=ZRX, symbol="ZRX", name="0x Protocol Token", decimals=18),
)

_known_tokens: KnownTokens | None = None


def get_known_tokens() -> KnownTokens:
    """Return the default (mainnet) token registry."""
    global _known_tokens
    if _known_tokens is None:
        _known_tokens = KnownTokens(MAINNET_TOKENS)
    return _known_tokens


__all__ = ["KnownTokens", "MAINNET_TOKENS", "get_known_tokens"]
