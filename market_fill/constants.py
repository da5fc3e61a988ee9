"""Protocol constants for 0x v3 market orders.

Centralizes well-known addresses and protocol parameters. These are
defaults only; runtime code reads them through ProtocolConfig.
"""

from market_fill.models.types import is_valid_address


def _validate_token_address(name: str, address: str) -> str:
    """Validate and return a token address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Mainnet chain id
DEFAULT_CHAIN_ID = 1

# 0x v3 protocol fee: fee per filled order = multiplier * tx.gasprice
PROTOCOL_FEE_MULTIPLIER = 150_000

# Orders created by the builders expire after one week by default
DEFAULT_ORDER_EXPIRATION_SECONDS = 7 * 24 * 60 * 60

# Asset proxy ids (first 4 bytes of 0x v3 asset data)
ERC20_PROXY_ID = "0xf47261b0"
ERC721_PROXY_ID = "0x02571792"

# Well-known token addresses on mainnet (lowercase for consistency)
WETH = _validate_token_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
USDC = _validate_token_address("USDC", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48")
USDT = _validate_token_address("USDT", "0xdac17f958d2ee523a2206206994597c13d831ec7")
DAI = _validate_token_address("DAI", "0x6b175474e89094c44da98b954eedeac495271d0f")
WBTC = _validate_token_address("WBTC", "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599")
ZRX = _validate_token_address("ZRX", "0xe41d2489571d322189246dafa5ebde1f4699f498")
