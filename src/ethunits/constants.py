__all__ = (
    "BASE_TEN",
    "COINGECKO_ETH_USD_PRICE_URL",
    "CRYPTO_KITTIES_CONTRACT_ADDRESS",
    "DEFAULT_ERC20_TOKEN_DECIMALS",
    "ETHERSCAN_ROOT_URL",
    "ETH_GAS_STATION_API_BASE_URL",
    "ETH_GAS_STATION_GAS_ENDPOINT",
    "GWEI_DECIMALS",
    "GWEI_IN_ETH",
    "GWEI_IN_WEI",
    "MAX_UINT256",
    "NULL_ADDRESS",
    "NULL_BYTES",
    "ONE_NFT_UNIT",
    "RINKEBY_ETHERSCAN_ROOT_URL",
    "TRUSTWALLET_TOKEN_ICON_URL_TEMPLATE",
    "UNLIMITED_ALLOWANCE_IN_BASE_UNITS",
    "ZERO_AMOUNT",
    "ZERO_NFT_UNIT",
    "ChainId",
)

import enum
import typing
from decimal import Decimal


class ChainId(enum.IntEnum):
    MAINNET = 1
    RINKEBY = 4
    KOVAN = 42
    GANACHE = 1337


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


MAX_UINT256 = _max_uint(256)

UNLIMITED_ALLOWANCE_IN_BASE_UNITS = MAX_UINT256

BASE_TEN = 10

# 1 gwei = 10**9 wei, 1 ether = 10**9 gwei
GWEI_DECIMALS = 9
GWEI_IN_WEI = BASE_TEN**GWEI_DECIMALS
GWEI_IN_ETH = BASE_TEN**GWEI_DECIMALS

DEFAULT_ERC20_TOKEN_DECIMALS = 18

ZERO_AMOUNT = Decimal(0)
ONE_NFT_UNIT = 1
ZERO_NFT_UNIT = 0

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"

# Sentinel for "no value", distinct from any encoded amount
NULL_BYTES = "0x"

CRYPTO_KITTIES_CONTRACT_ADDRESS = "0x06012c8cf97bead5deae237070f9587f8e7a266d"

ETH_GAS_STATION_API_BASE_URL = "https://ethgasstation.info"
ETH_GAS_STATION_GAS_ENDPOINT = f"{ETH_GAS_STATION_API_BASE_URL}/json/ethgasAPI.json"
COINGECKO_ETH_USD_PRICE_URL = (
    "https://api.coingecko.com/api/v3/simple/price?ids=ethereum&vs_currencies=usd"
)

ETHERSCAN_ROOT_URL = "https://etherscan.io"
RINKEBY_ETHERSCAN_ROOT_URL = "https://rinkeby.etherscan.io"
TRUSTWALLET_TOKEN_ICON_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum/assets"
    "/{address}/logo.png"
)
