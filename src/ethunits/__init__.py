from .checksum_cache import get_checksum_address
from .config import settings
from .logging import logger
from .version import __version__

# isort: split

from .address import (
    add_hex_prefix,
    get_shortened_address,
    is_ens_address_format,
    is_hex_address_format,
    is_hex_string_ignore_prefix,
)
from .explorer import (
    get_etherscan_link_for_account,
    get_etherscan_link_from_tx_hash,
    get_etherscan_root_url_for_chain,
    get_url_for_fallback_token_icon,
)
from .functions import array_to_map_with_id
from .hex_codec import convert_amount_to_big_number, encode_amount_as_hex_string
from .oracles import get_eth_price_in_usd, get_gas_price
from .units import (
    convert_gwei_to_eth,
    convert_gwei_to_wei,
    convert_raw_amount_to_decimal_format,
    convert_wei_to_gwei,
    gas_station_price_to_wei,
    to_base_unit_amount,
    to_base_unit_amount_safe,
    to_nearest_base_unit_amount,
    to_unit_amount,
)

__all__ = (
    "__version__",
    "add_hex_prefix",
    "address",
    "array_to_map_with_id",
    "constants",
    "convert_amount_to_big_number",
    "convert_gwei_to_eth",
    "convert_gwei_to_wei",
    "convert_raw_amount_to_decimal_format",
    "convert_wei_to_gwei",
    "encode_amount_as_hex_string",
    "exceptions",
    "explorer",
    "gas_station_price_to_wei",
    "get_checksum_address",
    "get_eth_price_in_usd",
    "get_etherscan_link_for_account",
    "get_etherscan_link_from_tx_hash",
    "get_etherscan_root_url_for_chain",
    "get_gas_price",
    "get_shortened_address",
    "get_url_for_fallback_token_icon",
    "hex_codec",
    "is_ens_address_format",
    "is_hex_address_format",
    "is_hex_string_ignore_prefix",
    "logger",
    "oracles",
    "settings",
    "to_base_unit_amount",
    "to_base_unit_amount_safe",
    "to_nearest_base_unit_amount",
    "to_unit_amount",
    "units",
    "validation",
)
