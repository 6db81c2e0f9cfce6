import functools

from cchecksum import to_checksum_address
from eth_typing import ChecksumAddress, HexAddress

from ethunits.address import is_hex_address_format
from ethunits.exceptions import FormatError


@functools.lru_cache(maxsize=512)
def get_checksum_address(address: HexAddress | str) -> ChecksumAddress:
    """
    Normalize an address to its EIP-55 checksummed form.

    Raises `FormatError` if the input is not a 20-byte hex address.
    """

    if not isinstance(address, str) or not is_hex_address_format(address):
        raise FormatError(address=address)

    try:
        return to_checksum_address(address)
    except ValueError:
        raise FormatError(address=address) from None
