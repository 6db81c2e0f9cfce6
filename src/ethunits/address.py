import re

from eth_utils.hexadecimal import is_0x_prefixed, is_hex

from ethunits.hex_codec import HEX_PREFIX

_HEX_ADDRESS = re.compile(r"(0x)?[0-9a-f]{40}", re.IGNORECASE)
_DOTTED_NAME = re.compile(r".+\..+")


def add_hex_prefix(value: str) -> str:
    return value if value.startswith(HEX_PREFIX) else f"{HEX_PREFIX}{value}"


def is_hex_address_format(address: str) -> bool:
    """
    Check that the address is 40 hex digits with an optional `0x` prefix, in any letter case.

    The checksum encoded in a mixed-case address is not verified.
    """

    if not is_hex(address):
        return False
    return _HEX_ADDRESS.fullmatch(address) is not None


def is_ens_address_format(address: str) -> bool:
    """
    Check that the address looks like a dotted name, e.g. `vitalik.eth`. The name is not resolved.
    """

    return _DOTTED_NAME.search(address) is not None


def is_hex_string_ignore_prefix(value: str) -> bool:
    prefixed_value = add_hex_prefix(value.strip())
    return is_0x_prefixed(prefixed_value) and is_hex(prefixed_value)


def get_shortened_address(address: str, start: int = 6, end: int = 4) -> str:
    """
    Abbreviate an address for display, e.g. `0x06012c8cf97bead5deae237070f9587f8e7a266d` ->
    `0x0601...266d`.

    The address should be at least `start + end` characters long, shorter inputs produce
    overlapping segments.
    """

    return f"{address[:start]}...{address[-end:]}"
