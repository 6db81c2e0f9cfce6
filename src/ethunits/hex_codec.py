"""
Conversion of amounts to and from sign-prefixed hex strings.

Hex strings carry the sign as a text prefix (`-0xff`) rather than as a two's complement bit
pattern, so there is no fixed width and any integer can be represented.
"""

import decimal
import re
from decimal import Decimal
from typing import cast

from ethunits.exceptions import ParseError, PrecisionError
from ethunits.types import AmountLike

HEX_PREFIX = "0x"
NEGATIVE_HEX_PREFIX = "-0x"

_HEX_MAGNITUDE = re.compile(r"[0-9a-fA-F]+")


def _parse_decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except decimal.InvalidOperation:
        raise ParseError(value=value) from None


def _parse_hex(value: str) -> Decimal:
    negative = value.startswith(NEGATIVE_HEX_PREFIX)
    magnitude = value.removeprefix("-").removeprefix(HEX_PREFIX)
    if _HEX_MAGNITUDE.fullmatch(magnitude) is None:
        raise ParseError(value=value)

    number = int(magnitude, 16)
    return Decimal(-number if negative else number)


def is_integral(amount: Decimal) -> bool:
    """
    Check whether a finite `Decimal` has no fractional part.

    Only the digit tuple is inspected, so a value like `1e-100000000` is rejected without building
    a power of ten the size of its exponent.
    """

    _, digits, exponent = amount.as_tuple()
    exponent = cast("int", exponent)
    if exponent >= 0 or not any(digits):
        return True

    trailing_zeros = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    return trailing_zeros >= -exponent


def convert_amount_to_big_number(value: AmountLike | None) -> Decimal:
    """
    Convert an integer, float, decimal string, or `0x`/`-0x` prefixed hex string to an
    arbitrary-precision `Decimal`.

    A missing value (`None` or an empty string) is treated as zero. Floats are converted through
    their shortest round-trip representation, so `1.1` becomes `Decimal("1.1")` instead of its
    binary expansion.

    Raises `ParseError` for malformed or non-finite input.
    """

    match value:
        case None | "":
            return Decimal(0)
        case bool():
            raise ParseError(value=value)
        case int():
            return Decimal(value)
        case Decimal():
            number = value
        case float():
            number = _parse_decimal(repr(value))
        case str() if value.startswith((HEX_PREFIX, NEGATIVE_HEX_PREFIX)):
            return _parse_hex(value)
        case str():
            number = _parse_decimal(value)
        case _:
            raise ParseError(value=value)

    if not number.is_finite():
        raise ParseError(value=value)
    return number


def encode_amount_as_hex_string(value: AmountLike | None) -> str:
    """
    Encode an integral amount as a lowercase hex string, e.g. `255 -> "0xff"` and
    `-255 -> "-0xff"`. Zero is encoded as `0x0`.

    Raises `PrecisionError` if the amount has a fractional part.
    """

    number = convert_amount_to_big_number(value)
    if not is_integral(number):
        raise PrecisionError(amount=value, decimals=0)

    numerator = int(number)
    if numerator < 0:
        return f"{NEGATIVE_HEX_PREFIX}{-numerator:x}"
    return f"{HEX_PREFIX}{numerator:x}"
