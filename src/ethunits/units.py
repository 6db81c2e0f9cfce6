"""
Conversion of amounts between decimal "unit" form (e.g. 1.5 ether) and integer "base unit" form
(e.g. 1500000000000000000 wei).

All arithmetic is exact. Scaling by a power of ten only moves the decimal exponent, and
integrality is decided from the digit tuple, so the default `decimal` context precision never
applies. Precision is only lost where a function explicitly rounds.
"""

from decimal import Decimal
from typing import cast

from ethunits.constants import DEFAULT_ERC20_TOKEN_DECIMALS, GWEI_DECIMALS
from ethunits.exceptions import InvalidDecimalsError, ParseError, PrecisionError
from ethunits.hex_codec import convert_amount_to_big_number, is_integral
from ethunits.types import AmountLike
from ethunits.validation import validate_decimals


def _scale(amount: Decimal, exponent: int) -> Decimal:
    """
    Multiply `amount` by 10**exponent without rounding.
    """

    sign, digits, amount_exponent = amount.as_tuple()
    return Decimal((sign, digits, cast("int", amount_exponent) + exponent))


def _round_half_up(amount: Decimal) -> int:
    """
    Round to the nearest integer, resolving ties away from zero (2.5 -> 3, -2.5 -> -3).
    """

    if amount.adjusted() < -1:
        # |amount| < 0.1
        return 0

    numerator, denominator = amount.as_integer_ratio()
    quotient, remainder = divmod(abs(numerator), denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return -quotient if numerator < 0 else quotient


def to_base_unit_amount(amount: AmountLike, decimals: int) -> int:
    """
    Convert a unit amount to base units by multiplying by 10**decimals.

    Raises `PrecisionError` if the amount has more decimal places than `decimals` allows. The
    result is never rounded, use `to_nearest_base_unit_amount` for that.
    """

    decimals = validate_decimals(decimals)

    base_unit_amount = _scale(convert_amount_to_big_number(amount), decimals)
    if not is_integral(base_unit_amount):
        raise PrecisionError(amount=amount, decimals=decimals)
    return int(base_unit_amount)


def to_nearest_base_unit_amount(amount: AmountLike, decimals: int) -> int:
    """
    Convert a unit amount to base units, rounding half-up to the nearest integer.
    """

    decimals = validate_decimals(decimals)
    return _round_half_up(_scale(convert_amount_to_big_number(amount), decimals))


def to_unit_amount(base_unit_amount: AmountLike, decimals: int) -> Decimal:
    """
    Convert a base unit amount to unit form by dividing by 10**decimals.

    Dividing by a power of ten always has an exact decimal result, so this never fails on precision
    grounds.
    """

    decimals = validate_decimals(decimals)
    return _scale(convert_amount_to_big_number(base_unit_amount), -decimals)


def to_base_unit_amount_safe(
    amount: AmountLike | None,
    decimals: AmountLike | None,
) -> int | None:
    """
    Convert to base units, returning `None` if either the amount or the decimals are missing.

    `decimals` may be given as any integral amount (e.g. "18" or Decimal(18)). Errors from
    `to_base_unit_amount` are not suppressed.
    """

    if amount is None or decimals is None:
        return None

    try:
        integral_decimals = convert_amount_to_big_number(decimals)
    except ParseError:
        raise InvalidDecimalsError(decimals=decimals) from None
    if not is_integral(integral_decimals):
        raise InvalidDecimalsError(decimals=decimals)

    return to_base_unit_amount(amount, int(integral_decimals))


def convert_raw_amount_to_decimal_format(
    value: AmountLike,
    decimals: int = DEFAULT_ERC20_TOKEN_DECIMALS,
    max_formatted_decimals: int = 4,
) -> str:
    """
    Format a base unit amount for display, e.g. 1234567890000000000000 -> "1,234.5679".

    The unit amount is rounded half-up to `max_formatted_decimals` places and always rendered with
    exactly that many fractional digits.
    """

    max_formatted_decimals = validate_decimals(max_formatted_decimals)

    rounded = _round_half_up(_scale(to_unit_amount(value, decimals), max_formatted_decimals))
    return f"{_scale(Decimal(rounded), -max_formatted_decimals):,.{max_formatted_decimals}f}"


def convert_gwei_to_eth(gwei_amount: AmountLike) -> Decimal:
    return to_unit_amount(gwei_amount, GWEI_DECIMALS)


def convert_gwei_to_wei(gwei_amount: AmountLike) -> int:
    return to_nearest_base_unit_amount(gwei_amount, GWEI_DECIMALS)


def convert_wei_to_gwei(wei_amount: AmountLike) -> int:
    return _round_half_up(to_unit_amount(wei_amount, GWEI_DECIMALS))


def gas_station_price_to_wei(fast: AmountLike) -> int:
    """
    Convert a gas station price, quoted in tenths of a gwei, to wei.
    """

    gwei = _scale(convert_amount_to_big_number(fast), -1)
    return to_base_unit_amount(gwei, GWEI_DECIMALS)
