"""
Exceptions raised by the decimal <-> base unit converter.
"""

from typing import Any

from ethunits.exceptions.base import EthUnitsValueError


class ConversionError(EthUnitsValueError):
    """
    Base exception for unit conversion errors.
    """


class PrecisionError(ConversionError):
    """
    Raised when an exact conversion to base units would leave a fractional remainder.
    """

    def __init__(self, amount: object, decimals: int) -> None:
        self.amount = amount
        self.decimals = decimals
        super().__init__(
            message=f"Invalid unit amount: {amount} - Too many decimal places for {decimals=}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.amount, self.decimals)


class InvalidDecimalsError(ConversionError):
    """
    Raised when a decimals exponent is not a non-negative integer.
    """

    def __init__(self, decimals: object) -> None:
        self.decimals = decimals
        super().__init__(
            message=f"Invalid decimals {decimals!r}, must be a non-negative integer"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.decimals,)
