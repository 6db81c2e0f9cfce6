from typing import Any

from ethunits.exceptions.base import EthUnitsValueError


class ParseError(EthUnitsValueError):
    """
    Raised when a value cannot be interpreted as a decimal or hex amount.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(message=f"Could not parse {value!r} as an amount")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.value,)
