from typing import Any

from ethunits.exceptions.base import EthUnitsValueError


class FormatError(EthUnitsValueError):
    """
    Raised when an address cannot be normalized to its checksummed form.
    """

    def __init__(self, address: object) -> None:
        self.address = address
        super().__init__(message=f"Invalid address format: {address!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.address,)
