from typing import Any


class EthUnitsError(Exception):
    """
    Root of every exception raised by ethunits.

    Conversion and parsing failures derive from `EthUnitsValueError`, lookups against external
    price and gas endpoints derive from `ExternalServiceError`. Catch the narrow class when the
    failure is recoverable, e.g. falling back to rounding on a precision failure:

    ```
    try:
        wei = ethunits.to_base_unit_amount(amount, 18)
    except PrecisionError:
        wei = ethunits.to_nearest_base_unit_amount(amount, 18)
    ```

    The human-readable description is available as `.message`.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class EthUnitsValueError(EthUnitsError):
    """
    Raised when an amount, decimals value, or address cannot be used as given.
    """


class ExternalServiceError(EthUnitsError):
    """
    Raised when a gas or price endpoint fails or returns an unusable payload.
    """

    def __init__(self, error: str) -> None:
        self.error = error
        super().__init__(message=f"External service error: {error}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.error,)
