from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from ethunits.exceptions import InvalidDecimalsError

type ValidatedDecimals = Annotated[int, Field(strict=True, ge=0)]

_decimals_adapter: TypeAdapter[int] = TypeAdapter(ValidatedDecimals)


def validate_decimals(decimals: object) -> int:
    """
    Check that `decimals` is a non-negative integer, returning it unchanged.
    """

    try:
        return _decimals_adapter.validate_python(decimals)
    except ValidationError:
        raise InvalidDecimalsError(decimals=decimals) from None
