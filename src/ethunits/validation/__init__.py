from ethunits.validation.decimals import ValidatedDecimals, validate_decimals

__all__ = (
    "ValidatedDecimals",
    "validate_decimals",
)
