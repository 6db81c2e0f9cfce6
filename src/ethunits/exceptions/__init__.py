from ethunits.exceptions.address import FormatError
from ethunits.exceptions.base import (
    EthUnitsError,
    EthUnitsValueError,
    ExternalServiceError,
)
from ethunits.exceptions.codec import ParseError
from ethunits.exceptions.conversion import ConversionError, InvalidDecimalsError, PrecisionError
from ethunits.exceptions.fetching import FetchingError, NetworkError

from . import address, codec, conversion, fetching

__all__ = (
    "ConversionError",
    "EthUnitsError",
    "EthUnitsValueError",
    "ExternalServiceError",
    "FetchingError",
    "FormatError",
    "InvalidDecimalsError",
    "NetworkError",
    "ParseError",
    "PrecisionError",
    "address",
    "codec",
    "conversion",
    "fetching",
)
