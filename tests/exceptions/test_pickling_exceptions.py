import pickle

import pytest

from ethunits.exceptions import (
    EthUnitsError,
    EthUnitsValueError,
    ExternalServiceError,
    FormatError,
    InvalidDecimalsError,
    NetworkError,
    ParseError,
    PrecisionError,
)


@pytest.mark.parametrize(
    "original_exception",
    [
        PrecisionError(amount="1.23456789", decimals=4),
        InvalidDecimalsError(decimals=-1),
        ParseError(value="0x"),
        FormatError(address="0x1234"),
        NetworkError(error="Connection refused", url="https://ethgasstation.info"),
        NetworkError(error="Connection refused"),
        ExternalServiceError(error="Service unavailable"),
    ],
)
def test_exception_pickling(original_exception: EthUnitsError) -> None:
    """
    Test that exceptions carrying constructor arguments define a `__reduce__` method that allows
    them to be pickled and unpickled correctly.
    """

    unpickled_exception = pickle.loads(pickle.dumps(original_exception))

    assert type(unpickled_exception) is type(original_exception)
    assert unpickled_exception.message == original_exception.message
    assert str(unpickled_exception) == str(original_exception)
    assert vars(unpickled_exception) == vars(original_exception)


def test_precision_error_message() -> None:
    exception = PrecisionError(amount="1.23456789", decimals=4)
    assert exception.amount == "1.23456789"
    assert exception.decimals == 4
    assert exception.message == (
        "Invalid unit amount: 1.23456789 - Too many decimal places for decimals=4"
    )


def test_network_error_message() -> None:
    exception = NetworkError(error="Connection refused", url="https://ethgasstation.info")
    assert exception.error == "Connection refused"
    assert exception.message == (
        "External service error: Connection refused (https://ethgasstation.info)"
    )


def test_exception_hierarchy() -> None:
    for exception_type in (PrecisionError, InvalidDecimalsError, ParseError, FormatError):
        assert issubclass(exception_type, EthUnitsValueError)
        assert issubclass(exception_type, EthUnitsError)

    assert issubclass(NetworkError, ExternalServiceError)
    assert issubclass(NetworkError, EthUnitsError)
