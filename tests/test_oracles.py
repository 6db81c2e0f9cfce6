from typing import Any

import aiohttp
import pytest

from ethunits import oracles
from ethunits.constants import COINGECKO_ETH_USD_PRICE_URL, ETH_GAS_STATION_GAS_ENDPOINT
from ethunits.exceptions import NetworkError
from ethunits.oracles import get_eth_price_in_usd, get_gas_price


class FakeResponse:
    """
    Stands in for `aiohttp.ClientResponse` inside an `async with session.get(...)` block.
    """

    def __init__(
        self,
        payload: Any = None,
        status_error: Exception | None = None,
        json_error: Exception | None = None,
    ) -> None:
        self.payload = payload
        self.status_error = status_error
        self.json_error = json_error

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    def raise_for_status(self) -> None:
        if self.status_error is not None:
            raise self.status_error

    async def json(self, content_type: str | None = "application/json") -> Any:
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """
    Records requested URLs and returns a canned response, or raises a canned error.
    """

    def __init__(
        self,
        response: FakeResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.requested_urls: list[str] = []
        self.closed = False

    def get(self, url: str) -> FakeResponse:
        self.requested_urls.append(url)
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response

    async def close(self) -> None:
        self.closed = True


async def test_get_gas_price():
    session = FakeSession(FakeResponse({"fast": 450, "average": 300}))

    assert await get_gas_price(http_session=session) == 45 * 10**9
    assert session.requested_urls == [ETH_GAS_STATION_GAS_ENDPOINT]
    # A session provided by the caller is left open
    assert session.closed is False


async def test_get_gas_price_fractional_gwei():
    session = FakeSession(FakeResponse({"fast": 452.5}))
    assert await get_gas_price(http_session=session) == 45_250_000_000


async def test_get_gas_price_malformed_response():
    session = FakeSession(FakeResponse({"slow": 100}))
    with pytest.raises(NetworkError, match="Malformed gas station response"):
        await get_gas_price(http_session=session)


@pytest.mark.parametrize("fast", [float("nan"), float("inf"), float("-inf")])
async def test_get_gas_price_non_finite_response(fast: float):
    session = FakeSession(FakeResponse({"fast": fast}))
    with pytest.raises(NetworkError, match="Malformed gas station response"):
        await get_gas_price(http_session=session)


async def test_get_gas_price_connection_error():
    error = aiohttp.ClientConnectionError("Connection refused")
    session = FakeSession(error=error)

    with pytest.raises(NetworkError, match="Connection refused") as exc_info:
        await get_gas_price(http_session=session)

    assert exc_info.value.__cause__ is error
    assert exc_info.value.url == ETH_GAS_STATION_GAS_ENDPOINT
    # Failures are not retried
    assert len(session.requested_urls) == 1


async def test_get_gas_price_bad_status():
    session = FakeSession(FakeResponse(status_error=aiohttp.ClientPayloadError("Bad payload")))
    with pytest.raises(NetworkError, match="Bad payload"):
        await get_gas_price(http_session=session)


async def test_get_gas_price_invalid_json():
    session = FakeSession(FakeResponse(json_error=ValueError("Expecting value")))
    with pytest.raises(NetworkError, match="Expecting value"):
        await get_gas_price(http_session=session)


async def test_get_gas_price_timeout():
    session = FakeSession(error=TimeoutError())
    with pytest.raises(NetworkError, match="TimeoutError"):
        await get_gas_price(http_session=session)


async def test_session_created_and_closed_when_not_provided(monkeypatch: pytest.MonkeyPatch):
    created_sessions: list[FakeSession] = []
    session_kwargs: dict[str, Any] = {}

    def fake_client_session(**kwargs: Any) -> FakeSession:
        session_kwargs.update(kwargs)
        session = FakeSession(FakeResponse({"fast": 100}))
        created_sessions.append(session)
        return session

    monkeypatch.setattr(oracles.aiohttp, "ClientSession", fake_client_session)

    assert await get_gas_price() == 10 * 10**9
    assert len(created_sessions) == 1
    assert created_sessions[0].closed is True
    assert session_kwargs["raise_for_status"] is True
    assert session_kwargs["timeout"].total == 10.0


async def test_session_closed_after_error(monkeypatch: pytest.MonkeyPatch):
    session = FakeSession(error=aiohttp.ClientConnectionError("Connection reset"))
    monkeypatch.setattr(oracles.aiohttp, "ClientSession", lambda **_: session)

    with pytest.raises(NetworkError):
        await get_eth_price_in_usd()
    assert session.closed is True


async def test_get_eth_price_in_usd():
    session = FakeSession(FakeResponse({"ethereum": {"usd": 1834.52}}))

    assert await get_eth_price_in_usd(http_session=session) == 1834.52
    assert session.requested_urls == [COINGECKO_ETH_USD_PRICE_URL]


@pytest.mark.parametrize("payload", [{}, {"ethereum": {}}, {"ethereum": None}])
async def test_get_eth_price_in_usd_missing_quote(payload: dict[str, Any]):
    session = FakeSession(FakeResponse(payload))
    assert await get_eth_price_in_usd(http_session=session) is None


async def test_get_eth_price_in_usd_malformed_response():
    session = FakeSession(FakeResponse({"ethereum": {"usd": "a lot"}}))
    with pytest.raises(NetworkError, match="Malformed price response"):
        await get_eth_price_in_usd(http_session=session)
