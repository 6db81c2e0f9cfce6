"""
Gas price and ETH/USD price lookups from external HTTP endpoints.

Each lookup makes a single request. Failures are not retried here, callers wanting retries or
tighter timeouts should wrap these coroutines with their own policy.
"""

from typing import Any

import aiohttp
import pydantic

from ethunits import config
from ethunits.exceptions import NetworkError
from ethunits.logging import logger
from ethunits.units import gas_station_price_to_wei


class GasStationResponse(pydantic.BaseModel):
    # Gas station prices are quoted in tenths of a gwei
    fast: int | pydantic.FiniteFloat


class UsdQuote(pydantic.BaseModel):
    usd: float | None = None


class SimplePriceResponse(pydantic.BaseModel):
    ethereum: UsdQuote | None = None


async def _fetch_json(url: str, http_session: aiohttp.ClientSession | None) -> Any:
    close_session_after_request = http_session is None

    session = (
        aiohttp.ClientSession(
            raise_for_status=True,
            timeout=aiohttp.ClientTimeout(total=config.settings.oracles.timeout),
        )
        if http_session is None
        else http_session
    )

    logger.debug(f"Fetching {url}")
    try:
        async with session.get(url) as resp:
            resp.raise_for_status()
            return await resp.json(
                # Some endpoints return an invalid MIME type, so use None to bypass the check in
                # the `json` method
                content_type=None,
            )
    except (aiohttp.ClientError, TimeoutError, ValueError) as exc:
        raise NetworkError(error=str(exc) or type(exc).__name__, url=url) from exc
    finally:
        if close_session_after_request:
            await session.close()


async def get_gas_price(http_session: aiohttp.ClientSession | None = None) -> int:
    """
    Fetch the "fast" gas price from the gas station endpoint, returned in wei.
    """

    url = str(config.settings.oracles.gas_station_url)
    payload = await _fetch_json(url=url, http_session=http_session)

    try:
        gas_info = GasStationResponse.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise NetworkError(error="Malformed gas station response", url=url) from exc

    gas_price_wei = gas_station_price_to_wei(gas_info.fast)
    logger.debug(f"Gas station price {gas_info.fast} -> {gas_price_wei} wei")
    return gas_price_wei


async def get_eth_price_in_usd(http_session: aiohttp.ClientSession | None = None) -> float | None:
    """
    Fetch the ETH price in USD. Returns `None` if the response does not include a quote.
    """

    url = str(config.settings.oracles.eth_usd_price_url)
    payload = await _fetch_json(url=url, http_session=http_session)

    try:
        price = SimplePriceResponse.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise NetworkError(error="Malformed price response", url=url) from exc

    if price.ethereum is None:
        return None
    return price.ethereum.usd
