import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, HttpUrl, PositiveFloat
from pydantic_settings import BaseSettings, SettingsConfigDict

from ethunits.constants import (
    COINGECKO_ETH_USD_PRICE_URL,
    ETH_GAS_STATION_GAS_ENDPOINT,
    ETHERSCAN_ROOT_URL,
    RINKEBY_ETHERSCAN_ROOT_URL,
    TRUSTWALLET_TOKEN_ICON_URL_TEMPLATE,
    ChainId,
)
from ethunits.logging import logger

CONFIG_DIR = Path.home() / ".config" / "ethunits"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class OracleSettings(BaseModel):
    gas_station_url: HttpUrl = HttpUrl(ETH_GAS_STATION_GAS_ENDPOINT)
    eth_usd_price_url: HttpUrl = HttpUrl(COINGECKO_ETH_USD_PRICE_URL)
    # Total time allowed for a single request, in seconds
    timeout: PositiveFloat = 10.0


class ExplorerSettings(BaseModel):
    default_root_url: HttpUrl = HttpUrl(ETHERSCAN_ROOT_URL)
    root_urls: dict[int, HttpUrl] = {ChainId.RINKEBY.value: HttpUrl(RINKEBY_ETHERSCAN_ROOT_URL)}
    token_icon_url_template: str = TRUSTWALLET_TOKEN_ICON_URL_TEMPLATE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ETHUNITS_",
        env_nested_delimiter="__",
    )

    oracles: OracleSettings = OracleSettings()
    explorer: ExplorerSettings = ExplorerSettings()


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path | None = None) -> Path:
    """
    Write the configuration as TOML, creating the parent directory if necessary. The default
    location is `~/.config/ethunits/config.toml`.
    """

    if config_path is None:
        config_path = CONFIG_FILE

    if not config_path.parent.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created a configuration directory at {config_path.parent}.")

    config_path.write_text(
        tomlkit.dumps(
            # JSON mode stringifies URLs and the integer chain ID keys, which TOML requires
            config.model_dump(mode="json"),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")
    return config_path


if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
    logger.debug(f"Loaded configuration from {CONFIG_FILE}.")
else:
    settings = Settings()
