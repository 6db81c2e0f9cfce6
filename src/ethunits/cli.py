import asyncio
from collections.abc import Callable, Iterator
from contextlib import contextmanager

import click
import tomlkit
from pydantic import TypeAdapter

from ethunits import config
from ethunits.address import (
    get_shortened_address,
    is_ens_address_format,
    is_hex_address_format,
)
from ethunits.checksum_cache import get_checksum_address
from ethunits.constants import DEFAULT_ERC20_TOKEN_DECIMALS
from ethunits.exceptions import EthUnitsError
from ethunits.hex_codec import convert_amount_to_big_number, encode_amount_as_hex_string
from ethunits.oracles import get_eth_price_in_usd, get_gas_price
from ethunits.units import (
    convert_raw_amount_to_decimal_format,
    to_base_unit_amount,
    to_nearest_base_unit_amount,
    to_unit_amount,
)
from ethunits.version import __version__


@contextmanager
def _reraise_for_click() -> Iterator[None]:
    try:
        yield
    except EthUnitsError as exc:
        raise click.ClickException(exc.message or str(exc)) from exc


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


@cli.group("config")
def config_group() -> None:
    """
    Configuration commands
    """


@config_group.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: str) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    config.settings.model_dump(mode="json"),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    config.settings.model_dump(mode="json"),
                ),
            )
        case _:
            ...


@config_group.command("save")
def config_save() -> None:
    """
    Write the current configuration to the configuration file.
    """

    config_path = config.save_config_to_file(config.settings)
    click.echo(f"Configuration saved to {config_path}")


@cli.group()
def convert() -> None:
    """
    Unit conversion commands
    """


@convert.command("to-base")
@click.argument("amount")
@click.option("--decimals", type=int, default=DEFAULT_ERC20_TOKEN_DECIMALS, show_default=True)
@click.option(
    "--nearest",
    is_flag=True,
    help="Round to the nearest base unit instead of rejecting excess decimal places",
)
def convert_to_base(amount: str, decimals: int, nearest: bool) -> None:
    """
    Convert a unit AMOUNT to base units.
    """

    converter: Callable[[str, int], int] = (
        to_nearest_base_unit_amount if nearest else to_base_unit_amount
    )
    with _reraise_for_click():
        click.echo(converter(amount, decimals))


@convert.command("to-unit")
@click.argument("amount")
@click.option("--decimals", type=int, default=DEFAULT_ERC20_TOKEN_DECIMALS, show_default=True)
def convert_to_unit(amount: str, decimals: int) -> None:
    """
    Convert a base unit AMOUNT to units.
    """

    with _reraise_for_click():
        click.echo(f"{to_unit_amount(amount, decimals):f}")


@convert.command("format")
@click.argument("amount")
@click.option("--decimals", type=int, default=DEFAULT_ERC20_TOKEN_DECIMALS, show_default=True)
@click.option("--places", type=int, default=4, show_default=True)
def convert_format(amount: str, decimals: int, places: int) -> None:
    """
    Format a base unit AMOUNT for display.
    """

    with _reraise_for_click():
        click.echo(
            convert_raw_amount_to_decimal_format(
                amount,
                decimals=decimals,
                max_formatted_decimals=places,
            )
        )


@cli.group("hex")
def hex_group() -> None:
    """
    Signed hex encoding commands
    """


@hex_group.command("encode")
@click.argument("value")
def hex_encode(value: str) -> None:
    """
    Encode an integer VALUE as a hex string.
    """

    with _reraise_for_click():
        click.echo(encode_amount_as_hex_string(value))


@hex_group.command("decode")
@click.argument("value")
def hex_decode(value: str) -> None:
    """
    Decode a hex (or decimal) VALUE.
    """

    with _reraise_for_click():
        click.echo(f"{convert_amount_to_big_number(value):f}")


@cli.group()
def address() -> None:
    """
    Address commands
    """


@address.command("check")
@click.argument("value")
def address_check(value: str) -> None:
    """
    Classify an address as a hex address or ENS name, and show its checksummed form.
    """

    if is_hex_address_format(value):
        click.echo("format: hex")
        with _reraise_for_click():
            checksummed = get_checksum_address(value)
        click.echo(f"checksum: {checksummed}")
        click.echo(f"short: {get_shortened_address(checksummed)}")
    elif is_ens_address_format(value):
        click.echo("format: ens")
    else:
        raise click.ClickException(f"{value!r} is not a hex address or ENS name")


@cli.command("gas-price")
def gas_price() -> None:
    """
    Fetch the current fast gas price, in wei.
    """

    with _reraise_for_click():
        click.echo(asyncio.run(get_gas_price()))


@cli.command("eth-price")
def eth_price() -> None:
    """
    Fetch the current ETH price in USD.
    """

    with _reraise_for_click():
        price = asyncio.run(get_eth_price_in_usd())

    if price is None:
        raise click.ClickException("No ETH price available")
    click.echo(price)
