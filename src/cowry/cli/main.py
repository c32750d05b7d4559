#!/usr/bin/env python3
"""
Main CLI Entry Point for Cowry

Command-line access to formatting, scaling and allocation of money amounts.
Amounts are given in major units ("12.34"); the currency and rounding mode
default to the configured values.
"""

import logging
import os
from collections.abc import Callable

import click

from ..core.config import Config, MoneyDefaults, get_config, reload_config
from ..core.currency import Currency, get_currency
from ..core.errors import MoneyError
from ..core.json_utils import format_json
from ..core.money import Money
from ..core.rounding import RoundingMode
from ..core.serialization import dump_money_list, to_json, to_record

logger = logging.getLogger(__name__)

MODE_CHOICES = [mode.value for mode in RoundingMode]


def _defaults(ctx: click.Context) -> MoneyDefaults:
    config: Config = ctx.obj["config"]
    return config.defaults


def _resolve_currency(ctx: click.Context, code: str | None) -> Currency:
    if code is None:
        return _defaults(ctx).currency
    config: Config = ctx.obj["config"]
    try:
        return get_currency(code, config.currency_catalog())
    except MoneyError as e:
        raise click.ClickException(str(e)) from e


def _resolve_mode(ctx: click.Context, mode: str | None) -> RoundingMode:
    if mode is None:
        return _defaults(ctx).rounding_mode
    return RoundingMode.from_str(mode)


def _parse_amount(value: str, currency: Currency, mode: RoundingMode) -> Money:
    try:
        return Money.from_major(value, currency, mode)
    except MoneyError as e:
        raise click.ClickException(str(e)) from e


def _echo_money(value: Money, as_json: bool) -> None:
    if as_json:
        click.echo(to_json(value))
    else:
        click.echo(str(value))


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Cowry - Fixed-Point Money Toolkit

    Exact minor-unit arithmetic, rounding modes and ratio allocation.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["COWRY_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("cowry").setLevel(logging.DEBUG)

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Default currency: {config.default_currency_code}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from cowry import __author__, __version__

    click.echo(f"Cowry v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj: Config = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Default Currency: {config_obj.default_currency_code}")
    click.echo(f"  Rounding Mode: {config_obj.rounding_mode.value}")
    click.echo(f"  Default Precision: {config_obj.default_precision}")
    click.echo(f"  Currencies File: {config_obj.currencies_file or '(built-in only)'}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.pass_context
def currencies(ctx: click.Context) -> None:
    """List available currencies."""
    config_obj: Config = ctx.obj["config"]
    catalog = config_obj.currency_catalog()

    click.echo(f"{'Code':<6}{'Symbol':<8}Precision")
    for code in sorted(catalog):
        currency = catalog[code]
        click.echo(f"{currency.code:<6}{currency.symbol:<8}{currency.precision}")


@main.command(name="format")
@click.argument("amount")
@click.option("--currency", "currency_code", help="Currency code (default: configured currency)")
@click.option("--display-precision", type=click.IntRange(min=0), help="Decimal places to display")
@click.option("--no-grouping", is_flag=True, help="Omit thousands separators")
@click.option("--mode", type=click.Choice(MODE_CHOICES), help="Rounding mode for display")
@click.pass_context
def format_command(
    ctx: click.Context,
    amount: str,
    currency_code: str | None,
    display_precision: int | None,
    no_grouping: bool,
    mode: str | None,
) -> None:
    """
    Format a major-unit AMOUNT for display.

    Examples:
      cowry format 1234.5 --currency NGN
      cowry format 12.345 --currency USD --display-precision 1
    """
    currency = _resolve_currency(ctx, currency_code)
    rounding = _resolve_mode(ctx, mode)
    value = _parse_amount(amount, currency, rounding)
    try:
        click.echo(value.format(grouping=not no_grouping, display_precision=display_precision, mode=rounding))
    except MoneyError as e:
        raise click.ClickException(str(e)) from e


def _scaling_command(
    name: str, operand: str, help_text: str, operation: Callable[[Money, float, RoundingMode], Money]
) -> click.Command:
    @main.command(name=name, help=help_text)
    @click.argument("amount")
    @click.argument(operand, type=float)
    @click.option("--currency", "currency_code", help="Currency code (default: configured currency)")
    @click.option("--mode", type=click.Choice(MODE_CHOICES), help="Rounding mode (default: configured mode)")
    @click.option("--json", "as_json", is_flag=True, help="Print the result as a JSON record")
    @click.pass_context
    def command(
        ctx: click.Context, amount: str, currency_code: str | None, mode: str | None, as_json: bool, **kwargs
    ) -> None:
        currency = _resolve_currency(ctx, currency_code)
        rounding = _resolve_mode(ctx, mode)
        value = _parse_amount(amount, currency, rounding)
        try:
            result = operation(value, kwargs[operand], rounding)
        except MoneyError as e:
            raise click.ClickException(str(e)) from e

        if ctx.obj.get("verbose"):
            click.echo(f"{value} ({value.amount} minor units) {name} {kwargs[operand]} [{rounding.value}]")
        _echo_money(result, as_json)

    return command


multiply = _scaling_command(
    "multiply", "scalar", "Multiply AMOUNT by SCALAR.", lambda m, s, r: m.multiply(s, r)
)
divide = _scaling_command("divide", "scalar", "Divide AMOUNT by SCALAR.", lambda m, s, r: m.divide(s, r))
percentage = _scaling_command(
    "percentage", "percent", "Take PERCENT percent of AMOUNT.", lambda m, p, r: m.percentage(p, r)
)


@main.command()
@click.argument("amount")
@click.argument("ratios", nargs=-1, required=True, type=int)
@click.option("--currency", "currency_code", help="Currency code (default: configured currency)")
@click.option("--json", "as_json", is_flag=True, help="Print the shares as JSON records")
@click.option("--output", "output_file", type=click.Path(dir_okay=False), help="Write shares to a JSON file")
@click.pass_context
def allocate(
    ctx: click.Context,
    amount: str,
    ratios: tuple[int, ...],
    currency_code: str | None,
    as_json: bool,
    output_file: str | None,
) -> None:
    """
    Allocate AMOUNT across integer RATIOS so the shares sum exactly to AMOUNT.

    Examples:
      cowry allocate 1.00 1 1 1        # $0.34 $0.33 $0.33
      cowry allocate -- -1.00 1 1 1    # negative amounts
      cowry allocate 250 3 7 --currency JPY --json
    """
    currency = _resolve_currency(ctx, currency_code)
    value = _parse_amount(amount, currency, _defaults(ctx).rounding_mode)
    try:
        shares = value.allocate(list(ratios))
    except MoneyError as e:
        raise click.ClickException(str(e)) from e

    if output_file:
        dump_money_list(output_file, shares)
        logger.info("Wrote %d shares to %s", len(shares), output_file)

    if as_json:
        click.echo(format_json([to_record(share) for share in shares]))
        return

    for ratio, share in zip(ratios, shares):
        click.echo(f"{ratio:>6}  {share}")
    click.echo(f"{'total':>6}  {value}")


if __name__ == "__main__":
    main()
