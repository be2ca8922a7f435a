"""CLI entry point for vehicletax."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from vehicletax.catalog.vehicle import Vehicle
from vehicletax.config.defaults import default_config
from vehicletax.config.schema import CalculatorConfig
from vehicletax.core.calculator import TaxCalculator
from vehicletax.io.serialize import dump_payment_summary, load_config
from vehicletax.utils.exceptions import NavigationError, VehicleTaxError

MOVES = ("first", "previous", "next", "last")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_config(
    config_path: Path | None,
    vehicles_path: Path | None,
    brackets_path: Path | None,
) -> CalculatorConfig:
    if config_path is not None:
        config = load_config(config_path.read_text())
    else:
        config = default_config()

    # CLI overrides
    if vehicles_path is not None:
        config = config.model_copy(update={"vehicles_path": vehicles_path})
    if brackets_path is not None:
        config = config.model_copy(update={"brackets_path": brackets_path})
    return config


def _build_calculator(
    config_path: Path | None,
    vehicles_path: Path | None,
    brackets_path: Path | None,
) -> TaxCalculator:
    try:
        return TaxCalculator.from_config(_build_config(config_path, vehicles_path, brackets_path))
    except VehicleTaxError as exc:
        raise click.ClickException(str(exc)) from exc


def _describe(vehicle: Vehicle) -> str:
    return f"{vehicle.make} {vehicle.line} ({vehicle.year}) ${vehicle.price:,.2f}"


data_options = [
    click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, path_type=Path),
        default=None,
        help="Path to JSON config file. Uses the bundled data if not provided.",
    ),
    click.option(
        "--vehicles",
        "vehicles_path",
        type=click.Path(exists=True, path_type=Path),
        default=None,
        help="Vehicle file (overrides the config).",
    ),
    click.option(
        "--brackets",
        "brackets_path",
        type=click.Path(exists=True, path_type=Path),
        default=None,
        help="Bracket .properties or .yaml file (overrides the config).",
    ),
]


def with_data_options(func):  # type: ignore[no-untyped-def]
    for option in reversed(data_options):
        func = option(func)
    return func


@click.group()
@click.version_option(package_name="vehicletax")
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """vehicletax: vehicle registration tax calculator."""
    configure_logging(verbose)


@cli.command()
@with_data_options
@click.option(
    "--move",
    "moves",
    type=click.Choice(MOVES),
    multiple=True,
    help="Cursor moves to make before quoting, in order. Repeatable.",
)
@click.option("--make", default=None, help="Quote the catalog vehicle of this make.")
@click.option("--line", default=None, help="Quote the catalog vehicle of this line.")
@click.option("--most-expensive", is_flag=True, help="Quote the most expensive vehicle.")
@click.option("--oldest", is_flag=True, help="Quote the oldest vehicle.")
@click.option("--early-payment", is_flag=True, help="Apply the early payment discount.")
@click.option("--public-service", is_flag=True, help="Apply the public service discount.")
@click.option("--account-transfer", is_flag=True, help="Apply the account transfer discount.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write the payment summary JSON.",
)
def quote(
    config_path: Path | None,
    vehicles_path: Path | None,
    brackets_path: Path | None,
    moves: tuple[str, ...],
    make: str | None,
    line: str | None,
    most_expensive: bool,
    oldest: bool,
    early_payment: bool,
    public_service: bool,
    account_transfer: bool,
    output_path: Path | None,
) -> None:
    """Compute the registration tax of one vehicle."""
    calculator = _build_calculator(config_path, vehicles_path, brackets_path)

    for move in moves:
        try:
            getattr(calculator, move)()
        except NavigationError as exc:
            click.echo(f"Skipped '{move}': {exc}", err=True)

    try:
        if make is not None:
            target = calculator.find_first_by_make(make)
            if target is None:
                raise click.ClickException(f"No vehicle of make '{make}'")
            calculator.select(target)
        elif line is not None:
            target = calculator.find_by_line(line)
            if target is None:
                raise click.ClickException(f"No vehicle of line '{line}'")
            calculator.select(target)
        elif most_expensive:
            target = calculator.find_most_expensive()
            if target is None:
                raise click.ClickException("No vehicle has a positive price")
            calculator.select(target)
        elif oldest:
            calculator.select(calculator.find_oldest())

        breakdown = calculator.payment_breakdown(early_payment, public_service, account_transfer)
    except VehicleTaxError as exc:
        raise click.ClickException(str(exc)) from exc

    bracket = breakdown.bracket
    click.echo(f"Vehicle: {_describe(breakdown.vehicle)}")
    click.echo(
        f"Bracket: [{bracket.lower_bound:,.0f}, {bracket.upper_bound:,.0f}) "
        f"at {bracket.rate_percent}%"
    )
    click.echo(f"Base payment: ${breakdown.base:,.2f}")
    for name, running_total in breakdown.steps:
        click.echo(f"  after {name}: ${running_total:,.2f}")
    click.echo(f"Total payment: ${breakdown.total:,.2f}")

    if output_path is not None:
        output_path.write_text(dump_payment_summary(breakdown))
        click.echo(f"\nSummary written to {output_path}")


@cli.command(name="list")
@with_data_options
@click.option("--early-payment", is_flag=True, help="Apply the early payment discount.")
@click.option("--public-service", is_flag=True, help="Apply the public service discount.")
@click.option("--account-transfer", is_flag=True, help="Apply the account transfer discount.")
def list_vehicles(
    config_path: Path | None,
    vehicles_path: Path | None,
    brackets_path: Path | None,
    early_payment: bool,
    public_service: bool,
    account_transfer: bool,
) -> None:
    """List every vehicle with its registration tax."""
    calculator = _build_calculator(config_path, vehicles_path, brackets_path)
    try:
        payments = calculator.payments_for_catalog(early_payment, public_service, account_transfer)
        average = calculator.average_price()
    except VehicleTaxError as exc:
        raise click.ClickException(str(exc)) from exc

    for vehicle, payment in zip(calculator.catalog, payments):
        click.echo(f"{_describe(vehicle)}: ${payment:,.2f}")
    click.echo(f"\nAverage price: ${average:,.2f}")


if __name__ == "__main__":
    cli()
