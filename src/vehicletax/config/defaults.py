"""Default configuration values for vehicletax."""

from __future__ import annotations

from pathlib import Path

from vehicletax.config.schema import CalculatorConfig, DiscountSchedule

PACKAGE_ROOT: Path = Path(__file__).resolve().parent.parent

# Bundled data set
DEFAULT_VEHICLES_PATH: Path = PACKAGE_ROOT / "data" / "vehiculos.txt"
DEFAULT_BRACKETS_TABLE: str = "taxes/tables/brackets_default.yaml"


def default_discounts() -> DiscountSchedule:
    """Discount schedule with the standard percentages and amount."""
    return DiscountSchedule()


def default_config() -> CalculatorConfig:
    """Calculator config for the bundled vehicles and bracket table."""
    return CalculatorConfig(
        vehicles_path=DEFAULT_VEHICLES_PATH,
        discounts=default_discounts(),
    )
