"""Shared test fixtures."""

from __future__ import annotations

import pytest

from vehicletax.catalog.catalog import VehicleCatalog
from vehicletax.catalog.vehicle import Vehicle
from vehicletax.core.calculator import TaxCalculator
from vehicletax.taxes.brackets import TaxBracket


@pytest.fixture
def vehicles() -> list[Vehicle]:
    """Small catalog with two vehicles of the same make."""
    return [
        Vehicle("Mazda", "2", "2016", 45_000_000.0, "mazda2.jpg"),
        Vehicle("Toyota", "Corolla", "2012", 52_000_000.0, "corolla.jpg"),
        Vehicle("Mazda", "3", "2019", 80_000_000.0, "mazda3.jpg"),
        Vehicle("Kia", "Picanto", "2012", 18_000_000.0, "picanto.jpg"),
    ]


@pytest.fixture
def catalog(vehicles: list[Vehicle]) -> VehicleCatalog:
    return VehicleCatalog(vehicles)


@pytest.fixture
def brackets() -> tuple[TaxBracket, ...]:
    return (
        TaxBracket(0, 30_000_000, 1.5),
        TaxBracket(30_000_000, 70_000_000, 2.5),
        TaxBracket(70_000_000, 200_000_000, 3.5),
    )


@pytest.fixture
def calculator(catalog: VehicleCatalog, brackets: tuple[TaxBracket, ...]) -> TaxCalculator:
    return TaxCalculator(catalog, brackets)
