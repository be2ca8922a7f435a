"""Protocols for the data sources a calculator is built from."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from vehicletax.catalog.catalog import VehicleCatalog
from vehicletax.taxes.brackets import TaxBracket


class VehicleLoader(Protocol):
    """Builds a vehicle catalog from a source."""

    def __call__(self, source: Path, /) -> VehicleCatalog:
        """Read every vehicle record in ``source``.

        Raises:
            LoadError: If the source is unreadable, the count is unparsable
                or any record is malformed.
        """
        ...


class BracketLoader(Protocol):
    """Builds a bracket table from a source."""

    def __call__(self, source: Path, /) -> tuple[TaxBracket, ...]:
        """Read every bracket in ``source``, keeping table order.

        Raises:
            LoadError: If the source is unreadable or any numeric field is
                unparsable.
        """
        ...
