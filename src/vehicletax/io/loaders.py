"""Readers for vehicle files and bracket tables.

Vehicle files hold a record count on the first line followed by one
``make,line,year,price,image_ref`` record per line. Bracket tables come in
two shapes: a key/value properties file (``numero.rangos`` plus one
``rangoN=lower,upper,rate`` entry per bracket) or a YAML file with a
``brackets`` list of ``[lower, upper, rate]`` triples.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import yaml

from vehicletax.catalog.catalog import VehicleCatalog
from vehicletax.catalog.vehicle import Vehicle
from vehicletax.io.yaml_loader import load_package_yaml, load_yaml
from vehicletax.taxes.brackets import TaxBracket
from vehicletax.utils.exceptions import LoadError

logger = logging.getLogger(__name__)

BRACKET_COUNT_KEY = "numero.rangos"
BRACKET_KEY_PREFIX = "rango"
YAML_SUFFIXES = frozenset({".yaml", ".yml"})
_PROPERTY_LINE = re.compile(r"(?P<key>[^=:\s]+)\s*[=:]?\s*(?P<value>.*)")


def _read_text(path: Path, what: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise LoadError(f"Could not read {what} from {path}: {exc}") from exc


# --- Vehicles ---


def parse_vehicle_record(record: str) -> Vehicle:
    """Parse one ``make,line,year,price,image_ref`` line.

    Raises:
        LoadError: If a field is missing, the price or year is not a number,
            or the price is not positive.
    """
    fields = [f.strip() for f in record.split(",")]
    if len(fields) < 5:
        raise LoadError(f"Vehicle record needs 5 fields, got {len(fields)}: {record!r}")
    make, line, year, price_text, image_ref = fields[:5]
    try:
        price = float(price_text)
    except ValueError as exc:
        raise LoadError(f"Vehicle record has a malformed number: {record!r}") from exc
    try:
        return Vehicle(make=make, line=line, year=year, price=price, image_ref=image_ref)
    except ValueError as exc:
        raise LoadError(f"Invalid vehicle record {record!r}: {exc}") from exc


def parse_vehicles(lines: Sequence[str]) -> VehicleCatalog:
    """Build a catalog from the lines of a vehicle file.

    Lines past the announced record count are ignored.

    Raises:
        LoadError: If the count is missing or unparsable, is below 1, or
            fewer records than announced are present.
    """
    if not lines:
        raise LoadError("Vehicle data is empty; expected a record count")
    try:
        count = int(lines[0].strip())
    except ValueError as exc:
        raise LoadError(f"Vehicle count is not an integer: {lines[0]!r}") from exc
    if count < 1:
        raise LoadError(f"Vehicle count must be at least 1, got {count}")
    records = lines[1 : count + 1]
    if len(records) < count:
        raise LoadError(f"Expected {count} vehicle records, found {len(records)}")
    return VehicleCatalog(parse_vehicle_record(record) for record in records)


def load_vehicles(path: Path) -> VehicleCatalog:
    """Load a vehicle catalog from a file.

    Raises:
        LoadError: If the file cannot be read or is malformed.
    """
    catalog = parse_vehicles(_read_text(path, "vehicles").splitlines())
    logger.debug("Loaded %d vehicles from %s", len(catalog), path)
    return catalog


# --- Brackets ---


def parse_properties(text: str) -> dict[str, str]:
    """Parse key/value properties text.

    Blank lines and lines starting with ``#`` or ``!`` are skipped. The key
    ends at the first ``=``, ``:`` or whitespace character; whitespace around
    a single ``=`` or ``:`` separator is dropped, so ``rango1=0,10,1``,
    ``rango1: 0,10,1`` and ``rango1 0,10,1`` are all the same entry.
    """
    properties: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        match = _PROPERTY_LINE.match(line)
        if match is not None:
            properties[match.group("key")] = match.group("value").strip()
    return properties


def _make_bracket(values: Sequence[Any], label: str) -> TaxBracket:
    if len(values) < 3:
        raise LoadError(f"{label} needs lower, upper and rate, got {list(values)!r}")
    try:
        lower, upper, rate = (float(v) for v in values[:3])
    except (TypeError, ValueError) as exc:
        raise LoadError(f"{label} has a malformed number: {list(values)!r}") from exc
    try:
        return TaxBracket(lower_bound=lower, upper_bound=upper, rate_percent=rate)
    except ValueError as exc:
        raise LoadError(f"Invalid {label}: {exc}") from exc


def parse_bracket_properties(properties: dict[str, str]) -> tuple[TaxBracket, ...]:
    """Build a bracket table from parsed properties.

    Raises:
        LoadError: If the count or any ``rangoN`` entry is missing or
            malformed.
    """
    if BRACKET_COUNT_KEY not in properties:
        raise LoadError(f"Missing {BRACKET_COUNT_KEY!r} entry")
    try:
        count = int(properties[BRACKET_COUNT_KEY])
    except ValueError as exc:
        raise LoadError(
            f"{BRACKET_COUNT_KEY!r} is not an integer: {properties[BRACKET_COUNT_KEY]!r}"
        ) from exc

    brackets = []
    for i in range(1, count + 1):
        key = f"{BRACKET_KEY_PREFIX}{i}"
        if key not in properties:
            raise LoadError(f"Missing bracket entry {key!r}")
        brackets.append(_make_bracket(properties[key].split(","), key))
    return tuple(brackets)


def load_brackets_properties(path: Path) -> tuple[TaxBracket, ...]:
    """Load a bracket table from a properties file."""
    brackets = parse_bracket_properties(parse_properties(_read_text(path, "brackets")))
    logger.debug("Loaded %d brackets from %s", len(brackets), path)
    return brackets


def parse_bracket_table(data: Any) -> tuple[TaxBracket, ...]:
    """Build a bracket table from parsed YAML content.

    Raises:
        LoadError: If there is no ``brackets`` list or an entry is malformed.
    """
    if not isinstance(data, dict) or not isinstance(data.get("brackets"), list):
        raise LoadError("Bracket table must be a mapping with a 'brackets' list")
    rows: Iterable[Any] = data["brackets"]
    brackets = []
    for i, row in enumerate(rows, start=1):
        if not isinstance(row, list):
            raise LoadError(f"bracket {i} must be a [lower, upper, rate] list, got {row!r}")
        brackets.append(_make_bracket(row, f"bracket {i}"))
    return tuple(brackets)


def load_brackets_yaml(path: Path) -> tuple[TaxBracket, ...]:
    """Load a bracket table from a YAML file."""
    try:
        data = load_yaml(path)
    except OSError as exc:
        raise LoadError(f"Could not read brackets from {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise LoadError(f"Bracket table {path} is not valid YAML: {exc}") from exc
    brackets = parse_bracket_table(data)
    logger.debug("Loaded %d brackets from %s", len(brackets), path)
    return brackets


def load_package_brackets(relative_path: str) -> tuple[TaxBracket, ...]:
    """Load a bracket table shipped inside the package."""
    try:
        data = load_package_yaml(relative_path)
    except OSError as exc:
        raise LoadError(f"No bundled bracket table at {relative_path}: {exc}") from exc
    return parse_bracket_table(data)


def load_brackets(path: Path) -> tuple[TaxBracket, ...]:
    """Load a bracket table, picking the format from the file suffix."""
    if Path(path).suffix.lower() in YAML_SUFFIXES:
        return load_brackets_yaml(path)
    return load_brackets_properties(path)
