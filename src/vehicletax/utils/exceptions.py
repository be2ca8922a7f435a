"""Custom exceptions for vehicletax."""

from __future__ import annotations


class VehicleTaxError(Exception):
    """Base exception for vehicletax."""


class LoadError(VehicleTaxError):
    """Vehicle or bracket data could not be read or parsed."""


class NavigationError(VehicleTaxError):
    """The catalog cursor is already at the requested boundary."""


class PreconditionError(VehicleTaxError):
    """Operation called on a catalog or bracket table that cannot satisfy it."""
