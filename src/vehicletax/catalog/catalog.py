"""Ordered vehicle catalog with a movable cursor."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np
from numpy.typing import NDArray

from vehicletax.catalog.vehicle import Vehicle
from vehicletax.utils.exceptions import NavigationError, PreconditionError


class VehicleCatalog:
    """Fixed, ordered sequence of vehicles plus a cursor.

    The vehicle sequence never changes after construction and keeps load
    order. The cursor is the only mutable state: it starts at 0 and moves
    through :meth:`first`, :meth:`previous`, :meth:`next`, :meth:`last` and
    :meth:`select`. Searches never move it.

    A catalog built directly may be empty; every operation that needs a
    vehicle then raises :class:`PreconditionError`.
    """

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        self._vehicles: tuple[Vehicle, ...] = tuple(vehicles)
        self._position = 0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self._vehicles)

    def __repr__(self) -> str:
        return f"VehicleCatalog(n_vehicles={len(self._vehicles)}, position={self._position})"

    @property
    def position(self) -> int:
        """Index of the current vehicle."""
        return self._position

    @property
    def at_first(self) -> bool:
        """True when :meth:`first` and :meth:`previous` would fail."""
        return self._position == 0

    @property
    def at_last(self) -> bool:
        """True when :meth:`next` and :meth:`last` would fail."""
        return self._position == len(self._vehicles) - 1

    def _require_vehicles(self, operation: str) -> None:
        if not self._vehicles:
            raise PreconditionError(f"{operation} requires a non-empty catalog")

    def current(self) -> Vehicle:
        """Return the vehicle under the cursor."""
        self._require_vehicles("current")
        return self._vehicles[self._position]

    # --- Navigation ---

    def first(self) -> Vehicle:
        """Move to the first vehicle and return it.

        Raises:
            NavigationError: If the cursor is already on the first vehicle.
        """
        with self._lock:
            self._require_vehicles("first")
            if self._position == 0:
                raise NavigationError("Already at the first vehicle")
            self._position = 0
            return self.current()

    def previous(self) -> Vehicle:
        """Move one vehicle back and return it.

        Raises:
            NavigationError: If the cursor is on the first vehicle.
        """
        with self._lock:
            self._require_vehicles("previous")
            if self._position == 0:
                raise NavigationError("At the first vehicle, there is no previous one")
            self._position -= 1
            return self.current()

    def next(self) -> Vehicle:
        """Move one vehicle forward and return it.

        Raises:
            NavigationError: If the cursor is on the last vehicle.
        """
        with self._lock:
            self._require_vehicles("next")
            if self._position == len(self._vehicles) - 1:
                raise NavigationError("At the last vehicle, there is no next one")
            self._position += 1
            return self.current()

    def last(self) -> Vehicle:
        """Move to the last vehicle and return it.

        Raises:
            NavigationError: If the cursor is already on the last vehicle.
        """
        with self._lock:
            self._require_vehicles("last")
            if self._position == len(self._vehicles) - 1:
                raise NavigationError("Already at the last vehicle")
            self._position = len(self._vehicles) - 1
            return self.current()

    def select(self, vehicle: Vehicle) -> Vehicle:
        """Move the cursor onto ``vehicle`` and return it.

        The vehicle is matched by identity first and then by equality; the
        first matching position wins. Meant for relocating onto a search
        result, which the search methods do not do themselves.

        Raises:
            PreconditionError: If ``vehicle`` is not in the catalog.
        """
        with self._lock:
            for index, candidate in enumerate(self._vehicles):
                if candidate is vehicle:
                    self._position = index
                    return candidate
            for index, candidate in enumerate(self._vehicles):
                if candidate == vehicle:
                    self._position = index
                    return candidate
        raise PreconditionError(f"{vehicle.make} {vehicle.line} is not in the catalog")

    # --- Searches (cursor unchanged) ---

    def prices(self) -> NDArray[np.floating[Any]]:
        """Prices of all vehicles in load order, shape (n_vehicles,)."""
        return np.array([v.price for v in self._vehicles], dtype=float)

    def find_most_expensive(self) -> Vehicle | None:
        """Return the vehicle with the highest price.

        Ties go to the vehicle loaded first. Only prices above 0 qualify, so
        ``None`` is returned when no vehicle has a positive price.
        """
        if not self._vehicles:
            return None
        prices = self.prices()
        index = int(np.argmax(prices))
        if prices[index] <= 0:
            return None
        return self._vehicles[index]

    def find_first_by_make(self, make: str) -> Vehicle | None:
        """Return the vehicle whose make matches ``make``, ignoring case.

        When several vehicles match, the one loaded LAST is returned.
        """
        wanted = make.casefold()
        found = None
        for vehicle in self._vehicles:
            if vehicle.make.casefold() == wanted:
                found = vehicle
        return found

    def find_by_line(self, line: str) -> Vehicle | None:
        """Return the vehicle whose line matches ``line``, ignoring case.

        Same rule as :meth:`find_first_by_make`: the last match wins.
        """
        wanted = line.casefold()
        found = None
        for vehicle in self._vehicles:
            if vehicle.line.casefold() == wanted:
                found = vehicle
        return found

    def find_oldest(self) -> Vehicle:
        """Return the vehicle with the smallest model year (first on ties)."""
        self._require_vehicles("find_oldest")
        years = np.array([v.year_value for v in self._vehicles])
        return self._vehicles[int(np.argmin(years))]

    def average_price(self) -> float:
        """Arithmetic mean of all prices."""
        self._require_vehicles("average_price")
        return float(np.mean(self.prices()))
