"""Vehicle catalog entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vehicle:
    """A vehicle offered in the catalog.

    Attributes:
        make: Manufacturer, e.g. ``"Mazda"``.
        line: Model line, e.g. ``"3"``.
        year: Model year as loaded, e.g. ``"2019"``. Must parse as an integer.
        price: Commercial price used as the tax base. Must be positive.
        image_ref: Image file name or reference for presentation layers.
    """

    make: str
    line: str
    year: str
    price: float
    image_ref: str

    def __post_init__(self) -> None:
        if not self.price > 0:
            raise ValueError(f"price must be positive, got {self.price}")
        try:
            int(self.year)
        except ValueError:
            raise ValueError(f"year must be an integer, got {self.year!r}") from None

    @property
    def year_value(self) -> int:
        """Model year as an integer."""
        return int(self.year)
