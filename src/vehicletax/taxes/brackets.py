"""Price brackets mapping a half-open price interval to a tax rate."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TaxBracket:
    """Half-open price interval ``[lower_bound, upper_bound)`` and its rate.

    Attributes:
        lower_bound: Smallest price in the bracket (inclusive).
        upper_bound: First price past the bracket (exclusive).
        rate_percent: Tax rate applied to prices in the bracket, e.g. ``1.5``
            for 1.5%.
    """

    lower_bound: float
    upper_bound: float
    rate_percent: float

    def __post_init__(self) -> None:
        if not self.lower_bound < self.upper_bound:
            raise ValueError(
                f"lower_bound ({self.lower_bound}) must be less than "
                f"upper_bound ({self.upper_bound})"
            )
        if not self.rate_percent > 0:
            raise ValueError(f"rate_percent must be positive, got {self.rate_percent}")

    def contains(self, price: float) -> bool:
        """Check if ``price`` falls inside the bracket."""
        return self.lower_bound <= price < self.upper_bound

    def overlaps(self, other: TaxBracket) -> bool:
        """Check if the two intervals share at least one price."""
        return self.lower_bound < other.upper_bound and other.lower_bound < self.upper_bound


def find_bracket(brackets: Iterable[TaxBracket], price: float) -> TaxBracket | None:
    """Return the bracket containing ``price``.

    Every bracket is checked; when several contain the price, the last one
    in table order is returned.
    """
    found = None
    for bracket in brackets:
        if bracket.contains(price):
            found = bracket
    return found


def overlapping_pairs(brackets: Iterable[TaxBracket]) -> list[tuple[int, int]]:
    """Return index pairs ``(i, j)``, ``i < j``, of brackets that overlap."""
    table = list(brackets)
    pairs = []
    for i, first in enumerate(table):
        for j in range(i + 1, len(table)):
            if first.overlaps(table[j]):
                pairs.append((i, j))
    return pairs
