"""Tests for tax brackets and bracket lookup."""

from __future__ import annotations

import pytest

from vehicletax.taxes.brackets import TaxBracket, find_bracket, overlapping_pairs


class TestTaxBracket:
    def test_lower_bound_inclusive(self) -> None:
        bracket = TaxBracket(1_000, 5_000, 2.0)
        assert bracket.contains(1_000)

    def test_upper_bound_exclusive(self) -> None:
        bracket = TaxBracket(1_000, 5_000, 2.0)
        assert not bracket.contains(5_000)

    def test_bounds_property_many_brackets(self) -> None:
        for lower, upper in [(0, 1), (-10, 10), (30_000_000, 70_000_000), (0.5, 0.75)]:
            bracket = TaxBracket(lower, upper, 1.0)
            assert bracket.contains(bracket.lower_bound)
            assert not bracket.contains(bracket.upper_bound)

    def test_inside_and_outside(self) -> None:
        bracket = TaxBracket(1_000, 5_000, 2.0)
        assert bracket.contains(2_500)
        assert not bracket.contains(999.99)
        assert not bracket.contains(-1)
        assert not bracket.contains(0)

    def test_lower_not_below_upper_rejected(self) -> None:
        with pytest.raises(ValueError, match="lower_bound"):
            TaxBracket(5_000, 5_000, 2.0)

    def test_non_positive_rate_rejected(self) -> None:
        with pytest.raises(ValueError, match="rate_percent"):
            TaxBracket(0, 5_000, 0.0)

    def test_immutable(self) -> None:
        bracket = TaxBracket(0, 5_000, 2.0)
        with pytest.raises(AttributeError):
            bracket.rate_percent = 3.0  # type: ignore[misc]

    def test_overlaps(self) -> None:
        a = TaxBracket(0, 100_000, 3.0)
        b = TaxBracket(50_000, 150_000, 7.0)
        c = TaxBracket(100_000, 200_000, 5.0)
        assert a.overlaps(b)
        assert b.overlaps(a)
        # Touching half-open intervals share no price
        assert not a.overlaps(c)


class TestFindBracket:
    def test_single_match(self) -> None:
        table = [TaxBracket(0, 10, 1.0), TaxBracket(10, 20, 2.0)]
        assert find_bracket(table, 10) is table[1]

    def test_last_overlapping_match_wins(self) -> None:
        table = [TaxBracket(0, 100_000, 3.0), TaxBracket(50_000, 150_000, 7.0)]
        assert find_bracket(table, 75_000) is table[1]

    def test_no_match(self) -> None:
        table = [TaxBracket(0, 10, 1.0)]
        assert find_bracket(table, 10) is None
        assert find_bracket([], 5) is None

    def test_overlapping_pairs(self) -> None:
        table = [
            TaxBracket(0, 100_000, 3.0),
            TaxBracket(50_000, 150_000, 7.0),
            TaxBracket(150_000, 200_000, 9.0),
        ]
        assert overlapping_pairs(table) == [(0, 1)]
