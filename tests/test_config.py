"""Tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vehicletax.config.defaults import default_discounts
from vehicletax.config.schema import CalculatorConfig, DiscountSchedule
from vehicletax.taxes.discounts import (
    ACCOUNT_TRANSFER_DISCOUNT_PERCENT,
    EARLY_PAYMENT_DISCOUNT_PERCENT,
    PUBLIC_SERVICE_DISCOUNT_AMOUNT,
)


class TestDiscountSchedule:
    def test_constants(self) -> None:
        assert EARLY_PAYMENT_DISCOUNT_PERCENT == 10.0
        assert PUBLIC_SERVICE_DISCOUNT_AMOUNT == 50_000.0
        assert ACCOUNT_TRANSFER_DISCOUNT_PERCENT == 5.0

    def test_defaults(self) -> None:
        schedule = default_discounts()
        assert schedule.early_payment_percent == EARLY_PAYMENT_DISCOUNT_PERCENT
        assert schedule.public_service_amount == PUBLIC_SERVICE_DISCOUNT_AMOUNT
        assert schedule.account_transfer_percent == ACCOUNT_TRANSFER_DISCOUNT_PERCENT

    @pytest.mark.parametrize(
        "field, value",
        [
            ("early_payment_percent", -1.0),
            ("early_payment_percent", 101.0),
            ("public_service_amount", -0.01),
            ("account_transfer_percent", 150.0),
        ],
    )
    def test_out_of_range(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            DiscountSchedule(**{field: value})

    def test_frozen(self) -> None:
        schedule = DiscountSchedule()
        with pytest.raises(ValidationError):
            schedule.early_payment_percent = 20.0  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            DiscountSchedule(loyalty_percent=3.0)  # type: ignore[call-arg]


class TestCalculatorConfig:
    def test_calculator_config_defaults(self) -> None:
        config = CalculatorConfig()
        assert config.vehicles_path is None
        assert config.brackets_path is None
        assert config.discounts == DiscountSchedule()
