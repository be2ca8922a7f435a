"""Tests for config and payment summary serialization."""

from __future__ import annotations

import json
from pathlib import Path

from vehicletax.config.defaults import default_config
from vehicletax.config.schema import CalculatorConfig, DiscountSchedule
from vehicletax.core.calculator import TaxCalculator
from vehicletax.io.serialize import dump_config, dump_payment_summary, load_config


class TestConfigSerialize:
    def test_round_trip(self) -> None:
        config = CalculatorConfig(
            vehicles_path=Path("data/vehicles.txt"),
            discounts=DiscountSchedule(public_service_amount=25_000.0),
        )
        assert load_config(dump_config(config)) == config

    def test_default_config_uses_bundled_data(self) -> None:
        config = default_config()
        assert config.vehicles_path is not None and config.vehicles_path.exists()
        assert config.brackets_path is None

    def test_partial_json(self) -> None:
        config = load_config('{"discounts": {"early_payment_percent": 15}}')
        assert config.vehicles_path is None
        assert config.discounts.early_payment_percent == 15.0
        assert config.discounts.account_transfer_percent == 5.0


class TestPaymentSummary:
    def test_summary_fields(self, calculator: TaxCalculator) -> None:
        data = json.loads(dump_payment_summary(calculator.payment_breakdown(True, False, True)))
        assert data["vehicle"]["make"] == "Mazda"
        assert data["bracket"]["rate_percent"] == 2.5
        assert data["base"] == 1_125_000.0
        assert [s["discount"] for s in data["steps"]] == ["early_payment", "account_transfer"]
        assert data["total"] == data["steps"][-1]["running_total"]
