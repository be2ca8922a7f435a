"""Serialization for calculator configs and payment summaries."""

from __future__ import annotations

import json
from typing import Any

from vehicletax.config.schema import CalculatorConfig
from vehicletax.core.calculator import PaymentBreakdown


def dump_config(config: CalculatorConfig) -> str:
    """Serialize a calculator config to a JSON string."""
    return json.dumps(config.model_dump(mode="json"), indent=2)


def load_config(json_str: str) -> CalculatorConfig:
    """Deserialize a calculator config from a JSON string."""
    data: dict[str, Any] = json.loads(json_str)
    return CalculatorConfig.model_validate(data)


def payment_summary(breakdown: PaymentBreakdown) -> dict[str, Any]:
    """Plain-data view of a payment breakdown."""
    vehicle = breakdown.vehicle
    bracket = breakdown.bracket
    return {
        "vehicle": {
            "make": vehicle.make,
            "line": vehicle.line,
            "year": vehicle.year,
            "price": vehicle.price,
            "image_ref": vehicle.image_ref,
        },
        "bracket": {
            "lower_bound": bracket.lower_bound,
            "upper_bound": bracket.upper_bound,
            "rate_percent": bracket.rate_percent,
        },
        "base": breakdown.base,
        "steps": [{"discount": name, "running_total": total} for name, total in breakdown.steps],
        "total": breakdown.total,
    }


def dump_payment_summary(breakdown: PaymentBreakdown) -> str:
    """Serialize a payment breakdown to JSON."""
    return json.dumps(payment_summary(breakdown), indent=2)
