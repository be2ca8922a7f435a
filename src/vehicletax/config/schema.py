"""Pydantic v2 configuration models for vehicletax."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from vehicletax.taxes.discounts import (
    ACCOUNT_TRANSFER_DISCOUNT_PERCENT,
    EARLY_PAYMENT_DISCOUNT_PERCENT,
    PUBLIC_SERVICE_DISCOUNT_AMOUNT,
)


class DiscountSchedule(BaseModel):
    """Discount amounts applied, in field order, to the base payment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    early_payment_percent: float = Field(
        default=EARLY_PAYMENT_DISCOUNT_PERCENT,
        ge=0,
        le=100,
        description="Percent taken off the running total for early payment",
    )
    public_service_amount: float = Field(
        default=PUBLIC_SERVICE_DISCOUNT_AMOUNT,
        ge=0,
        description="Flat amount subtracted for public service vehicles",
    )
    account_transfer_percent: float = Field(
        default=ACCOUNT_TRANSFER_DISCOUNT_PERCENT,
        ge=0,
        le=100,
        description="Percent taken off the running total for an account transfer",
    )


class CalculatorConfig(BaseModel):
    """Where the calculator reads its data and which discounts it uses."""

    model_config = ConfigDict(extra="forbid")

    vehicles_path: Path | None = Field(
        default=None,
        description="Vehicle file; the bundled catalog is used when unset",
    )
    brackets_path: Path | None = Field(
        default=None,
        description="Bracket .properties or .yaml file; the bundled table is used when unset",
    )
    discounts: DiscountSchedule = Field(default_factory=DiscountSchedule)
