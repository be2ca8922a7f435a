"""Registration tax calculator over a vehicle catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from vehicletax.catalog.catalog import VehicleCatalog
from vehicletax.catalog.vehicle import Vehicle
from vehicletax.config.defaults import DEFAULT_BRACKETS_TABLE, DEFAULT_VEHICLES_PATH
from vehicletax.config.schema import CalculatorConfig, DiscountSchedule
from vehicletax.io.base import BracketLoader, VehicleLoader
from vehicletax.io.loaders import load_brackets, load_package_brackets, load_vehicles
from vehicletax.taxes.brackets import TaxBracket, find_bracket, overlapping_pairs
from vehicletax.taxes.discounts import base_payment, flat_discount, percent_discount
from vehicletax.utils.exceptions import PreconditionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentBreakdown:
    """How a payment was reached.

    Attributes:
        vehicle: Vehicle the payment is for.
        bracket: Bracket whose rate was applied.
        base: Payment before discounts.
        steps: ``(discount name, running total after it)`` for every
            discount that applied, in application order.
        total: Final amount. Not rounded; may be negative.
    """

    vehicle: Vehicle
    bracket: TaxBracket
    base: float
    steps: tuple[tuple[str, float], ...]
    total: float


class TaxCalculator:
    """Computes the registration tax of the catalog's current vehicle.

    Holds the catalog, the bracket table in load order and the discount
    schedule. Navigation and search calls are forwarded to the catalog.
    """

    def __init__(
        self,
        catalog: VehicleCatalog,
        brackets: tuple[TaxBracket, ...] | list[TaxBracket],
        discounts: DiscountSchedule | None = None,
    ) -> None:
        self._catalog = catalog
        self._brackets: tuple[TaxBracket, ...] = tuple(brackets)
        self._discounts = discounts if discounts is not None else DiscountSchedule()
        for i, j in overlapping_pairs(self._brackets):
            logger.warning(
                "Brackets %d and %d overlap; prices in both use bracket %d", i + 1, j + 1, j + 1
            )

    @classmethod
    def from_sources(
        cls,
        vehicles_source: Path,
        brackets_source: Path,
        discounts: DiscountSchedule | None = None,
        vehicle_loader: VehicleLoader = load_vehicles,
        bracket_loader: BracketLoader = load_brackets,
    ) -> TaxCalculator:
        """Build a calculator by running the two loaders.

        Raises:
            LoadError: If either source is unreadable or malformed.
        """
        catalog = vehicle_loader(vehicles_source)
        brackets = bracket_loader(brackets_source)
        logger.info("Calculator ready: %d vehicles, %d brackets", len(catalog), len(brackets))
        return cls(catalog, brackets, discounts)

    @classmethod
    def from_config(cls, config: CalculatorConfig) -> TaxCalculator:
        """Build a calculator from a config, using bundled data for unset paths.

        Without ``brackets_path`` the bracket table shipped in
        ``taxes/tables/`` is used.
        """
        vehicles_source = config.vehicles_path or DEFAULT_VEHICLES_PATH
        if config.brackets_path is not None:
            return cls.from_sources(vehicles_source, config.brackets_path, config.discounts)
        catalog = load_vehicles(vehicles_source)
        brackets = load_package_brackets(DEFAULT_BRACKETS_TABLE)
        logger.info("Calculator ready: %d vehicles, %d brackets", len(catalog), len(brackets))
        return cls(catalog, brackets, config.discounts)

    @classmethod
    def default(cls) -> TaxCalculator:
        """Build a calculator from the bundled vehicles and brackets."""
        return cls.from_config(CalculatorConfig())

    @property
    def catalog(self) -> VehicleCatalog:
        return self._catalog

    @property
    def brackets(self) -> tuple[TaxBracket, ...]:
        return self._brackets

    @property
    def discounts(self) -> DiscountSchedule:
        return self._discounts

    # --- Payment ---

    def find_bracket(self, price: float) -> TaxBracket | None:
        """Return the bracket for ``price``; the last match in load order wins."""
        return find_bracket(self._brackets, price)

    def payment_breakdown(
        self,
        apply_early_payment: bool = False,
        apply_public_service: bool = False,
        apply_account_transfer: bool = False,
    ) -> PaymentBreakdown:
        """Compute the current vehicle's payment step by step.

        Discounts apply in a fixed order, each against the running total:
        early payment (percent), public service (flat amount), account
        transfer (percent).

        Raises:
            PreconditionError: If the catalog is empty or no bracket contains
                the vehicle's price.
        """
        vehicle = self._catalog.current()
        bracket = self.find_bracket(vehicle.price)
        if bracket is None:
            raise PreconditionError(
                f"No tax bracket contains the price {vehicle.price} "
                f"of {vehicle.make} {vehicle.line}"
            )
        logger.debug(
            "Price %s falls in bracket [%s, %s) at %s%%",
            vehicle.price,
            bracket.lower_bound,
            bracket.upper_bound,
            bracket.rate_percent,
        )

        schedule = self._discounts
        payment = base_payment(vehicle.price, bracket.rate_percent)
        base = payment
        steps: list[tuple[str, float]] = []
        if apply_early_payment:
            payment = percent_discount(payment, schedule.early_payment_percent)
            steps.append(("early_payment", payment))
        if apply_public_service:
            payment = flat_discount(payment, schedule.public_service_amount)
            steps.append(("public_service", payment))
        if apply_account_transfer:
            payment = percent_discount(payment, schedule.account_transfer_percent)
            steps.append(("account_transfer", payment))

        if payment < 0:
            logger.debug("Discounts exceed the base payment %s; total is %s", base, payment)
        return PaymentBreakdown(
            vehicle=vehicle,
            bracket=bracket,
            base=base,
            steps=tuple(steps),
            total=payment,
        )

    def compute_payment(
        self,
        apply_early_payment: bool = False,
        apply_public_service: bool = False,
        apply_account_transfer: bool = False,
    ) -> float:
        """Tax payable for the current vehicle after the selected discounts."""
        return self.payment_breakdown(
            apply_early_payment, apply_public_service, apply_account_transfer
        ).total

    def compute_payments_vectorized(
        self,
        prices: ArrayLike,
        apply_early_payment: bool = False,
        apply_public_service: bool = False,
        apply_account_transfer: bool = False,
    ) -> NDArray[np.floating[Any]]:
        """Vectorized payment across many prices.

        Uses the same bracket rule and discount order as
        :meth:`compute_payment`.

        Args:
            prices: (n,) vehicle prices.

        Returns:
            (n,) payment per price.

        Raises:
            PreconditionError: If any price has no bracket.
        """
        prices_arr = np.asarray(prices, dtype=float)
        rates = np.full(prices_arr.shape, np.nan)
        for bracket in self._brackets:
            inside = (prices_arr >= bracket.lower_bound) & (prices_arr < bracket.upper_bound)
            rates = np.where(inside, bracket.rate_percent, rates)
        missing = np.isnan(rates)
        if missing.any():
            raise PreconditionError(
                f"No tax bracket contains the prices {prices_arr[missing].tolist()}"
            )

        schedule = self._discounts
        payments: NDArray[np.floating[Any]] = base_payment(prices_arr, rates)
        if apply_early_payment:
            payments = percent_discount(payments, schedule.early_payment_percent)
        if apply_public_service:
            payments = flat_discount(payments, schedule.public_service_amount)
        if apply_account_transfer:
            payments = percent_discount(payments, schedule.account_transfer_percent)
        return payments

    def payments_for_catalog(
        self,
        apply_early_payment: bool = False,
        apply_public_service: bool = False,
        apply_account_transfer: bool = False,
    ) -> NDArray[np.floating[Any]]:
        """Payment for every catalog vehicle, in load order."""
        return self.compute_payments_vectorized(
            self._catalog.prices(),
            apply_early_payment,
            apply_public_service,
            apply_account_transfer,
        )

    # --- Catalog delegation ---

    def current(self) -> Vehicle:
        return self._catalog.current()

    def first(self) -> Vehicle:
        return self._catalog.first()

    def previous(self) -> Vehicle:
        return self._catalog.previous()

    def next(self) -> Vehicle:
        return self._catalog.next()

    def last(self) -> Vehicle:
        return self._catalog.last()

    def select(self, vehicle: Vehicle) -> Vehicle:
        return self._catalog.select(vehicle)

    def find_most_expensive(self) -> Vehicle | None:
        return self._catalog.find_most_expensive()

    def find_first_by_make(self, make: str) -> Vehicle | None:
        return self._catalog.find_first_by_make(make)

    def find_by_line(self, line: str) -> Vehicle | None:
        return self._catalog.find_by_line(line)

    def find_oldest(self) -> Vehicle:
        return self._catalog.find_oldest()

    def average_price(self) -> float:
        return self._catalog.average_price()
