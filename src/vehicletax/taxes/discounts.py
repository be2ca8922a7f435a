"""Payment discounts."""

from __future__ import annotations

from typing import Any, TypeVar

import numpy as np
from numpy.typing import NDArray

EARLY_PAYMENT_DISCOUNT_PERCENT: float = 10.0
PUBLIC_SERVICE_DISCOUNT_AMOUNT: float = 50000.0
ACCOUNT_TRANSFER_DISCOUNT_PERCENT: float = 5.0

_Amount = TypeVar("_Amount", float, NDArray[np.floating[Any]])


def base_payment(price: _Amount, rate_percent: _Amount) -> _Amount:
    """Tax before discounts."""
    return price * rate_percent / 100


def percent_discount(payment: _Amount, percent: float) -> _Amount:
    """Take ``percent`` percent off ``payment``."""
    return payment - payment * percent / 100


def flat_discount(payment: _Amount, amount: float) -> _Amount:
    """Subtract a fixed ``amount`` from ``payment``. May go negative."""
    return payment - amount
