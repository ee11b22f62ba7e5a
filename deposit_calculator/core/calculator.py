"""Deposit return calculation.

Rate derivation (each step adds percentage points to the annual rate):
  1) product base rate
  2) age bonus: 60+ gets 0.5, 25 and under gets 0.25
  3) tenor bonus: 36+ months gets 0.2, 24+ months gets 0.1
  4) floating products only: uniform variation in (-0.15, +0.15)

Interest is then either simple (linear over tenor/12 years) or compounded
monthly at rate/12 for `tenor` months.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple, Union

from deposit_calculator.core.catalog import Product, get_product
from deposit_calculator.core.errors import (
    InvalidAgeError,
    InvalidConventionError,
    InvalidPrincipalError,
    TenorNotOfferedError,
)

SENIOR_AGE = 60
SENIOR_BONUS = 0.5
YOUTH_AGE = 25
YOUTH_BONUS = 0.25

LONG_TENOR_MONTHS = 36
LONG_TENOR_BONUS = 0.2
MEDIUM_TENOR_MONTHS = 24
MEDIUM_TENOR_BONUS = 0.1

FLOATING_SPREAD = 0.15  # half-width of the floating band, percentage points

MONTHS_PER_YEAR = 12

_default_rng = random.Random()


class RandomSource(Protocol):
    """Anything with a `random()` returning floats in [0, 1), e.g. random.Random."""

    def random(self) -> float: ...


class InterestConvention(str, Enum):
    SIMPLE = "simple"
    COMPOUND = "compound"


@dataclass(frozen=True)
class CalculationRequest:
    principal: Union[float, int, str]
    product_id: str
    tenor_months: int
    age: Union[int, str]
    convention: Union[InterestConvention, str] = InterestConvention.COMPOUND


@dataclass(frozen=True)
class CalculationResult:
    principal_amount: float
    interest_earned: float
    maturity_amount: float
    effective_rate: float  # annual, percent, after all adjustments


def parse_principal(value: object) -> float:
    if isinstance(value, bool) or value is None:
        raise InvalidPrincipalError(value)
    if isinstance(value, str):
        try:
            principal = float(value.strip())
        except ValueError:
            raise InvalidPrincipalError(value) from None
    elif isinstance(value, (int, float)):
        principal = float(value)
    else:
        raise InvalidPrincipalError(value)

    if not math.isfinite(principal) or principal <= 0:
        raise InvalidPrincipalError(value)
    return principal


def parse_age(value: object) -> int:
    if isinstance(value, bool):
        raise InvalidAgeError(value)
    if isinstance(value, str):
        try:
            age = int(value.strip())
        except ValueError:
            raise InvalidAgeError(value) from None
    elif isinstance(value, int):
        age = value
    else:
        raise InvalidAgeError(value)

    if age < 0:
        raise InvalidAgeError(value)
    return age


def parse_convention(value: object) -> InterestConvention:
    try:
        return InterestConvention(value)
    except ValueError:
        raise InvalidConventionError(value) from None


def age_adjustment(age: int) -> float:
    if age >= SENIOR_AGE:
        return SENIOR_BONUS
    if age <= YOUTH_AGE:
        return YOUTH_BONUS
    return 0.0


def tenor_adjustment(tenor_months: int) -> float:
    if tenor_months >= LONG_TENOR_MONTHS:
        return LONG_TENOR_BONUS
    if tenor_months >= MEDIUM_TENOR_MONTHS:
        return MEDIUM_TENOR_BONUS
    return 0.0


def floating_variation(rng: RandomSource) -> float:
    """Map a uniform draw on (0, 1) to (-FLOATING_SPREAD, +FLOATING_SPREAD)."""
    draw = rng.random()
    while draw == 0.0:
        draw = rng.random()
    return (draw - 0.5) * 2 * FLOATING_SPREAD


def deterministic_rate(product: Product, tenor_months: int, age: int) -> float:
    """Base rate plus the age and tenor bonuses, without floating variation."""
    return product.base_rate + age_adjustment(age) + tenor_adjustment(tenor_months)


def derive_rate(
    product: Product,
    tenor_months: int,
    age: int,
    rng: Optional[RandomSource] = None,
) -> float:
    rate = deterministic_rate(product, tenor_months, age)
    if product.is_floating:
        rate += floating_variation(rng if rng is not None else _default_rng)
    return rate


def floating_band(product: Product, tenor_months: int, age: int) -> Tuple[float, float]:
    """Open interval the effective rate falls in; collapses to a point for fixed products."""
    rate = deterministic_rate(product, tenor_months, age)
    if not product.is_floating:
        return rate, rate
    return rate - FLOATING_SPREAD, rate + FLOATING_SPREAD


def simple_interest(principal: float, annual_rate: float, tenor_months: int) -> float:
    """annual_rate as a decimal (0.04 for 4%)."""
    return principal * annual_rate * (tenor_months / MONTHS_PER_YEAR)


def compound_interest(principal: float, annual_rate: float, tenor_months: int) -> float:
    """Monthly compounding at annual_rate / 12, once per month of the tenor."""
    monthly_rate = annual_rate / MONTHS_PER_YEAR
    return principal * (1 + monthly_rate) ** tenor_months - principal


def calculate(
    request: CalculationRequest,
    rng: Optional[RandomSource] = None,
) -> CalculationResult:
    """
    Price a deposit.

    `rng` supplies the floating-rate draw (anything with a ``random()`` method
    returning floats in [0, 1)). Pass a seeded ``random.Random`` for
    reproducible results on floating products; fixed products never draw.

    Raises a DepositCalculationError subclass for an invalid principal, age or
    convention, an unknown product, or a tenor the product does not offer.
    """
    principal = parse_principal(request.principal)
    age = parse_age(request.age)
    convention = parse_convention(request.convention)
    product = get_product(request.product_id)
    if not product.offers(request.tenor_months):
        raise TenorNotOfferedError(product.id, request.tenor_months, product.tenors)

    rate = derive_rate(product, request.tenor_months, age, rng)
    annual_rate = rate / 100

    if convention is InterestConvention.SIMPLE:
        interest = simple_interest(principal, annual_rate, request.tenor_months)
    else:
        interest = compound_interest(principal, annual_rate, request.tenor_months)

    return CalculationResult(
        principal_amount=principal,
        interest_earned=interest,
        maturity_amount=principal + interest,
        effective_rate=rate,
    )
