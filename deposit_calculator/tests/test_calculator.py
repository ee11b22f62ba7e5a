from __future__ import annotations

import math
import random

import pytest

from deposit_calculator.core.calculator import (
    CalculationRequest,
    InterestConvention,
    calculate,
    compound_interest,
    simple_interest,
)
from deposit_calculator.core.errors import (
    DepositCalculationError,
    InvalidAgeError,
    InvalidConventionError,
    InvalidPrincipalError,
    TenorNotOfferedError,
    UnknownProductError,
)
from deposit_calculator.core.catalog import list_products


def make_request(**overrides) -> CalculationRequest:
    fields = {
        "principal": 10000,
        "product_id": "fixed-premium",
        "tenor_months": 12,
        "age": 30,
        "convention": "simple",
    }
    fields.update(overrides)
    return CalculationRequest(**fields)


def test_no_adjustments_keeps_base_rate():
    result = calculate(make_request())

    assert result.effective_rate == 4.5
    assert math.isclose(result.interest_earned, 450.0, rel_tol=1e-12)


def test_senior_bonus():
    result = calculate(make_request(product_id="fixed-standard", age=60))
    assert result.effective_rate == pytest.approx(4.3, abs=1e-12)


def test_youth_bonus_stacks_with_long_tenor_bonus():
    result = calculate(make_request(age=25, tenor_months=36))
    assert result.effective_rate == pytest.approx(4.95, abs=1e-12)


@pytest.mark.parametrize(
    "age, expected",
    [(0, 4.75), (25, 4.75), (26, 4.5), (59, 4.5), (60, 5.0), (95, 5.0)],
)
def test_age_bands(age, expected):
    result = calculate(make_request(age=age))
    assert result.effective_rate == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize(
    "tenor, expected",
    [(6, 4.5), (12, 4.5), (24, 4.6), (36, 4.7), (60, 4.7)],
)
def test_tenor_bands(tenor, expected):
    result = calculate(make_request(tenor_months=tenor))
    assert result.effective_rate == pytest.approx(expected, abs=1e-12)


def test_simple_and_compound_reference_values():
    assert simple_interest(10000, 0.04, 12) == pytest.approx(400.0, abs=1e-9)
    assert compound_interest(10000, 0.04, 12) == pytest.approx(407.42, abs=0.005)


def test_compound_exceeds_simple_for_positive_rate():
    simple = calculate(make_request(convention=InterestConvention.SIMPLE, tenor_months=60))
    compound = calculate(make_request(convention=InterestConvention.COMPOUND, tenor_months=60))

    assert simple.effective_rate == compound.effective_rate
    assert compound.interest_earned > simple.interest_earned


def test_compound_uses_whole_months_as_exponent():
    result = calculate(make_request(product_id="fixed-standard", tenor_months=18, convention="compound"))
    expected = 10000 * (1 + 0.038 / 12) ** 18 - 10000
    assert result.interest_earned == pytest.approx(expected, rel=1e-12)


def test_maturity_equals_principal_plus_interest_for_every_product():
    rng = random.Random(7)
    for product in list_products():
        for tenor in product.tenors:
            for convention in InterestConvention:
                for age in (18, 40, 70):
                    result = calculate(
                        make_request(
                            principal=12345.67,
                            product_id=product.id,
                            tenor_months=tenor,
                            age=age,
                            convention=convention,
                        ),
                        rng=rng,
                    )
                    assert math.isclose(
                        result.maturity_amount,
                        result.principal_amount + result.interest_earned,
                        rel_tol=1e-9,
                    )


def test_numeric_string_principal_is_parsed():
    result = calculate(make_request(principal=" 2500.50 ", age="30"))
    assert result.principal_amount == 2500.5


@pytest.mark.parametrize("principal", [None, "", "abc", 0, -1, "-5", float("nan"), float("inf"), True])
def test_invalid_principal_rejected(principal):
    with pytest.raises(InvalidPrincipalError):
        calculate(make_request(principal=principal))


def test_unknown_product_rejected():
    with pytest.raises(UnknownProductError):
        calculate(make_request(product_id="nope"))


def test_tenor_not_offered_rejected():
    with pytest.raises(TenorNotOfferedError) as excinfo:
        calculate(make_request(product_id="fixed-standard", tenor_months=36))
    assert excinfo.value.offered == (3, 6, 12, 18, 24)


@pytest.mark.parametrize("age", [-1, "old", 30.5, False])
def test_invalid_age_rejected(age):
    with pytest.raises(InvalidAgeError):
        calculate(make_request(age=age))


def test_invalid_convention_rejected():
    with pytest.raises(InvalidConventionError):
        calculate(make_request(convention="continuous"))


def test_all_errors_share_a_base_class():
    with pytest.raises(DepositCalculationError):
        calculate(make_request(tenor_months=7))
    with pytest.raises(ValueError):
        calculate(make_request(principal=0))


def test_fixed_products_never_draw():
    class ExplodingSource:
        def random(self) -> float:
            raise AssertionError("fixed products must not consume a draw")

    result = calculate(make_request(product_id="fixed-standard"), rng=ExplodingSource())
    assert result.effective_rate == 3.8
