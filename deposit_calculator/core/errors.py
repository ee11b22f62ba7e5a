"""Exceptions raised by the calculation core."""

from __future__ import annotations


class DepositCalculationError(ValueError):
    """Base class for inputs the calculator refuses to price."""


class InvalidPrincipalError(DepositCalculationError):
    def __init__(self, value: object):
        super().__init__(f"principal must be a positive finite number, got {value!r}")
        self.value = value


class UnknownProductError(DepositCalculationError):
    def __init__(self, product_id: str):
        super().__init__(f"unknown product '{product_id}'")
        self.product_id = product_id


class TenorNotOfferedError(DepositCalculationError):
    def __init__(self, product_id: str, tenor_months: int, offered: tuple[int, ...]):
        choices = ", ".join(str(months) for months in offered)
        super().__init__(
            f"product '{product_id}' does not offer a {tenor_months}-month tenor (offered: {choices})"
        )
        self.product_id = product_id
        self.tenor_months = tenor_months
        self.offered = offered


class InvalidAgeError(DepositCalculationError):
    def __init__(self, value: object):
        super().__init__(f"age must be a non-negative integer, got {value!r}")
        self.value = value


class InvalidConventionError(DepositCalculationError):
    def __init__(self, value: object):
        super().__init__(f"interest convention must be 'simple' or 'compound', got {value!r}")
        self.value = value
