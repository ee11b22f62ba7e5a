"""Fixed deposit return calculator."""

from deposit_calculator.core.calculator import (
    CalculationRequest,
    CalculationResult,
    InterestConvention,
    RandomSource,
    calculate,
)
from deposit_calculator.core.catalog import Product, get_product, list_products

__all__ = [
    "CalculationRequest",
    "CalculationResult",
    "InterestConvention",
    "Product",
    "RandomSource",
    "calculate",
    "get_product",
    "list_products",
]
