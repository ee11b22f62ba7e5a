"""Static product catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from deposit_calculator.core.errors import UnknownProductError


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    base_rate: float  # annual, percent
    is_floating: bool
    tenors: Tuple[int, ...]  # months

    def offers(self, tenor_months: int) -> bool:
        return tenor_months in self.tenors

    def resolve_tenor(self, tenor_months: int) -> int:
        """Keep the tenor if this product offers it, else fall back to the first one offered.

        Used when switching product: the previously selected tenor may not exist
        on the new product.
        """
        if self.offers(tenor_months):
            return tenor_months
        return self.tenors[0]


PRODUCTS: Tuple[Product, ...] = (
    Product(
        id="fixed-premium",
        name="Premium Fixed Deposit",
        base_rate=4.5,
        is_floating=False,
        tenors=(6, 12, 24, 36, 60),
    ),
    Product(
        id="fixed-standard",
        name="Standard Fixed Deposit",
        base_rate=3.8,
        is_floating=False,
        tenors=(3, 6, 12, 18, 24),
    ),
    Product(
        id="floating-dynamic",
        name="Dynamic Floating Rate",
        base_rate=4.2,
        is_floating=True,
        tenors=(6, 12, 24, 36),
    ),
    Product(
        id="floating-market",
        name="Market Linked Floating",
        base_rate=4.8,
        is_floating=True,
        tenors=(12, 24, 36, 48),
    ),
)

_BY_ID: Dict[str, Product] = {product.id: product for product in PRODUCTS}


def list_products() -> Tuple[Product, ...]:
    return PRODUCTS


def get_product(product_id: str) -> Product:
    try:
        return _BY_ID[product_id]
    except KeyError:
        raise UnknownProductError(product_id) from None
