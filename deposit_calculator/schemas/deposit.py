"""Data contracts for deposit return calculations."""

from __future__ import annotations

from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from deposit_calculator.core.catalog import Product, get_product
from deposit_calculator.core.errors import UnknownProductError


class DepositCalculationRequest(BaseModel):
    """Inputs required to price a deposit."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., gt=0, allow_inf_nan=False, description="Amount deposited.")
    product_id: str = Field(..., description="Catalog identifier, e.g. 'fixed-premium'.")
    tenor_months: int = Field(..., ge=1, description="Deposit period in months.")
    age: int = Field(..., ge=0, le=130, description="Depositor age in years.")
    interest_type: Literal["simple", "compound"] = "compound"

    @field_validator("principal", "tenor_months", "age", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        # lax mode would read true/false as 1/0
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value

    @model_validator(mode="after")
    def ensure_offered(self) -> "DepositCalculationRequest":
        try:
            product = get_product(self.product_id)
        except UnknownProductError as exc:
            raise ValueError(str(exc)) from None
        if not product.offers(self.tenor_months):
            offered = ", ".join(str(months) for months in product.tenors)
            raise ValueError(
                f"tenor_months {self.tenor_months} not offered by '{product.id}' (offered: {offered})"
            )
        return self


class DepositCalculationResponse(BaseModel):
    """Priced deposit, rates in percent."""

    product_id: str
    tenor_months: int
    interest_type: Literal["simple", "compound"]
    principal_amount: float
    interest_earned: float
    maturity_amount: float
    effective_rate: float


class ProductResponse(BaseModel):
    id: str
    name: str
    base_rate: float
    is_floating: bool
    tenors: List[int]

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            base_rate=product.base_rate,
            is_floating=product.is_floating,
            tenors=list(product.tenors),
        )


class ProductListResponse(BaseModel):
    products: List[ProductResponse]
