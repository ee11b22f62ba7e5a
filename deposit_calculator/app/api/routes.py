"""HTTP routes for the Flask API."""

import json
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from deposit_calculator.core.calculator import CalculationRequest, calculate
from deposit_calculator.core.catalog import get_product, list_products
from deposit_calculator.core.errors import DepositCalculationError, UnknownProductError
from deposit_calculator.schemas.deposit import (
    DepositCalculationRequest,
    DepositCalculationResponse,
    ProductListResponse,
    ProductResponse,
)
from deposit_calculator.schemas.ping import PingResponse

RNG_EXTENSION = "deposit_calculator.rng"

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.warning("rejected request: %d validation error(s)", exc.error_count())
    detail = json.loads(exc.json(include_url=False))
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(UnknownProductError)
def _handle_unknown_product(exc: UnknownProductError):
    return jsonify({"error": str(exc)}), HTTPStatus.NOT_FOUND


@api_bp.errorhandler(DepositCalculationError)
def _handle_calculation_error(exc: DepositCalculationError):
    """Inputs that got past schema validation but the calculator still refused."""
    current_app.logger.warning("calculation refused: %s", exc)
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse().model_dump())


@api_bp.get("/products")
def products() -> Any:
    """Full catalog, in display order."""
    response = ProductListResponse(
        products=[ProductResponse.from_product(product) for product in list_products()]
    )
    return jsonify(response.model_dump())


@api_bp.get("/products/<product_id>")
def product_detail(product_id: str) -> Any:
    product = get_product(product_id)
    return jsonify(ProductResponse.from_product(product).model_dump())


@api_bp.post("/calc/deposit")
def deposit() -> Any:
    """Price a deposit: interest earned, maturity amount and effective rate."""
    raw_payload = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        current_app.logger.warning("rejected request: body is not a JSON object")
        return jsonify({"error": "request body must be a JSON object"}), HTTPStatus.BAD_REQUEST

    payload: DepositCalculationRequest = DepositCalculationRequest.model_validate(raw_payload)
    result = calculate(
        CalculationRequest(
            principal=payload.principal,
            product_id=payload.product_id,
            tenor_months=payload.tenor_months,
            age=payload.age,
            convention=payload.interest_type,
        ),
        rng=current_app.extensions[RNG_EXTENSION],
    )
    current_app.logger.info(
        "priced %s for %d months (%s): effective rate %.4f%%",
        payload.product_id,
        payload.tenor_months,
        payload.interest_type,
        result.effective_rate,
    )

    response = DepositCalculationResponse(
        product_id=payload.product_id,
        tenor_months=payload.tenor_months,
        interest_type=payload.interest_type,
        principal_amount=result.principal_amount,
        interest_earned=result.interest_earned,
        maturity_amount=result.maturity_amount,
        effective_rate=result.effective_rate,
    )
    return jsonify(response.model_dump())
