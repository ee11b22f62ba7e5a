import pytest
from flask import Flask
from flask.testing import FlaskClient

from deposit_calculator.app import create_app


@pytest.fixture()
def app() -> Flask:
    return create_app({"TESTING": True, "RANDOM_SEED": 42})


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
