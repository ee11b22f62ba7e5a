"""Application factory and app-wide configuration."""

from __future__ import annotations

import random
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from deposit_calculator.app.api.routes import RNG_EXTENSION, api_bp
from deposit_calculator.app.config import Settings


def create_app(
    config: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> Flask:
    """Build the Flask app instance.

    Settings come from the environment unless passed in; `config` overrides
    individual keys afterwards (tests use it for TESTING and RANDOM_SEED).
    """
    app = Flask(__name__)
    app.config.from_mapping((settings or Settings()).flask_config())
    if config:
        app.config.update(config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    # one generator per app so a configured seed makes floating rates repeatable
    app.extensions[RNG_EXTENSION] = random.Random(app.config["RANDOM_SEED"])

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
