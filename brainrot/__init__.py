# brainrot/__init__.py
import os
import logging

from flask import Flask
from flask_migrate import Migrate

from .config import settings_from_env
from .models.base import db as SA_DB  # <- single SQLAlchemy() instance

migrate = Migrate()


def create_app(overrides: dict | None = None) -> Flask:
    app = Flask(__name__)

    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    app.config.update(settings_from_env(BASE_DIR))
    if overrides:
        app.config.update(overrides)

    SA_DB.init_app(app)
    migrate.init_app(app, SA_DB)

    app.logger.setLevel(logging.INFO)
    app.logger.info("DB URI: %s", app.config["SQLALCHEMY_DATABASE_URI"])
    app.logger.info("AUTO_CREATE_TABLES=%s", app.config["AUTO_CREATE_TABLES"])

    with app.app_context():
        # Ensure all models are imported so metadata is complete
        from . import models as _models  # noqa: F401

        # Dev mode; production runs `flask db upgrade` instead.
        if app.config["AUTO_CREATE_TABLES"]:
            SA_DB.create_all()

    from .api import bp as brainrot_bp
    app.register_blueprint(brainrot_bp)

    @app.after_request
    def _cors(resp):
        resp.headers.setdefault("Access-Control-Allow-Origin", app.config["CORS_ORIGINS"])
        resp.headers.setdefault("Access-Control-Allow-Headers", "Content-Type")
        resp.headers.setdefault("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        return resp

    return app
