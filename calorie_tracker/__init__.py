import logging

from flask import Flask
from calorie_tracker.extensions import db, cors, migrate
from calorie_tracker.routes import register_routes
from calorie_tracker.utils.auth import build_authenticator
from calorie_tracker.utils.errors import register_error_handlers


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Initialize database
    db.init_app(app)

    # Make sure every model is registered before create_all / migrations
    from calorie_tracker import models  # noqa: F401

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization", "X-Timezone"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    app.extensions["authenticator"] = build_authenticator(app.config)

    register_error_handlers(app)
    register_routes(app)

    return app
