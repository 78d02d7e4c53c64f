"""
API error taxonomy.

Services raise these; ``register_error_handlers`` turns them (and store or
routing failures) into the ``{"error": message}`` envelope.
"""

import logging

from flask import current_app
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from werkzeug.exceptions import HTTPException

from calorie_tracker.extensions import db
from calorie_tracker.utils.http import error, schema_error_message

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status = 500

    def __init__(self, message, **extra):
        super().__init__(message)
        self.message = message
        self.extra = extra


class AuthenticationError(ApiError):
    status = 401


class AuthorizationError(ApiError):
    status = 403


class ValidationError(ApiError):
    status = 400


class NotFoundError(ApiError):
    status = 404


class StoreError(ApiError):
    status = 500


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        return error(exc.message, exc.status, **exc.extra)

    @app.errorhandler(SchemaValidationError)
    def handle_schema_error(exc):
        return error(schema_error_message(exc.messages), 400, details=exc.messages)

    @app.errorhandler(OperationalError)
    def handle_store_unavailable(exc):
        db.session.rollback()
        current_app.logger.error("Database unavailable: %s", exc, exc_info=exc)
        return error("Database unavailable: check SQLALCHEMY_DATABASE_URI configuration", 500)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(exc):
        db.session.rollback()
        current_app.logger.error("Store error: %s", exc, exc_info=exc)
        return error("Server error", 500)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        if exc.code == 405:
            return error("Method not allowed", 405)
        return error(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        db.session.rollback()
        logger.exception("Unhandled error")
        return error("Server error", 500)
