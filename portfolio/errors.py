import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from portfolio.extensions import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors rendered as ``{"error": message}`` responses."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self):
        return jsonify({"error": self.message}), self.status_code


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Authentication required"


class InvalidCredentials(ApiError):
    status_code = 401
    default_message = "Invalid credentials"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Resource already exists"


class PayloadTooLarge(ApiError):
    status_code = 413
    default_message = "File is too large. Maximum size is 10MB"


class UnsupportedMediaType(ApiError):
    status_code = 415
    default_message = "Only PDF and Word documents are allowed"


class EmailUnavailable(ApiError):
    status_code = 500
    default_message = "Email service not configured. Please contact the administrator."


class InternalError(ApiError):
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error(f"❌ {type(error).__name__}: {error.message}")
        return error.to_response()

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        return PayloadTooLarge().to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"error": error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception(f"❌ Unhandled error: {error}")
        db.session.rollback()
        return InternalError().to_response()
