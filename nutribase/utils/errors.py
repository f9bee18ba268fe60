"""
Error taxonomy shared by services and controllers.

Services raise these; the handlers registered here turn them into the
``{"error": {"code", "message"}}`` body used across the API.
"""

from flask import current_app
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from nutribase.utils.http import error


class ServiceError(Exception):
    code = "UNKNOWN_ERROR"
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestValidationError(ServiceError):
    code = "VALIDATION_ERROR"
    status = 400


class ConflictError(ServiceError):
    code = "DUPLICATE_ENTRY"
    status = 409


class NotFoundError(ServiceError):
    code = "NOT_FOUND"
    status = 404


class IntegrityViolationError(ServiceError):
    """A referenced meal, ingredient or nutrient does not exist."""
    code = "INTEGRITY_ERROR"
    status = 500


class InternalError(ServiceError):
    code = "UNKNOWN_ERROR"
    status = 500


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e):
        if e.status >= 500:
            current_app.logger.error(f"{e.code}: {e.message}")
        return error(e.code, e.message, e.status)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return error("VALIDATION_ERROR", "Invalid request body", 400, fields=e.messages)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        code = (e.name or "HTTP_ERROR").upper().replace(" ", "_")
        return error(code, e.description, e.code)
