import logging

from flask import jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger("app.error")


class ApiError(Exception):
    def __init__(self, message, status_code=400, code="bad_request", details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details or {}


class NotFoundError(ApiError):
    """Aucun enregistrement (non supprimé définitivement) pour ce propriétaire.

    Le message ne distingue jamais "n'existe pas" de "appartient à un autre".
    """

    def __init__(self, message="Resource not found.", details=None):
        super().__init__(message, 404, "not_found", details)


class InvalidRequestError(ApiError):
    def __init__(self, message="Invalid request.", details=None):
        super().__init__(message, 400, "validation_error", details)


class ConflictError(ApiError):
    def __init__(self, message="Resource already exists.", details=None):
        super().__init__(message, 409, "conflict", details)


def _json_error(message, status, code, details=None):
    return jsonify({
        "error": {"code": code, "message": message, "details": details or {}}
    }), status


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        return _json_error(e.message, e.status_code, e.code, e.details)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _json_error("Invalid request body.", 400, "validation_error", e.messages)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        # Ex: 404, 405, 413, 429…
        return _json_error(e.description or "HTTP error", e.code or 500, "http_error")

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unexpected_error")
        return _json_error("Internal server error.", 500, "internal_error")
