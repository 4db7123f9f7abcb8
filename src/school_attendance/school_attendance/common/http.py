from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.enums import ErrorKind
from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID_OPERATION: 400,
    ErrorKind.STORAGE: 500,
    ErrorKind.INTERNAL: 500,
}


def json_body() -> Dict[str, Any]:
    """Request JSON as a dict; an absent or empty body reads as {}."""

    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _error_body(kind: str, message: str, **details) -> dict:
    return {"error": {"kind": kind, "message": message, **details}}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = STATUS_BY_KIND.get(exc.kind, 500)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, exc.message, exc_info=exc)
        return jsonify(_error_body(exc.kind.value, exc.message, **exc.details())), status

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return jsonify(_error_body("http", exc.description or exc.name)), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.path, exc_info=exc)
        return jsonify(_error_body(ErrorKind.INTERNAL.value, "An internal server error occurred")), 500
