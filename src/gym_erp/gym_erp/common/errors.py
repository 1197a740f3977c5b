from __future__ import annotations

import structlog
from flask import Flask, jsonify

from ..core.exceptions import (
    ConflictError,
    DataIntegrityError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

# Most specific classes first; lookup walks the list in order.
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (DataIntegrityError, 500),
    (StorageError, 503),
]


def status_for(err: DomainError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(err, cls):
            return status
    return 400


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _handle_domain_error(err: DomainError):
        status = status_for(err)
        if status >= 500:
            logger.error("request.failed", error_type=type(err).__name__, error=str(err))
        else:
            logger.info("request.rejected", error_type=type(err).__name__, error=str(err), status=status)
        return error_response(str(err), status)
