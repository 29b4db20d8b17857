"""Map exceptions to field-tagged error envelopes.

Validation and not-found details are always shown to the caller.
Storage and unexpected failures are logged in full but reported with
a generic message unless details are explicitly exposed (development).
"""

from __future__ import annotations

import logging

from catalog.application import responses
from catalog.domain.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def validation_errors(exc: ValidationError) -> list[dict]:
    if not exc.errors:
        return [{"field": "validation", "message": str(exc), "type": "validation"}]
    return [
        {"field": e.field, "message": e.message, "type": "validation"}
        for e in exc.errors
    ]


def error_response(exc: Exception, *, expose_details: bool = False) -> dict:
    """Build the error envelope (with HTTP-style code) for *exc*."""
    if isinstance(exc, ValidationError):
        return responses.error(validation_errors(exc), "Validation failed", 400)

    if isinstance(exc, EntityNotFoundError):
        errors = [{"field": "id", "message": str(exc), "type": "not_found"}]
        return responses.error(errors, "Product not found", 404)

    if isinstance(exc, AuthorizationError):
        errors = [{"field": "auth", "message": str(exc), "type": "forbidden"}]
        return responses.error(errors, "Permission denied", 403)

    if isinstance(exc, StorageError):
        logger.error("Storage operation failed", exc_info=exc)
        message = str(exc) if expose_details else "Storage operation failed"
        errors = [{"field": "storage", "message": message, "type": "storage_error"}]
        return responses.error(errors, "Storage operation failed", 500)

    logger.error("Unexpected error", exc_info=exc)
    message = str(exc) if expose_details else "An unexpected error occurred"
    errors = [{"field": "system", "message": message, "type": "system_error"}]
    return responses.error(errors, "Internal error", 500)
