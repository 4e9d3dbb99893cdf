"""DRF exception handler that renders framework errors in the envelope.

Authentication (401), permission (403), routing (404/405), throttling
(429) and serializer/filter validation (400) errors raised inside DRF all
leave the API as ``{"success": false, "message": ..., "errors"?: [...]}``.
"""

from __future__ import annotations

from typing import Any, List

import structlog
from rest_framework import exceptions
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def api_exception_handler(exc: Exception, context: dict) -> Any:
    response = exception_handler(exc, context)
    if response is None:
        # Unhandled: let Django produce the 500 and log the traceback
        return None

    view = context.get("view")
    log = logger.bind(
        view=view.__class__.__name__ if view else None,
        status_code=response.status_code,
    )

    if isinstance(exc, exceptions.ValidationError):
        errors = _flatten(response.data)
        message = errors[0]["message"] if errors else "Validation failed."
        response.data = {"success": False, "message": message, "errors": errors}
        log.info("api.validation_error", error_count=len(errors))
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    if isinstance(exc, exceptions.NotAuthenticated):
        message = "Not authorized, no token provided."
    elif isinstance(exc, exceptions.AuthenticationFailed):
        message = "Not authorized, token failed."
    else:
        message = str(detail) if detail is not None else str(exc)

    response.data = {"success": False, "message": message}
    log.info("api.request_rejected", error=exc.__class__.__name__)
    return response


def _flatten(data: Any, prefix: str = "") -> List[dict]:
    """Turn DRF's nested error structure into ``[{field, message}]``."""
    errors: List[dict] = []
    if isinstance(data, dict):
        for key, value in data.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            errors.extend(_flatten(value, field))
    elif isinstance(data, list):
        for item in data:
            errors.extend(_flatten(item, prefix))
    else:
        errors.append({"field": prefix or "non_field_errors", "message": str(data)})
    return errors
