"""Response envelope shared by every endpoint.

Success bodies carry ``"success": true`` next to their payload keys
(``data``, ``count``, ``message``, ``token``, ``user``).  Error bodies are
``{"success": false, "message": ..., "errors": [...]}``; ``errors`` is only
present for field-level validation failures.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(status: int = http_status.HTTP_200_OK, **payload: Any) -> Response:
    return Response({"success": True, **payload}, status=status)


def error_response(
    message: str,
    status: int = http_status.HTTP_400_BAD_REQUEST,
    errors: Optional[List[dict]] = None,
) -> Response:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return Response(body, status=status)


def pydantic_errors(exc: PydanticValidationError) -> List[dict]:
    """Flatten a pydantic ``ValidationError`` into ``[{field, message}]``."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "non_field_errors"
        message = error.get("msg", "Invalid value.")
        # Messages from custom validators arrive as "Value error, <text>"
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append({"field": field, "message": message})
    return errors


def validation_error_response(exc: PydanticValidationError) -> Response:
    errors = pydantic_errors(exc)
    return error_response(_summary(errors), errors=errors)


def _summary(errors: Iterable[dict]) -> str:
    first = next(iter(errors), None)
    if first is None:
        return "Validation failed."
    return first["message"]
