"""Request body helpers for views that validate input with DTOs."""

from __future__ import annotations

from typing import Iterable

from rest_framework.request import Request


def body_fields(request: Request, names: Iterable[str]) -> dict:
    """Pick the supplied ``names`` out of the request body.

    Absent keys are left out so DTO defaults apply; a body that is not a
    mapping (a JSON list, say) yields no fields.
    """
    data = request.data if hasattr(request.data, "get") else {}
    return {name: data.get(name) for name in names if name in data}
