"""Signed access tokens for the API.

Tokens are HS256 JWTs issued by SimpleJWT.  The payload carries the user
id (``user_id``), the user's role, ``iat``, ``exp`` and ``jti``.  Decoding
and user loading on each request is done by SimpleJWT's
``JWTAuthentication`` (configured in ``REST_FRAMEWORK``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework_simplejwt.tokens import AccessToken

if TYPE_CHECKING:
    from modules.accounts.models import User


def issue_access_token(user: User) -> str:
    token = AccessToken.for_user(user)
    token["role"] = user.role
    return str(token)
