"""Account DTOs for the Service Layer.

Framework-agnostic, immutable (``frozen=True``) Pydantic v2 contracts
between the API views and ``AuthService``.

- ``RegisterUserDTO``: input for self-registration.
- ``LoginDTO``: input for credential checks.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from pydantic import BaseModel, ConfigDict, field_validator

from modules.accounts.models import Role

PASSWORD_MIN_LENGTH = 6
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254


def _normalise_email(value: str) -> str:
    value = (value or "").strip().lower()
    if not value:
        raise ValueError("Please provide an email.")
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError("Email is too long.")
    try:
        validate_email(value)
    except DjangoValidationError as exc:
        raise ValueError("Please provide a valid email.") from exc
    return value


class RegisterUserDTO(BaseModel):
    """Immutable DTO for registration requests.

    Validates:
    - ``name`` is non-empty after trimming and at most 100 characters.
    - ``email`` is a well-formed address (normalised to lowercase).
    - ``password`` has at least 6 characters.
    - ``role`` is one of ``user``/``admin``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: str
    role: str = Role.USER.value

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please provide a name.")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"Name cannot exceed {NAME_MAX_LENGTH} characters.")
        return v

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        return _normalise_email(v)

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters."
            )
        return v

    @field_validator("role", mode="before")
    @classmethod
    def role_must_be_known(cls, v: str | None) -> str:
        if v is None or v == "":
            return Role.USER.value
        if v not in Role.values:
            raise ValueError(f"Role must be one of: {', '.join(Role.values)}.")
        return v


class LoginDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        return _normalise_email(v)

    @field_validator("password")
    @classmethod
    def password_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Please provide a password.")
        return v

