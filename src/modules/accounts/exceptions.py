"""Account domain exceptions.

Raised by ``AuthService``; the views translate them into HTTP responses.
"""

from __future__ import annotations


class UserAlreadyExists(Exception):
    """A user with the same email is already registered."""


class InvalidCredentials(Exception):
    """Unknown email, wrong password or inactive account.

    Deliberately a single error so the API does not reveal which check failed.
    """


class UserNotFound(Exception):
    """The user referenced by a token no longer exists."""


class AdminRegistrationDisabled(Exception):
    """Self-registration with the ``admin`` role is switched off."""
