"""Authentication service layer (Use Cases).

Registration hashes the password and issues a token; login compares the
password hash and issues a token; profile look-up backs ``/auth/me/``.
Persistence goes through the injected ``IUserRepository``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import structlog
from django.conf import settings
from django.db import transaction

from modules.accounts.exceptions import (
    AdminRegistrationDisabled,
    InvalidCredentials,
    UserAlreadyExists,
    UserNotFound,
)
from modules.accounts.models import Role
from modules.accounts.tokens import issue_access_token

if TYPE_CHECKING:
    from modules.accounts.dtos import LoginDTO, RegisterUserDTO
    from modules.accounts.models import User
    from modules.accounts.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class AuthService:
    """Application service for account use-cases."""

    def __init__(self, repository: IUserRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def register(self, dto: RegisterUserDTO) -> Tuple[User, str]:
        """Create an account and return it with a fresh token.

        Raises:
            AdminRegistrationDisabled: ``role=admin`` requested while
                ``ALLOW_ADMIN_REGISTRATION`` is off.
            UserAlreadyExists: the email is already registered.
        """
        log = logger.bind(role=dto.role)

        if dto.role == Role.ADMIN and not settings.ALLOW_ADMIN_REGISTRATION:
            log.warning("auth.admin_registration_blocked")
            raise AdminRegistrationDisabled("Registering as admin is not allowed.")

        if self._repo.get_by_email(dto.email):
            log.warning("auth.duplicate_email")
            raise UserAlreadyExists("User with this email already exists.")

        user = self._repo.create_user(
            email=dto.email,
            password=dto.password,
            name=dto.name,
            role=dto.role,
        )
        log.info("auth.registered", user_id=str(user.id))
        return user, issue_access_token(user)

    def login(self, dto: LoginDTO) -> Tuple[User, str]:
        """Check credentials and return the user with a fresh token.

        Raises:
            InvalidCredentials: unknown email, wrong password or inactive user.
        """
        user = self._repo.get_by_email(dto.email)
        if user is None:
            logger.warning("auth.login_failed", reason="unknown_email")
            raise InvalidCredentials("Invalid credentials.")

        if not user.check_password(dto.password) or not user.is_active:
            logger.warning(
                "auth.login_failed",
                reason="bad_password_or_inactive",
                user_id=str(user.id),
            )
            raise InvalidCredentials("Invalid credentials.")

        logger.info("auth.logged_in", user_id=str(user.id))
        return user, issue_access_token(user)

    def get_profile(self, user_id: str) -> User:
        """Raises ``UserNotFound`` when the account vanished after token issue."""
        user = self._repo.get_by_id(user_id)
        if not user:
            raise UserNotFound(f"User {user_id} not found.")
        return user
