"""User repository interface.

Extends ``IRepository[User]`` with the email look-up needed for login and
for the unique-email rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.accounts.models import User


class IUserRepository(IRepository["User"]):
    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by (case-insensitive) email."""

    @abstractmethod
    def create_user(self, email: str, password: str, **fields) -> User:
        """Create a user, hashing ``password``."""
