"""Django ORM implementation of the User repository.

Methods return ``None`` for missing rows instead of raising; the service
decides what a missing user means.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.accounts.models import User
from modules.accounts.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class UserDjangoRepository(IUserRepository):
    def get_by_id(self, id: str) -> Optional[User]:
        try:
            return User.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_email(self, email: str) -> Optional[User]:
        return User.objects.filter(email__iexact=email.strip()).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[User]:
        queryset = User.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def create_user(self, email: str, password: str, **fields) -> User:
        return User.objects.create_user(email=email, password=password, **fields)

    @transaction.atomic
    def save(self, entity: User) -> User:
        entity.save()
        logger.info("user.saved", user_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Deactivate the account; users are never removed physically."""
        user = self.get_by_id(id)
        if not user:
            return False
        user.is_active = False
        user.save(update_fields=["is_active"])
        logger.info("user.deactivated", user_id=str(id))
        return True
