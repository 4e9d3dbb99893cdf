"""Sweet repository interface.

Extends ``IRepository[Sweet]`` with the name look-up behind the unique
name rule and the locking read used by purchase/restock.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.sweets.models import Sweet


class ISweetRepository(IRepository["Sweet"]):
    """Repository contract for the Sweet aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Sweet]":
        """List live sweets with optional filters."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Sweet]:
        """Retrieve the live sweet with exactly this (trimmed) name."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional["Sweet"]:
        """Retrieve a live sweet with a row-level lock (SELECT FOR UPDATE).

        Must run inside a transaction.  Returns ``None`` if the sweet does
        not exist.
        """
