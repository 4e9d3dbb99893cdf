"""Django ORM implementation of the Sweet repository.

Every read is restricted to live rows, so a soft-deleted sweet looks
missing to the service.  Domain events collected on the aggregate are
published on the in-process event bus after each write.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.sweets.models import Sweet
from modules.sweets.repositories.interfaces import ISweetRepository
from shared.infrastructure.bus import event_bus

logger = structlog.get_logger(__name__)


class SweetDjangoRepository(ISweetRepository):
    """Concrete Sweet repository backed by Django ORM."""

    def _alive(self) -> "models.QuerySet[Sweet]":
        return Sweet.objects.alive().select_related("created_by")

    def get_by_id(self, id: str) -> Optional[Sweet]:
        """Return ``None`` for non-existent, deleted or malformed IDs."""
        try:
            return self._alive().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_name(self, name: str) -> Optional[Sweet]:
        return Sweet.objects.alive().filter(name=name.strip()).first()

    def get_for_update(self, id: str) -> Optional[Sweet]:
        try:
            return Sweet.objects.select_for_update().alive().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> "models.QuerySet[Sweet]":
        """List live sweets, ordered by name.

        Examples of valid filters::

            {"category": "Gummy"}
            {"name__icontains": "choc", "price__lte": 5}
        """
        queryset = self._alive()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(self, entity: Sweet) -> Sweet:
        """Persist (create or update) a sweet and publish its events."""
        entity.save()
        events = self._publish(entity)
        logger.info("sweet.saved", sweet_id=str(entity.id), event_count=len(events))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Soft-delete a sweet by ID.

        Returns ``False`` if no live sweet has the given ID.
        """
        sweet = self.get_by_id(id)
        if not sweet:
            return False
        sweet.delete()
        self._publish(sweet)
        logger.info("sweet.soft_deleted", sweet_id=str(id))
        return True

    @staticmethod
    def _publish(entity: Sweet) -> list:
        events = entity.domain_events
        event_bus.publish_all(events)
        entity.clear_domain_events()
        return events
