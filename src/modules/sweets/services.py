"""Sweet service layer (Use Cases).

Orchestrates catalogue and inventory logic for the Sweet aggregate,
delegating persistence to the injected ``ISweetRepository``.

Business rules enforced here:
- Sweet names are unique among live sweets.
- Field rules (category, price >= 0, quantity >= 0) come validated in DTOs.
- Purchases never take stock below zero.
- Purchase and restock run on a row locked for the transaction.
- Deleting is a soft delete; deleted sweets behave as missing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.sweets.events import SweetCreated
from modules.sweets.exceptions import (
    InsufficientStock,
    StockLimitExceeded,
    SweetAlreadyExists,
    SweetNotFound,
)
from modules.sweets.models import Sweet

if TYPE_CHECKING:
    from django.db import models

    from modules.sweets.dtos import CreateSweetDTO, StockChangeDTO, UpdateSweetDTO
    from modules.sweets.repositories.interfaces import ISweetRepository

logger = structlog.get_logger(__name__)

DUPLICATE_NAME_MESSAGE = "A sweet with this name already exists"


class SweetService:
    """Application service for Sweet use-cases.

    Receives an ``ISweetRepository`` via constructor injection.
    """

    def __init__(self, repository: ISweetRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_sweet(self, dto: CreateSweetDTO) -> Sweet:
        """Add a sweet to the catalogue.

        Raises:
            SweetAlreadyExists: if a live sweet already has this name.
        """
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("sweet.duplicate_name")
            raise SweetAlreadyExists(DUPLICATE_NAME_MESSAGE)

        sweet = Sweet(
            name=dto.name,
            category=dto.category,
            price=dto.price,
            quantity=dto.quantity,
            description=dto.description,
            created_by_id=dto.created_by_id,
        )
        if dto.image:
            sweet.image = dto.image
        sweet.add_domain_event(SweetCreated(aggregate_id=sweet.id, name=sweet.name))

        sweet = self._save_unique(sweet)
        log.info("sweet.created", sweet_id=str(sweet.id))
        return sweet

    @transaction.atomic
    def update_sweet(self, id: str, dto: UpdateSweetDTO) -> Sweet:
        """Apply the supplied fields to an existing sweet.

        Raises:
            SweetNotFound: if the sweet does not exist.
            SweetAlreadyExists: if the new name belongs to another sweet.
        """
        sweet = self._get(id)
        changes = dto.changes()
        log = logger.bind(sweet_id=str(sweet.id))

        new_name = changes.get("name")
        if new_name is not None and new_name != sweet.name:
            other = self._repo.get_by_name(new_name)
            if other and other.id != sweet.id:
                log.warning("sweet.duplicate_name", name=new_name)
                raise SweetAlreadyExists(DUPLICATE_NAME_MESSAGE)

        for field, value in changes.items():
            setattr(sweet, field, value)

        sweet = self._save_unique(sweet)
        log.info("sweet.updated", fields=sorted(changes))
        return sweet

    @transaction.atomic
    def delete_sweet(self, id: str) -> Sweet:
        """Soft-delete a sweet.

        Raises:
            SweetNotFound: if the sweet does not exist.
        """
        sweet = self._get(id)
        self._repo.delete(str(sweet.id))
        logger.info("sweet.deleted", sweet_id=str(sweet.id))
        return sweet

    @transaction.atomic
    def purchase(self, id: str, dto: StockChangeDTO) -> Sweet:
        """Sell ``dto.quantity`` units.

        Raises:
            SweetNotFound: if the sweet does not exist.
            InsufficientStock: if fewer units are in stock than requested.
        """
        sweet = self._get_locked(id)
        log = logger.bind(sweet_id=str(sweet.id), quantity=dto.quantity)
        try:
            sweet.purchase(dto.quantity)
        except InsufficientStock:
            log.warning("sweet.insufficient_stock", available=sweet.quantity)
            raise
        sweet = self._repo.save(sweet)
        log.info("sweet.purchased", remaining=sweet.quantity)
        return sweet

    @transaction.atomic
    def restock(self, id: str, dto: StockChangeDTO) -> Sweet:
        """Add ``dto.quantity`` units to stock.

        Raises:
            SweetNotFound: if the sweet does not exist.
            StockLimitExceeded: if the new stock would overflow the counter.
        """
        sweet = self._get_locked(id)
        try:
            sweet.restock(dto.quantity)
        except StockLimitExceeded:
            logger.warning(
                "sweet.stock_limit_exceeded",
                sweet_id=str(sweet.id),
                quantity=dto.quantity,
                available=sweet.quantity,
            )
            raise
        sweet = self._repo.save(sweet)
        logger.info(
            "sweet.restocked",
            sweet_id=str(sweet.id),
            quantity=dto.quantity,
            remaining=sweet.quantity,
        )
        return sweet

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_sweets(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Sweet]":
        return self._repo.list(filters)

    def get_sweet(self, id: str) -> Sweet:
        """Retrieve a single live sweet.

        Raises:
            SweetNotFound: if the sweet does not exist.
        """
        return self._get(id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get(self, id: str) -> Sweet:
        sweet = self._repo.get_by_id(id)
        if not sweet:
            raise SweetNotFound(f"Sweet {id} not found.")
        return sweet

    def _get_locked(self, id: str) -> Sweet:
        sweet = self._repo.get_for_update(id)
        if not sweet:
            raise SweetNotFound(f"Sweet {id} not found.")
        return sweet

    def _save_unique(self, sweet: Sweet) -> Sweet:
        """Save, mapping a lost race on the unique name to the domain error."""
        try:
            with transaction.atomic():
                return self._repo.save(sweet)
        except IntegrityError as exc:
            logger.warning("sweet.duplicate_name", name=sweet.name, error=str(exc))
            raise SweetAlreadyExists(DUPLICATE_NAME_MESSAGE) from exc
