"""Unit tests for SweetService.

Covers:
- create_sweet: happy path, duplicate name, lost race on the unique index.
- update_sweet: partial update, rename collisions, not found.
- delete_sweet / get_sweet / list_sweets: delegation and not found.
- purchase / restock: locked read, stock rules, not found.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from django.db import IntegrityError

from modules.sweets.dtos import CreateSweetDTO, StockChangeDTO, UpdateSweetDTO
from modules.sweets.events import SweetCreated, SweetPurchased
from modules.sweets.exceptions import (
    InsufficientStock,
    StockLimitExceeded,
    SweetAlreadyExists,
    SweetNotFound,
)
from modules.sweets.models import QUANTITY_MAX, Sweet
from modules.sweets.services import SweetService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda s: s
    return repo


@pytest.fixture()
def service(mock_repo):
    return SweetService(repository=mock_repo)


def _make_sweet(**overrides) -> Sweet:
    fields = {
        "name": "Gummy Bears",
        "category": "Gummy",
        "price": Decimal("1.49"),
        "quantity": 10,
    }
    fields.update(overrides)
    return Sweet(**fields)


def _create_dto(**overrides) -> CreateSweetDTO:
    fields = {
        "name": "Gummy Bears",
        "category": "Gummy",
        "price": "1.49",
        "quantity": 10,
        "created_by_id": uuid4(),
    }
    fields.update(overrides)
    return CreateSweetDTO(**fields)


# ===========================================================================
# create_sweet
# ===========================================================================


class TestCreateSweet:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        dto = _create_dto(description="Chewy", image="https://example.com/bears.png")

        sweet = service.create_sweet(dto)

        assert sweet.name == "Gummy Bears"
        assert sweet.price == Decimal("1.49")
        assert sweet.quantity == 10
        assert sweet.created_by_id == dto.created_by_id
        assert sweet.image == "https://example.com/bears.png"
        mock_repo.save.assert_called_once_with(sweet)

    def test_records_created_event(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None

        sweet = service.create_sweet(_create_dto())

        [event] = sweet.domain_events
        assert isinstance(event, SweetCreated)
        assert event.aggregate_id == sweet.id

    def test_without_image_keeps_model_default(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None

        sweet = service.create_sweet(_create_dto())

        assert sweet.image == Sweet._meta.get_field("image").default

    def test_duplicate_name_raises(self, service, mock_repo):
        mock_repo.get_by_name.return_value = _make_sweet()

        with pytest.raises(SweetAlreadyExists, match="A sweet with this name already exists"):
            service.create_sweet(_create_dto())

        mock_repo.save.assert_not_called()

    def test_integrity_error_maps_to_duplicate(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        mock_repo.save.side_effect = IntegrityError("UNIQUE constraint failed")

        with pytest.raises(SweetAlreadyExists):
            service.create_sweet(_create_dto())


# ===========================================================================
# update_sweet
# ===========================================================================


class TestUpdateSweet:
    def test_partial_update(self, service, mock_repo):
        existing = _make_sweet()
        mock_repo.get_by_id.return_value = existing

        sweet = service.update_sweet(str(existing.id), UpdateSweetDTO(price="2.00"))

        assert sweet.price == Decimal("2.00")
        assert sweet.name == "Gummy Bears"
        assert sweet.quantity == 10

    def test_rename_to_free_name(self, service, mock_repo):
        existing = _make_sweet()
        mock_repo.get_by_id.return_value = existing
        mock_repo.get_by_name.return_value = None

        sweet = service.update_sweet(str(existing.id), UpdateSweetDTO(name="Jelly Bears"))

        assert sweet.name == "Jelly Bears"

    def test_rename_onto_other_sweet_raises(self, service, mock_repo):
        existing = _make_sweet()
        mock_repo.get_by_id.return_value = existing
        mock_repo.get_by_name.return_value = _make_sweet(name="Fudge")

        with pytest.raises(SweetAlreadyExists):
            service.update_sweet(str(existing.id), UpdateSweetDTO(name="Fudge"))

        mock_repo.save.assert_not_called()

    def test_keeping_own_name_is_not_a_duplicate(self, service, mock_repo):
        existing = _make_sweet()
        mock_repo.get_by_id.return_value = existing

        service.update_sweet(str(existing.id), UpdateSweetDTO(name="Gummy Bears", quantity=3))

        mock_repo.get_by_name.assert_not_called()
        assert existing.quantity == 3

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(SweetNotFound):
            service.update_sweet(str(uuid4()), UpdateSweetDTO(price="1.00"))


# ===========================================================================
# delete / get / list
# ===========================================================================


class TestDeleteSweet:
    def test_success(self, service, mock_repo):
        existing = _make_sweet()
        mock_repo.get_by_id.return_value = existing

        service.delete_sweet(str(existing.id))

        mock_repo.delete.assert_called_once_with(str(existing.id))

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(SweetNotFound):
            service.delete_sweet(str(uuid4()))

        mock_repo.delete.assert_not_called()


class TestQueries:
    def test_get_sweet(self, service, mock_repo):
        existing = _make_sweet()
        mock_repo.get_by_id.return_value = existing

        assert service.get_sweet(str(existing.id)) is existing

    def test_get_sweet_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(SweetNotFound):
            service.get_sweet("not-a-uuid")

    def test_list_delegates_filters(self, service, mock_repo):
        service.list_sweets({"category": "Cake"})

        mock_repo.list.assert_called_once_with({"category": "Cake"})


# ===========================================================================
# purchase / restock
# ===========================================================================


class TestPurchase:
    def test_success_uses_locked_read(self, service, mock_repo):
        existing = _make_sweet(quantity=10)
        mock_repo.get_for_update.return_value = existing

        sweet = service.purchase(str(existing.id), StockChangeDTO(quantity=3))

        assert sweet.quantity == 7
        mock_repo.get_for_update.assert_called_once_with(str(existing.id))
        mock_repo.get_by_id.assert_not_called()
        mock_repo.save.assert_called_once_with(existing)
        assert isinstance(sweet.domain_events[0], SweetPurchased)

    def test_insufficient_stock(self, service, mock_repo):
        existing = _make_sweet(quantity=2)
        mock_repo.get_for_update.return_value = existing

        with pytest.raises(InsufficientStock, match="Not enough stock available"):
            service.purchase(str(existing.id), StockChangeDTO(quantity=3))

        assert existing.quantity == 2
        mock_repo.save.assert_not_called()

    def test_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(SweetNotFound):
            service.purchase(str(uuid4()), StockChangeDTO())


class TestRestock:
    def test_success(self, service, mock_repo):
        existing = _make_sweet(quantity=0)
        mock_repo.get_for_update.return_value = existing

        sweet = service.restock(str(existing.id), StockChangeDTO(quantity=25))

        assert sweet.quantity == 25
        mock_repo.save.assert_called_once_with(existing)

    def test_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(SweetNotFound):
            service.restock(str(uuid4()), StockChangeDTO(quantity=5))

    def test_stock_ceiling(self, service, mock_repo):
        existing = _make_sweet(quantity=QUANTITY_MAX)
        mock_repo.get_for_update.return_value = existing

        with pytest.raises(StockLimitExceeded):
            service.restock(str(existing.id), StockChangeDTO(quantity=1))

        assert existing.quantity == QUANTITY_MAX
        mock_repo.save.assert_not_called()
