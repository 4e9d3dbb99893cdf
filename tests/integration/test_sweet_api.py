"""Integration tests for the sweets catalogue endpoints.

Covers:
- Public browsing (list, retrieve).
- Admin-only writes (create, update, delete) and their role checks.
- Domain exception mapping (400 duplicate name, 404 missing/deleted).
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.sweets.models import PLACEHOLDER_IMAGE, Sweet

pytestmark = pytest.mark.integration

SWEETS_URL = "/api/v1/sweets/"


def _detail(sweet_id) -> str:
    return f"{SWEETS_URL}{sweet_id}/"


def _payload(**overrides) -> dict:
    payload = {
        "name": "Dark Chocolate Truffle",
        "category": "Chocolate",
        "price": 3.99,
        "quantity": 80,
        "description": "Rich dark chocolate truffle",
    }
    payload.update(overrides)
    return payload


# ===========================================================================
# LIST / RETRIEVE (public)
# ===========================================================================


class TestSweetList:
    def test_list_is_public(self, api_client):
        response = api_client.get(SWEETS_URL)

        assert response.status_code == 200
        assert response.json() == {"success": True, "count": 0, "data": []}

    def test_list_returns_sweets_sorted_by_name(self, api_client, make_sweet):
        make_sweet(name="Toffee")
        make_sweet(name="Brittle")

        body = api_client.get(SWEETS_URL).json()

        assert body["count"] == 2
        assert [s["name"] for s in body["data"]] == ["Brittle", "Toffee"]

    def test_list_item_shape(self, api_client, sweet, admin_user):
        item = api_client.get(SWEETS_URL).json()["data"][0]

        assert item["id"] == str(sweet.id)
        assert item["price"] == 1.49
        assert item["quantity"] == 20
        assert item["category"] == "Gummy"
        assert item["created_by"] == {
            "id": str(admin_user.id),
            "name": "Shop Admin",
            "email": "admin@example.com",
        }

    def test_list_hides_deleted(self, api_client, sweet):
        sweet.delete()

        assert api_client.get(SWEETS_URL).json()["count"] == 0

    def test_list_accepts_search_filters(self, api_client, make_sweet):
        make_sweet(name="Lemon Drop", category="Candy")
        make_sweet(name="Gummy Worms", category="Gummy")

        body = api_client.get(SWEETS_URL, {"category": "Candy"}).json()

        assert [s["name"] for s in body["data"]] == ["Lemon Drop"]


class TestSweetRetrieve:
    def test_retrieve_is_public(self, api_client, sweet):
        response = api_client.get(_detail(sweet.id))

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["data"]["name"] == "Gummy Bears"

    def test_retrieve_not_found(self, api_client):
        response = api_client.get(_detail(uuid4()))

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Sweet not found"}

    def test_retrieve_malformed_id(self, api_client):
        assert api_client.get(_detail("not-a-uuid")).status_code == 404

    def test_retrieve_deleted(self, api_client, sweet):
        sweet.delete()

        assert api_client.get(_detail(sweet.id)).status_code == 404


# ===========================================================================
# CREATE (admin)
# ===========================================================================


class TestSweetCreate:
    def test_admin_creates_sweet(self, admin_client, admin_user):
        response = admin_client.post(SWEETS_URL, _payload(), format="json")

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Dark Chocolate Truffle"
        assert data["price"] == 3.99
        assert data["image"] == PLACEHOLDER_IMAGE
        assert data["created_by"]["id"] == str(admin_user.id)
        assert Sweet.objects.get(id=data["id"]).price == Decimal("3.99")

    def test_defaults_when_optional_fields_missing(self, admin_client):
        response = admin_client.post(
            SWEETS_URL, {"name": "Fudge", "category": "Other", "price": 2}, format="json"
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["quantity"] == 0
        assert data["description"] == ""

    def test_created_by_cannot_be_spoofed(self, admin_client, admin_user, customer):
        response = admin_client.post(
            SWEETS_URL, _payload(created_by=str(customer.id)), format="json"
        )

        assert response.json()["data"]["created_by"]["id"] == str(admin_user.id)

    def test_duplicate_name(self, admin_client, make_sweet):
        make_sweet(name="Dark Chocolate Truffle")

        response = admin_client.post(SWEETS_URL, _payload(), format="json")

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "A sweet with this name already exists",
        }

    def test_name_of_deleted_sweet_is_reusable(self, admin_client, make_sweet):
        make_sweet(name="Dark Chocolate Truffle").delete()

        response = admin_client.post(SWEETS_URL, _payload(), format="json")

        assert response.status_code == 201

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"name": ""}, "name"),
            ({"category": "Biscuit"}, "category"),
            ({"price": -1}, "price"),
            ({"price": "free"}, "price"),
            ({"quantity": -5}, "quantity"),
            ({"quantity": 2.5}, "quantity"),
            ({"quantity": 10**20}, "quantity"),
            ({"quantity": True}, "quantity"),
            ({"image": "https://example.com/" + "a" * 600}, "image"),
        ],
    )
    def test_validation_errors(self, admin_client, overrides, field):
        response = admin_client.post(SWEETS_URL, _payload(**overrides), format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["errors"][0]["field"] == field
        assert Sweet.objects.count() == 0

    def test_missing_category(self, admin_client):
        payload = _payload()
        del payload["category"]

        response = admin_client.post(SWEETS_URL, payload, format="json")

        assert response.status_code == 400

    def test_regular_user_forbidden(self, customer_client):
        response = customer_client.post(SWEETS_URL, _payload(), format="json")

        assert response.status_code == 403
        assert response.json() == {
            "success": False,
            "message": "User role is not authorized to access this route.",
        }

    def test_anonymous_unauthorized(self, api_client):
        response = api_client.post(SWEETS_URL, _payload(), format="json")

        assert response.status_code == 401


# ===========================================================================
# UPDATE (admin)
# ===========================================================================


class TestSweetUpdate:
    def test_put_is_partial(self, admin_client, sweet):
        response = admin_client.put(_detail(sweet.id), {"price": 2.25}, format="json")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["price"] == 2.25
        assert data["name"] == "Gummy Bears"
        assert data["quantity"] == 20

    def test_patch(self, admin_client, sweet):
        response = admin_client.patch(
            _detail(sweet.id), {"description": "Now with more bears"}, format="json"
        )

        assert response.status_code == 200
        sweet.refresh_from_db()
        assert sweet.description == "Now with more bears"

    def test_rename_onto_existing_name(self, admin_client, make_sweet):
        make_sweet(name="Fudge")
        target = make_sweet(name="Toffee")

        response = admin_client.put(_detail(target.id), {"name": "Fudge"}, format="json")

        assert response.status_code == 400
        target.refresh_from_db()
        assert target.name == "Toffee"

    def test_invalid_field(self, admin_client, sweet):
        response = admin_client.put(_detail(sweet.id), {"quantity": -1}, format="json")

        assert response.status_code == 400

    def test_oversized_quantity(self, admin_client, sweet):
        response = admin_client.patch(_detail(sweet.id), {"quantity": 10**20}, format="json")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "quantity"
        sweet.refresh_from_db()
        assert sweet.quantity == 20

    def test_not_found(self, admin_client):
        response = admin_client.put(_detail(uuid4()), {"price": 1}, format="json")

        assert response.status_code == 404

    def test_regular_user_forbidden(self, customer_client, sweet):
        response = customer_client.put(_detail(sweet.id), {"price": 0}, format="json")

        assert response.status_code == 403
        sweet.refresh_from_db()
        assert sweet.price == Decimal("1.49")


# ===========================================================================
# DELETE (admin)
# ===========================================================================


class TestSweetDelete:
    def test_admin_deletes(self, admin_client, sweet):
        response = admin_client.delete(_detail(sweet.id))

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Sweet deleted successfully"}
        sweet.refresh_from_db()
        assert sweet.is_deleted

    def test_delete_twice(self, admin_client, sweet):
        admin_client.delete(_detail(sweet.id))

        assert admin_client.delete(_detail(sweet.id)).status_code == 404

    def test_regular_user_forbidden(self, customer_client, sweet):
        assert customer_client.delete(_detail(sweet.id)).status_code == 403

    def test_anonymous_unauthorized(self, api_client, sweet):
        assert api_client.delete(_detail(sweet.id)).status_code == 401
