"""Integration tests for the error envelope."""

import pytest

pytestmark = pytest.mark.integration


class TestErrorEnvelope:
    def test_auth_error_has_envelope(self, api_client):
        response = api_client.get("/api/v1/auth/me/")
        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Not authorized, no token provided.",
        }

    def test_malformed_json_is_400(self, admin_client):
        response = admin_client.post(
            "/api/v1/sweets/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"]

    def test_validation_error_lists_fields(self, admin_client):
        response = admin_client.post("/api/v1/sweets/", {}, format="json")
        assert response.status_code == 400
        body = response.json()
        fields = {e["field"] for e in body["errors"]}
        assert {"name", "category", "price"} <= fields
        assert all(set(e) == {"field", "message"} for e in body["errors"])

    def test_method_not_allowed(self, admin_client, sweet):
        response = admin_client.get(f"/api/v1/sweets/{sweet.id}/purchase/")
        assert response.status_code == 405
        assert response.json()["success"] is False

    def test_forbidden_has_envelope(self, customer_client):
        response = customer_client.post("/api/v1/sweets/", {}, format="json")
        assert response.status_code == 403
        assert response.json()["success"] is False

