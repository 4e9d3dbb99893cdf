import pytest

pytestmark = pytest.mark.integration


class TestOpenAPISchema:
    def test_schema_is_public(self, api_client):
        response = api_client.get("/api/schema/", HTTP_ACCEPT="application/json")
        assert response.status_code == 200

    def test_schema_lists_sweet_routes(self, api_client):
        paths = api_client.get("/api/schema/", HTTP_ACCEPT="application/json").json()["paths"]
        assert "/api/v1/sweets/" in paths
        assert "/api/v1/sweets/search/" in paths
        assert any(p.endswith("/purchase/") for p in paths)
        assert any(p.endswith("/restock/") for p in paths)
        assert "/api/v1/auth/login/" in paths
