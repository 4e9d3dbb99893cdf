from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.accounts.models import Role, User
from modules.accounts.tokens import issue_access_token
from modules.sweets.models import Sweet, SweetCategory


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


@pytest.fixture()
def customer():
    """A regular shop user."""
    return User.objects.create_user(
        email="jane@example.com",
        password="secret123",
        name="Jane Doe",
    )


@pytest.fixture()
def admin_user():
    return User.objects.create_user(
        email="admin@example.com",
        password="admin123",
        name="Shop Admin",
        role=Role.ADMIN,
    )


def _bearer_client(user: User) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_access_token(user)}")
    return client


@pytest.fixture()
def customer_client(customer):
    """APIClient authenticated with a real bearer token for ``customer``."""
    return _bearer_client(customer)


@pytest.fixture()
def admin_client(admin_user):
    """APIClient authenticated with a real bearer token for ``admin_user``."""
    return _bearer_client(admin_user)


# ---------------------------------------------------------------------------
# Sweets
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_sweet(admin_user):
    """Factory for persisted sweets created by ``admin_user``."""

    def _make(**overrides) -> Sweet:
        defaults = {
            "name": "Gummy Bears",
            "category": SweetCategory.GUMMY,
            "price": Decimal("1.49"),
            "quantity": 20,
            "description": "Colorful fruity gummy bears",
            "created_by": admin_user,
        }
        defaults.update(overrides)
        return Sweet.objects.create(**defaults)

    return _make


@pytest.fixture()
def sweet(make_sweet):
    return make_sweet()
