from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from django.contrib.auth.models import AnonymousUser

from modules.accounts.permissions import IsAdminRole

pytestmark = pytest.mark.unit


def _request(user):
    request = MagicMock()
    request.user = user
    return request


class TestIsAdminRole:
    def test_admin_allowed(self, admin_user):
        assert IsAdminRole().has_permission(_request(admin_user), view=None) is True

    def test_regular_user_denied(self, customer):
        assert IsAdminRole().has_permission(_request(customer), view=None) is False

    def test_anonymous_denied(self):
        assert IsAdminRole().has_permission(_request(AnonymousUser()), view=None) is False

    def test_denial_message(self):
        assert IsAdminRole.message == "User role is not authorized to access this route."
