"""Unit tests for the low-stock Celery task."""

from __future__ import annotations

import pytest

from modules.sweets.tasks import notify_low_stock

pytestmark = pytest.mark.unit


class TestNotifyLowStock:
    def test_registered_name(self):
        assert notify_low_stock.name == "sweets.notify_low_stock"

    def test_direct_call_returns_summary(self):
        result = notify_low_stock("abc", "Fudge", 4)
        assert result == {
            "sweet_id": "abc",
            "name": "Fudge",
            "remaining": 4,
            "threshold": 10,
            "out_of_stock": False,
        }

    def test_eager_delay(self):
        result = notify_low_stock.delay("abc", "Fudge", 0)
        assert result.successful()
        assert result.result["out_of_stock"] is True

    def test_logs_warning(self, caplog):
        import logging

        with caplog.at_level(logging.WARNING):
            notify_low_stock("abc", "Fudge", 2)

        assert any("sweet.low_stock" in r.getMessage() for r in caplog.records)
