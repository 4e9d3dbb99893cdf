"""Integration tests for the Celery configuration."""

import pytest

pytestmark = pytest.mark.integration


class TestCeleryConfig:
    """Celery loads its configuration from Django settings."""

    def test_celery_app_is_importable(self):
        from config.celery import app

        assert app.main == "sweetshop"

    def test_celery_app_exported_from_init(self):
        from config import celery_app

        assert celery_app.main == "sweetshop"

    def test_celery_serializer_is_json(self, settings):
        assert settings.CELERY_TASK_SERIALIZER == "json"
        assert settings.CELERY_RESULT_SERIALIZER == "json"
        assert settings.CELERY_ACCEPT_CONTENT == ["json"]

    def test_celery_timezone_matches_django(self, settings):
        assert settings.CELERY_TIMEZONE == settings.TIME_ZONE

    def test_low_stock_task_is_registered(self):
        from config.celery import app

        app.loader.import_default_modules()
        assert "sweets.notify_low_stock" in app.tasks
