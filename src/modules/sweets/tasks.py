"""Asynchronous tasks for the sweets module."""

import structlog
from celery import shared_task
from django.conf import settings

logger = structlog.get_logger(__name__)


@shared_task(name="sweets.notify_low_stock")
def notify_low_stock(sweet_id: str, name: str, remaining: int):
    """Raise a low-stock alert for a sweet that needs restocking."""
    threshold = settings.LOW_STOCK_THRESHOLD
    logger.warning(
        "sweet.low_stock",
        sweet_id=sweet_id,
        name=name,
        remaining=remaining,
        threshold=threshold,
    )
    return {
        "sweet_id": sweet_id,
        "name": name,
        "remaining": remaining,
        "threshold": threshold,
        "out_of_stock": remaining == 0,
    }
