"""Event handlers for Sweets domain events."""

from __future__ import annotations

import structlog
from django.conf import settings
from django.db import transaction

from modules.sweets.events import SweetCreated, SweetDeleted, SweetPurchased, SweetRestocked
from modules.sweets.tasks import notify_low_stock
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class SweetCreatedHandler(IEventHandler[SweetCreated]):
    def handle(self, event: SweetCreated) -> None:
        logger.info("sweet.event.created", sweet_id=str(event.aggregate_id), name=event.name)


class SweetPurchasedHandler(IEventHandler[SweetPurchased]):
    """Logs the sale and queues a low-stock alert once the sale is committed."""

    def handle(self, event: SweetPurchased) -> None:
        sweet_id = str(event.aggregate_id)
        logger.info(
            "sweet.event.purchased",
            sweet_id=sweet_id,
            quantity=event.quantity,
            remaining=event.remaining,
        )
        if event.remaining <= settings.LOW_STOCK_THRESHOLD:
            transaction.on_commit(
                lambda: notify_low_stock.delay(sweet_id, event.name, event.remaining)
            )


class SweetRestockedHandler(IEventHandler[SweetRestocked]):
    def handle(self, event: SweetRestocked) -> None:
        logger.info(
            "sweet.event.restocked",
            sweet_id=str(event.aggregate_id),
            quantity=event.quantity,
            remaining=event.remaining,
        )


class SweetDeletedHandler(IEventHandler[SweetDeleted]):
    def handle(self, event: SweetDeleted) -> None:
        logger.info("sweet.event.deleted", sweet_id=str(event.aggregate_id), name=event.name)


sweet_created_handler = SweetCreatedHandler()
sweet_purchased_handler = SweetPurchasedHandler()
sweet_restocked_handler = SweetRestockedHandler()
sweet_deleted_handler = SweetDeletedHandler()
