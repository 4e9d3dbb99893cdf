from django.apps import AppConfig


class SweetsConfig(AppConfig):
    name = "modules.sweets"
    label = "sweets"

    def ready(self) -> None:
        from modules.sweets.events import (
            SweetCreated,
            SweetDeleted,
            SweetPurchased,
            SweetRestocked,
        )
        from modules.sweets.handlers import (
            sweet_created_handler,
            sweet_deleted_handler,
            sweet_purchased_handler,
            sweet_restocked_handler,
        )
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(SweetCreated, sweet_created_handler)
        event_bus.subscribe(SweetPurchased, sweet_purchased_handler)
        event_bus.subscribe(SweetRestocked, sweet_restocked_handler)
        event_bus.subscribe(SweetDeleted, sweet_deleted_handler)
