"""Sweet model: the shop's product, with its inventory counter.

Business rules implemented:
- Name is trimmed and unique among live (not soft-deleted) sweets.
- Category is one of a fixed set; ``Other`` by default.
- Price cannot be negative (application check + DB constraint).
- Quantity cannot be negative (``PositiveIntegerField``).
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import SoftDeleteModel
from modules.sweets.events import SweetDeleted, SweetPurchased, SweetRestocked
from modules.sweets.exceptions import InsufficientStock, StockLimitExceeded
from shared.domain.events import DomainEventMixin

PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200?text=Sweet"
IMAGE_MAX_LENGTH = 500
# Largest value a PositiveIntegerField holds on every supported backend
QUANTITY_MAX = 2_147_483_647


class SweetCategory(models.TextChoices):
    CHOCOLATE = "Chocolate", "Chocolate"
    CANDY = "Candy", "Candy"
    GUMMY = "Gummy", "Gummy"
    LOLLIPOP = "Lollipop", "Lollipop"
    CAKE = "Cake", "Cake"
    COOKIE = "Cookie", "Cookie"
    OTHER = "Other", "Other"


class Sweet(DomainEventMixin, SoftDeleteModel):
    """Sweet aggregate root.

    Collects domain events (purchase, restock, ...) that the repository
    publishes once the row is saved.
    """

    name = models.CharField(max_length=100)
    category = models.CharField(
        max_length=20,
        choices=SweetCategory.choices,
        default=SweetCategory.OTHER,
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    quantity = models.PositiveIntegerField(default=0)
    description = models.TextField(blank=True, default="")
    image = models.URLField(max_length=IMAGE_MAX_LENGTH, blank=True, default=PLACEHOLDER_IMAGE)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="sweets",
    )

    class Meta:
        db_table = "sweets"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["category"], name="sweets_category_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["name"],
                condition=models.Q(deleted_at__isnull=True),
                name="sweets_name_unique_alive",
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="sweets_price_non_negative",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if self.name:
            self.name = self.name.strip()
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})
        if self.quantity is not None and self.quantity < 0:
            raise ValidationError({"quantity": "Quantity cannot be negative."})

    def save(self, *args, **kwargs) -> None:
        if self.name:
            self.name = self.name.strip()
        if not self.image:
            self.image = PLACEHOLDER_IMAGE
        super().save(*args, **kwargs)

    def purchase(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock.

        Raises:
            InsufficientStock: if fewer than ``quantity`` units remain.
        """
        if quantity > self.quantity:
            raise InsufficientStock(
                "Not enough stock available",
                available=self.quantity,
                requested=quantity,
            )
        self.quantity -= quantity
        self.add_domain_event(
            SweetPurchased(
                aggregate_id=self.id,
                name=self.name,
                quantity=quantity,
                remaining=self.quantity,
            )
        )

    def restock(self, quantity: int) -> None:
        """Put ``quantity`` units back on the shelf.

        Raises:
            StockLimitExceeded: if the new stock would not fit in the column.
        """
        if self.quantity + quantity > QUANTITY_MAX:
            raise StockLimitExceeded(
                f"Stock cannot exceed {QUANTITY_MAX} units",
                available=self.quantity,
                requested=quantity,
            )
        self.quantity += quantity
        self.add_domain_event(
            SweetRestocked(
                aggregate_id=self.id,
                name=self.name,
                quantity=quantity,
                remaining=self.quantity,
            )
        )

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        result = super().delete(using=using, keep_parents=keep_parents)
        if result[0]:
            self.add_domain_event(SweetDeleted(aggregate_id=self.id, name=self.name))
        return result

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
