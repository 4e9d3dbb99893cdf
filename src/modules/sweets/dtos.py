"""Sweet DTOs for the Service Layer.

Framework-agnostic, immutable (``frozen=True``) Pydantic v2 contracts
between the API views and ``SweetService``.

- ``CreateSweetDTO``: input for sweet creation.
- ``UpdateSweetDTO``: partial update; only supplied fields are applied.
- ``StockChangeDTO``: quantity for purchase/restock (defaults to 1).
"""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator
from pydantic import BaseModel, ConfigDict, field_validator

from modules.sweets.models import IMAGE_MAX_LENGTH, QUANTITY_MAX, SweetCategory

NAME_MAX_LENGTH = 100
PRICE_LIMIT = Decimal("100000000")
CENT = Decimal("0.01")

_url_validator = URLValidator(schemes=["http", "https"])


# ---------------------------------------------------------------------------
# Shared field rules
# ---------------------------------------------------------------------------


def _check_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Please provide a sweet name.")
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(f"Sweet name cannot exceed {NAME_MAX_LENGTH} characters.")
    return v


def _check_category(v: str) -> str:
    if v not in SweetCategory.values:
        raise ValueError(f"Category must be one of: {', '.join(SweetCategory.values)}.")
    return v


def _check_price(v: Decimal) -> Decimal:
    if not v.is_finite():
        raise ValueError("Price must be a number.")
    if v < 0:
        raise ValueError("Price cannot be negative.")
    if v >= PRICE_LIMIT:
        raise ValueError("Price is too large.")
    if v != v.quantize(CENT):
        raise ValueError("Price can have at most 2 decimal places.")
    return v.quantize(CENT)


def _reject_bool(v):
    # JSON true/false would otherwise coerce to 1/0
    if isinstance(v, bool):
        raise ValueError("Quantity must be a whole number.")
    return v


def _check_quantity(v: int) -> int:
    if v < 0:
        raise ValueError("Quantity cannot be negative.")
    if v > QUANTITY_MAX:
        raise ValueError(f"Quantity cannot exceed {QUANTITY_MAX}.")
    return v


def _check_image(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    if not v:
        return None
    if len(v) > IMAGE_MAX_LENGTH:
        raise ValueError(f"Image URL cannot exceed {IMAGE_MAX_LENGTH} characters.")
    try:
        _url_validator(v)
    except DjangoValidationError as exc:
        raise ValueError("Image must be a valid http(s) URL.") from exc
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateSweetDTO(BaseModel):
    """Immutable DTO for sweet creation requests.

    ``image`` falls back to the placeholder when omitted or blank.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    price: Decimal
    created_by_id: UUID
    quantity: int = 0
    description: str = ""
    image: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("category")
    @classmethod
    def category_must_be_known(cls, v: str) -> str:
        return _check_category(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        return _check_price(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_must_not_be_bool(cls, v):
        return _reject_bool(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int) -> int:
        return _check_quantity(v)

    @field_validator("description", mode="before")
    @classmethod
    def description_defaults_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v

    @field_validator("image")
    @classmethod
    def image_must_be_url(cls, v: str | None) -> str | None:
        return _check_image(v)


class UpdateSweetDTO(BaseModel):
    """Immutable DTO for sweet update requests.

    All fields are optional; ``None`` means "leave unchanged".
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    category: str | None = None
    price: Decimal | None = None
    quantity: int | None = None
    description: str | None = None
    image: str | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        return None if v is None else _check_name(v)

    @field_validator("category")
    @classmethod
    def category_must_be_known(cls, v: str | None) -> str | None:
        return None if v is None else _check_category(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal | None) -> Decimal | None:
        return None if v is None else _check_price(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_must_not_be_bool(cls, v):
        return _reject_bool(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int | None) -> int | None:
        return None if v is None else _check_quantity(v)

    @field_validator("image")
    @classmethod
    def image_must_be_url(cls, v: str | None) -> str | None:
        return None if v is None else _check_image(v)

    def changes(self) -> dict:
        """Fields that were supplied, ready to set on the entity."""
        return self.model_dump(exclude_none=True)


class StockChangeDTO(BaseModel):
    """Quantity for a purchase or a restock.

    Missing or ``null`` means 1; anything else must be an integer >= 1.
    """

    model_config = ConfigDict(frozen=True)

    quantity: int = 1

    @field_validator("quantity", mode="before")
    @classmethod
    def default_to_one(cls, v):
        return 1 if v is None else _reject_bool(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        if v > QUANTITY_MAX:
            raise ValueError(f"Quantity cannot exceed {QUANTITY_MAX}.")
        return v

