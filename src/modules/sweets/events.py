"""Domain events for the Sweets bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class SweetCreated(DomainEvent):
    """Raised when a sweet is added to the catalogue."""

    name: str = ""


@dataclass(frozen=True)
class SweetPurchased(DomainEvent):
    """Raised when units of a sweet are sold."""

    name: str = ""
    quantity: int = 0
    remaining: int = 0


@dataclass(frozen=True)
class SweetRestocked(DomainEvent):
    """Raised when units of a sweet are added to stock."""

    name: str = ""
    quantity: int = 0
    remaining: int = 0


@dataclass(frozen=True)
class SweetDeleted(DomainEvent):
    """Raised when a sweet is soft-deleted."""

    name: str = ""
