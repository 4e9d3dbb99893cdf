"""Sweet domain exceptions.

Raised by ``SweetService`` when a business rule is violated.  The views
catch these and translate them into HTTP responses.
"""

from __future__ import annotations


class SweetNotFound(Exception):
    """The requested sweet does not exist or has been soft-deleted."""


class SweetAlreadyExists(Exception):
    """Another live sweet already uses this name."""


class InsufficientStock(Exception):
    """A purchase asked for more units than are in stock."""

    def __init__(self, message: str, available: int = 0, requested: int = 0) -> None:
        super().__init__(message)
        self.available = available
        self.requested = requested


class StockLimitExceeded(Exception):
    """A restock would take the stock past the largest storable quantity."""

    def __init__(self, message: str, available: int = 0, requested: int = 0) -> None:
        super().__init__(message)
        self.available = available
        self.requested = requested
