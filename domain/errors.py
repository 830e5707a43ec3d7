"""
Domain: issuance failure taxonomy.

Every rejected operation raises one of these with a stable `code`, so callers
can branch on which rule was violated. No failure leaves partial state behind.

Check order:
- Unauthorized is always checked first in privileged operations.
- Public minting checks SaleInactive, BatchSizeExceeded, IncorrectPayment,
  then SupplyExceeded; the first failing check wins.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional


class CollectionError(Exception):
    """Base class for rule violations surfaced to callers."""

    code: str = "COLLECTION_ERROR"


class Unauthorized(CollectionError):
    """Raised when a privileged operation is invoked by a non-administrator."""

    code = "UNAUTHORIZED"

    def __init__(self, caller: str, operation: str):
        self.caller = caller
        self.operation = operation
        super().__init__(f"Caller is not the owner (operation: {operation})")


class SaleInactive(CollectionError):
    """Raised when public minting is attempted while the sale is off."""

    code = "SALE_INACTIVE"

    def __init__(self) -> None:
        super().__init__("Sale must be active to mint")


class BatchSizeExceeded(CollectionError):
    """Raised when the requested quantity is zero or above the batch limit."""

    code = "BATCH_SIZE_EXCEEDED"

    def __init__(self, requested: int, limit: int):
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"Can only mint {limit} tokens at a time (requested: {requested})"
        )


class IncorrectPayment(CollectionError):
    """Raised when the payment differs from unit price times quantity."""

    code = "INCORRECT_PAYMENT"

    def __init__(self, expected: Decimal, received: Decimal):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Value sent is not correct. Expected: {expected}, Received: {received}"
        )


class SupplyExceeded(CollectionError):
    """Raised when an issuance would push issued_count above max_supply."""

    code = "SUPPLY_EXCEEDED"

    def __init__(
        self,
        requested: int,
        issued: int,
        max_supply: int,
        context: Optional[str] = None,
    ):
        self.requested = requested
        self.issued = issued
        self.max_supply = max_supply
        self.context = context or "Purchase"
        super().__init__(
            f"{self.context} would exceed max supply. "
            f"Requested: {requested}, Issued: {issued}, Max: {max_supply}"
        )


class RegistryError(Exception):
    """Base class for item registry failures."""


class ItemAlreadyIssued(RegistryError):
    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item {item_id} has already been issued")


class UnknownItem(RegistryError):
    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item {item_id} does not exist")


class NotItemOwner(RegistryError):
    def __init__(self, item_id: int, caller: str):
        self.item_id = item_id
        self.caller = caller
        super().__init__(f"{caller} does not own item {item_id}")


__all__ = [
    "CollectionError",
    "Unauthorized",
    "SaleInactive",
    "BatchSizeExceeded",
    "IncorrectPayment",
    "SupplyExceeded",
    "RegistryError",
    "ItemAlreadyIssued",
    "UnknownItem",
    "NotItemOwner",
]
