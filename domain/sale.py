"""
Domain: public sale phase and mint receipts.

Contract excerpts relevant here:
- The sale starts Inactive; the administrator toggles it an unbounded number of times.
- Public issuance is only permitted while the sale is Active.
- A single request may issue between 1 and max_batch_size items.

Enforcement of the rules lives with SaleController; this module only models the
state and the record of a completed mint.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Tuple

from .time import require_utc_timestamp


class SalePhase(str, Enum):
    INACTIVE = "Inactive"
    ACTIVE = "Active"


@dataclass(frozen=True, slots=True)
class SaleState:
    """Phase switch plus the per-request quantity limit."""

    active: bool = False
    max_batch_size: int = 20

    def __post_init__(self) -> None:
        if self.max_batch_size <= 0:
            raise ValueError("max_batch_size must be positive")

    @property
    def phase(self) -> SalePhase:
        return SalePhase.ACTIVE if self.active else SalePhase.INACTIVE

    def with_active(self, active: bool) -> "SaleState":
        return SaleState(active=bool(active), max_batch_size=self.max_batch_size)

    def flipped(self) -> "SaleState":
        return self.with_active(not self.active)

    def accepts_quantity(self, quantity: int) -> bool:
        return 0 < quantity <= self.max_batch_size


@dataclass(frozen=True, slots=True)
class MintReceipt:
    """
    Immutable record of a successful public mint.

    Captures who received the items, which ids were assigned and what was paid.
    """

    recipient: str
    item_ids: Tuple[int, ...]
    amount_paid: Decimal
    minted_at: datetime

    def __post_init__(self) -> None:
        require_utc_timestamp("minted_at", self.minted_at)

    @property
    def quantity(self) -> int:
        return len(self.item_ids)
