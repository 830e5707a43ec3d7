"""
Domain: ownership change notifications.

Every issued item produces exactly one TransferEvent from ZERO_ADDRESS to its
first owner. Later owner-initiated moves produce events with the real sender.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .identity import ZERO_ADDRESS
from .time import require_utc_timestamp


@dataclass(frozen=True, slots=True)
class TransferEvent:
    sender: str
    recipient: str
    item_id: int
    occurred_at: datetime

    def __post_init__(self) -> None:
        require_utc_timestamp("occurred_at", self.occurred_at)
        if self.item_id < 0:
            raise ValueError("item_id must be non-negative")

    @property
    def is_issuance(self) -> bool:
        """An event is an issuance iff it originates from the zero address."""

        return self.sender == ZERO_ADDRESS
