"""
Domain: the single persisted collection record.

Holds supply, sale, price and metadata state, the treasury balance and the
administrator identity. Ownership records are not part of it; they stay with
the item registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True, slots=True)
class CollectionSnapshot:
    name: str
    symbol: str
    admin: str
    max_supply: int
    issued_count: int
    active: bool
    max_batch_size: int
    unit_price: Decimal
    currency: str
    reserve_block_size: int
    provenance_hash: str
    reveal_timestamp: Optional[int]
    base_uri: str
    treasury_balance: Decimal

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("symbol must not be empty")
        if self.issued_count > self.max_supply:
            raise ValueError("issued_count must not exceed max_supply")
        if self.treasury_balance < 0:
            raise ValueError("treasury_balance must be non-negative")
