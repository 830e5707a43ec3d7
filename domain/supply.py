"""
Domain: supply accounting for issued items.

Contract excerpts implemented here:
- max_supply is fixed when the collection is created.
- issued_count <= max_supply at all times.
- Item ids are assigned contiguously starting at the current issued_count.
- An issuance that would exceed max_supply is rejected as a whole; no partial
  issuance is ever recorded.

This module contains only pure value objects: no locking and no registry calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import SupplyExceeded


def require_positive_quantity(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value)!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive")


@dataclass(frozen=True, slots=True)
class SupplyState:
    """
    Immutable snapshot of how many items exist out of the hard cap.

    Transitions return new instances; a rejected transition leaves the prior
    state untouched.
    """

    max_supply: int
    issued_count: int = 0

    def __post_init__(self) -> None:
        if self.max_supply < 0:
            raise ValueError("max_supply must be non-negative")
        if self.issued_count < 0:
            raise ValueError("issued_count must be non-negative")
        if self.issued_count > self.max_supply:
            raise ValueError("issued_count must not exceed max_supply")

    @property
    def remaining(self) -> int:
        return self.max_supply - self.issued_count

    def can_issue(self, quantity: int) -> bool:
        return self.issued_count + quantity <= self.max_supply

    def advance(self, quantity: int, *, context: Optional[str] = None) -> tuple["SupplyState", range]:
        """
        Return the state after issuing `quantity` items and the ids assigned.

        Raises:
            SupplyExceeded: if issued_count + quantity > max_supply
        """

        require_positive_quantity("quantity", quantity)
        if not self.can_issue(quantity):
            raise SupplyExceeded(
                requested=quantity,
                issued=self.issued_count,
                max_supply=self.max_supply,
                context=context,
            )

        start = self.issued_count
        return (
            SupplyState(max_supply=self.max_supply, issued_count=start + quantity),
            range(start, start + quantity),
        )
