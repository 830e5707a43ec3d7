"""
Domain: treasury holding collected mint payments.

Invariants:
- balance >= 0 at all times.
- balance only grows through deposits and only shrinks through a full withdrawal.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .money import ZERO, exact_add, require_non_negative


@dataclass(frozen=True, slots=True)
class Treasury:
    balance: Decimal = ZERO

    def __post_init__(self) -> None:
        require_non_negative("balance", self.balance)

    @property
    def is_empty(self) -> bool:
        return self.balance == ZERO

    def deposited(self, amount: Decimal) -> "Treasury":
        require_non_negative("amount", amount)
        return Treasury(balance=exact_add(self.balance, amount))

    def drained(self) -> tuple["Treasury", Decimal]:
        """Return an empty treasury and the amount that was held."""

        return Treasury(balance=ZERO), self.balance
