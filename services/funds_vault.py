"""
Funds vault: collected mint payments and administrator withdrawal.

Withdrawal always moves the entire balance to the calling administrator. With
an empty treasury it is a valid no-op and no transfer is sent.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Protocol

from domain.money import ZERO
from domain.treasury import Treasury
from services.access_guard import AccessGuard, require_authorized

logger = logging.getLogger(__name__)


class PaymentRail(Protocol):
    def send(self, recipient: str, amount: Decimal) -> None:
        ...


@dataclass(frozen=True, slots=True)
class Payout:
    recipient: str
    amount: Decimal


class InMemoryPaymentRail:
    """Records payouts and the running balance credited to each recipient."""

    def __init__(self) -> None:
        self._balances: Dict[str, Decimal] = {}
        self.payouts: List[Payout] = []

    def send(self, recipient: str, amount: Decimal) -> None:
        self._balances[recipient] = self._balances.get(recipient, ZERO) + amount
        self.payouts.append(Payout(recipient=recipient, amount=amount))

    def balance_of(self, recipient: str) -> Decimal:
        return self._balances.get(recipient, ZERO)


class FundsVault:
    def __init__(
        self,
        guard: AccessGuard,
        rail: PaymentRail,
        *,
        balance: Decimal = ZERO,
        lock: Optional[threading.RLock] = None,
    ):
        self._guard = guard
        self._rail = rail
        self._treasury = Treasury(balance=balance)
        self._lock = lock or threading.RLock()

    @property
    def balance(self) -> Decimal:
        return self._treasury.balance

    def deposit(self, amount: Decimal) -> None:
        with self._lock:
            self._treasury = self._treasury.deposited(amount)

    def withdraw(self, caller: str) -> Decimal:
        """
        Send the whole balance to `caller`.

        Returns:
            Amount withdrawn (zero when the treasury was already empty)

        Raises:
            Unauthorized: if caller is not the administrator
        """
        require_authorized(self._guard, caller, "withdraw")

        with self._lock:
            if self._treasury.is_empty:
                return ZERO

            drained, amount = self._treasury.drained()
            self._rail.send(caller, amount)
            self._treasury = drained

        logger.info(
            f"Withdrew {amount} to {caller}",
            extra={"recipient": caller, "amount": str(amount)},
        )
        return amount


__all__ = ["FundsVault", "InMemoryPaymentRail", "PaymentRail", "Payout"]
