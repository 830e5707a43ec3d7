"""
Public sale controller.

Owns the Inactive/Active phase switch and the per-request batch limit, and runs
the public mint flow:

1. Sale must be Active                     -> SaleInactive
2. 0 < quantity <= max_batch_size           -> BatchSizeExceeded
3. payment == unit_price * quantity         -> IncorrectPayment
4. issued_count + quantity <= max_supply    -> SupplyExceeded (from the ledger)
5. Deposit the payment in the funds vault

The first failing check wins and nothing is changed on failure.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from domain.errors import BatchSizeExceeded, SaleInactive
from domain.money import AmountLike
from domain.sale import MintReceipt, SaleState
from domain.time import utc_now
from services.access_guard import AccessGuard, require_authorized
from services.funds_vault import FundsVault
from services.pricing_service import PricingPolicy
from services.supply_ledger import SupplyLedger

logger = logging.getLogger(__name__)


class SaleController:
    def __init__(
        self,
        guard: AccessGuard,
        pricing: PricingPolicy,
        supply: SupplyLedger,
        vault: FundsVault,
        *,
        max_batch_size: int = 20,
        active: bool = False,
        lock: Optional[threading.RLock] = None,
    ):
        self._guard = guard
        self._pricing = pricing
        self._supply = supply
        self._vault = vault
        self._state = SaleState(active=active, max_batch_size=max_batch_size)
        self._lock = lock or threading.RLock()

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def max_batch_size(self) -> int:
        return self._state.max_batch_size

    @property
    def state(self) -> SaleState:
        return self._state

    def set_active(self, caller: str, active: bool) -> None:
        """Set the sale phase. Administrator only."""
        require_authorized(self._guard, caller, "set_active")
        with self._lock:
            self._state = self._state.with_active(active)
        logger.info(
            f"Sale phase set to {self._state.phase.value}",
            extra={"sale_active": self._state.active},
        )

    def flip_sale_state(self, caller: str) -> bool:
        """Toggle the sale phase and return the new value. Administrator only."""
        require_authorized(self._guard, caller, "flip_sale_state")
        with self._lock:
            self._state = self._state.flipped()
            active = self._state.active
        logger.info(
            f"Sale phase flipped to {self._state.phase.value}",
            extra={"sale_active": active},
        )
        return active

    def mint(self, requester: str, quantity: int, payment: AmountLike) -> MintReceipt:
        """
        Issue `quantity` items to `requester` against an exact payment.

        Args:
            requester: Identity that pays and receives the items
            quantity: Number of items requested
            payment: Amount sent with the request

        Returns:
            MintReceipt with the assigned ids and the amount paid

        Raises:
            SaleInactive, BatchSizeExceeded, IncorrectPayment, SupplyExceeded
        """
        with self._lock:
            if not self._state.active:
                raise SaleInactive()
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise TypeError(f"quantity must be an int, got {type(quantity)!r}")
            if not self._state.accepts_quantity(quantity):
                raise BatchSizeExceeded(requested=quantity, limit=self._state.max_batch_size)

            amount = self._pricing.validate(quantity, payment)
            item_ids = self._supply.reserve(quantity, requester, context="Purchase")
            self._vault.deposit(amount)

        logger.info(
            f"Minted {quantity} item(s) for {requester}",
            extra={"requester": requester, "quantity": quantity, "amount_paid": str(amount)},
        )
        return MintReceipt(
            recipient=requester,
            item_ids=tuple(item_ids),
            amount_paid=amount,
            minted_at=utc_now(),
        )


__all__ = ["SaleController"]
