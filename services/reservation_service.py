"""
Administrator reservation.

Issues a fixed block of items to the administrator through the same supply
ledger path as public mints, skipping phase, batch and price checks. The block
is issued whole or not at all.
"""

from __future__ import annotations

import logging
from typing import List

from domain.supply import require_positive_quantity
from services.access_guard import AccessGuard, require_authorized
from services.supply_ledger import SupplyLedger

logger = logging.getLogger(__name__)


class ReservationService:
    def __init__(self, guard: AccessGuard, supply: SupplyLedger, *, block_size: int = 30):
        require_positive_quantity("block_size", block_size)
        self._guard = guard
        self._supply = supply
        self._block_size = block_size

    @property
    def block_size(self) -> int:
        return self._block_size

    def reserve_for_admin(self, caller: str) -> List[int]:
        """
        Issue the reservation block to `caller`.

        Raises:
            Unauthorized: if caller is not the administrator
            SupplyExceeded: if the block does not fit under max_supply
        """
        require_authorized(self._guard, caller, "reserve_for_admin")
        item_ids = self._supply.reserve(self._block_size, caller, context="Reserve")
        logger.info(
            f"Reserved {len(item_ids)} item(s) for administrator",
            extra={"recipient": caller, "quantity": len(item_ids)},
        )
        return item_ids


__all__ = ["ReservationService"]
