"""
Supply ledger: the single issuance path shared by public mints and reservations.

The supply check and the increment happen in one locked step, so two concurrent
requests can never both pass a check against a total that would overrun the cap.
On success every new id is issued to the recipient through the item registry,
in ascending order. Transfer listeners are notified after the counter commits.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from domain.identity import require_identity
from domain.supply import SupplyState
from services.item_registry import ItemRegistry

logger = logging.getLogger(__name__)


class SupplyLedger:
    def __init__(
        self,
        max_supply: int,
        registry: ItemRegistry,
        *,
        issued_count: int = 0,
        lock: Optional[threading.RLock] = None,
    ):
        self._state = SupplyState(max_supply=max_supply, issued_count=issued_count)
        self._registry = registry
        self._lock = lock or threading.RLock()

    @property
    def issued_count(self) -> int:
        return self._state.issued_count

    @property
    def max_supply(self) -> int:
        return self._state.max_supply

    @property
    def remaining(self) -> int:
        return self._state.remaining

    @property
    def state(self) -> SupplyState:
        return self._state

    def reserve(self, quantity: int, recipient: str, *, context: Optional[str] = None) -> List[int]:
        """
        Issue `quantity` new contiguous ids to `recipient`.

        Args:
            quantity: Number of items to issue (positive)
            recipient: Identity receiving the items
            context: Label used in the SupplyExceeded message ("Purchase", "Reserve")

        Returns:
            The assigned ids, ascending, starting at the pre-call issued_count

        Raises:
            SupplyExceeded: if the issuance would exceed max_supply; nothing changes
        """
        recipient = require_identity("recipient", recipient)

        with self._lock:
            next_state, ids = self._state.advance(quantity, context=context)
            # Ownership for the whole block and the counter commit together;
            # listeners only run once both are in place.
            events = self._registry.issue_block(list(ids), recipient)
            self._state = next_state
            self._registry.publish(events)

        logger.info(
            f"Issued {quantity} item(s) to {recipient}",
            extra={
                "recipient": recipient,
                "first_item_id": ids.start,
                "last_item_id": ids.stop - 1,
                "issued_count": next_state.issued_count,
            },
        )
        return list(ids)


__all__ = ["SupplyLedger"]
