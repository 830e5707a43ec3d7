"""
Item registry: ownership records for issued items.

The issuance core only relies on the ItemRegistry protocol. InMemoryItemRegistry
is the reference implementation used by the HTTP app, the demo script and the
tests. It keeps:
- item id -> current owner
- owner -> ids held (enumeration, ascending)
- a base URI used to build each item's content locator

Listeners receive one TransferEvent per issued or moved item, in order. Block
issuance records every id before any listener runs, and a failing listener
never undoes a committed issuance.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Set

from domain.errors import ItemAlreadyIssued, NotItemOwner, UnknownItem
from domain.identity import ZERO_ADDRESS, require_identity
from domain.time import utc_now
from domain.transfer import TransferEvent

logger = logging.getLogger(__name__)

TransferListener = Callable[[TransferEvent], None]


class ItemRegistry(Protocol):
    @property
    def total_issued(self) -> int:
        ...

    def issue(self, item_id: int, owner: str) -> TransferEvent:
        ...

    def issue_block(self, item_ids: Sequence[int], owner: str) -> List[TransferEvent]:
        ...

    def publish(self, events: Iterable[TransferEvent]) -> None:
        ...

    def exists(self, item_id: int) -> bool:
        ...

    def owner_of(self, item_id: int) -> str:
        ...

    def count_of(self, owner: str) -> int:
        ...

    def subscribe(self, listener: TransferListener) -> None:
        ...


class InMemoryItemRegistry:
    """Thread-safe in-memory ownership ledger."""

    def __init__(self, base_uri: str = ""):
        self._lock = threading.RLock()
        self._owners: Dict[int, str] = {}
        self._holdings: Dict[str, Set[int]] = {}
        self._issue_order: List[int] = []
        self._listeners: List[TransferListener] = []
        self._base_uri = base_uri

    @property
    def total_issued(self) -> int:
        with self._lock:
            return len(self._issue_order)

    @property
    def base_uri(self) -> str:
        return self._base_uri

    def set_base_uri(self, base_uri: str) -> None:
        with self._lock:
            self._base_uri = base_uri

    def subscribe(self, listener: TransferListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def publish(self, events: Iterable[TransferEvent]) -> None:
        """
        Deliver events to every listener, in order.

        A failing listener is logged and skipped; ownership is already committed
        and the remaining listeners still receive the event.
        """
        listeners = list(self._listeners)
        for event in events:
            for listener in listeners:
                try:
                    listener(event)
                except Exception:
                    logger.exception(
                        f"Transfer listener failed for item {event.item_id}",
                        extra={"item_id": event.item_id, "recipient": event.recipient},
                    )

    def issue_block(self, item_ids: Sequence[int], owner: str) -> List[TransferEvent]:
        """
        Record every id in `item_ids` for `owner` without notifying listeners.

        All ids are checked before any is recorded, so a rejected block leaves
        the registry unchanged. Callers deliver the returned events with publish().

        Raises:
            ItemAlreadyIssued: if any id already has an owner
        """
        owner = require_identity("owner", owner)
        with self._lock:
            for item_id in item_ids:
                if item_id < 0:
                    raise ValueError("item_id must be non-negative")
                if item_id in self._owners:
                    raise ItemAlreadyIssued(item_id)
            if len(set(item_ids)) != len(item_ids):
                raise ValueError("item_ids must be unique")

            occurred_at = utc_now()
            events: List[TransferEvent] = []
            for item_id in item_ids:
                self._owners[item_id] = owner
                self._holdings.setdefault(owner, set()).add(item_id)
                self._issue_order.append(item_id)
                events.append(
                    TransferEvent(
                        sender=ZERO_ADDRESS,
                        recipient=owner,
                        item_id=item_id,
                        occurred_at=occurred_at,
                    )
                )
            return events

    def issue(self, item_id: int, owner: str) -> TransferEvent:
        """
        Record a newly issued item for `owner` and notify listeners.

        Raises:
            ItemAlreadyIssued: if the id already has an owner
        """
        with self._lock:
            events = self.issue_block([item_id], owner)
            self.publish(events)
        return events[0]

    def transfer(self, sender: str, recipient: str, item_id: int) -> TransferEvent:
        """
        Move an item from its current owner to `recipient`.

        Raises:
            UnknownItem: if the item was never issued
            NotItemOwner: if `sender` does not currently own the item
        """
        recipient = require_identity("recipient", recipient)
        with self._lock:
            current = self.owner_of(item_id)
            if current != sender:
                raise NotItemOwner(item_id, sender)

            self._holdings[current].discard(item_id)
            self._owners[item_id] = recipient
            self._holdings.setdefault(recipient, set()).add(item_id)

            event = TransferEvent(
                sender=sender,
                recipient=recipient,
                item_id=item_id,
                occurred_at=utc_now(),
            )
            self.publish([event])
            return event

    def exists(self, item_id: int) -> bool:
        with self._lock:
            return item_id in self._owners

    def owner_of(self, item_id: int) -> str:
        with self._lock:
            owner: Optional[str] = self._owners.get(item_id)
        if owner is None:
            raise UnknownItem(item_id)
        return owner

    def count_of(self, owner: str) -> int:
        with self._lock:
            return len(self._holdings.get(owner, ()))

    def items_of(self, owner: str) -> List[int]:
        with self._lock:
            return sorted(self._holdings.get(owner, ()))

    def item_by_index(self, index: int) -> int:
        """Return the id issued at position `index` (issuance order)."""
        with self._lock:
            if index < 0 or index >= len(self._issue_order):
                raise IndexError(f"Index {index} out of range for {len(self._issue_order)} items")
            return self._issue_order[index]

    def token_uri(self, item_id: int) -> str:
        """Content locator for an item: base URI followed by the decimal id."""
        with self._lock:
            if item_id not in self._owners:
                raise UnknownItem(item_id)
            return f"{self._base_uri}{item_id}"


__all__ = ["ItemRegistry", "InMemoryItemRegistry", "TransferListener"]
