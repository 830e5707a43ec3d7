"""
Collection: the issuance state machine behind one serialized entry surface.

Wires the supply ledger, sale controller, pricing policy, reservation service,
funds vault and metadata admin around a single re-entrant lock. Every public
entry point runs as one atomic, non-interleaved unit with respect to all the
others, and queries always reflect the last committed operation.
"""

from __future__ import annotations

import threading
from decimal import Decimal
from typing import List, Optional

from domain.metadata import AdminMetadata
from domain.money import AmountLike
from domain.sale import MintReceipt
from domain.snapshot import CollectionSnapshot
from services.access_guard import AccessGuard, SingleAdminGuard
from services.config import CollectionConfig
from services.funds_vault import FundsVault, InMemoryPaymentRail, PaymentRail
from services.item_registry import InMemoryItemRegistry
from services.metadata_admin import MetadataAdmin
from services.pricing_service import MintQuote, PricingPolicy
from services.reservation_service import ReservationService
from services.sale_controller import SaleController
from services.supply_ledger import SupplyLedger


class Collection:
    def __init__(
        self,
        config: CollectionConfig,
        *,
        registry: Optional[InMemoryItemRegistry] = None,
        rail: Optional[PaymentRail] = None,
        guard: Optional[AccessGuard] = None,
        issued_count: int = 0,
        active: bool = False,
        metadata: Optional[AdminMetadata] = None,
        treasury_balance: Decimal = Decimal("0"),
    ):
        self._config = config
        self._lock = threading.RLock()
        self.registry = registry if registry is not None else InMemoryItemRegistry(base_uri=config.base_uri)
        self.rail = rail if rail is not None else InMemoryPaymentRail()
        self.guard = guard if guard is not None else SingleAdminGuard(config.admin)

        self.supply = SupplyLedger(
            config.max_supply,
            self.registry,
            issued_count=issued_count,
            lock=self._lock,
        )
        self.pricing = PricingPolicy(config.unit_price, config.currency)
        self.vault = FundsVault(self.guard, self.rail, balance=treasury_balance, lock=self._lock)
        self.sale = SaleController(
            self.guard,
            self.pricing,
            self.supply,
            self.vault,
            max_batch_size=config.max_batch_size,
            active=active,
            lock=self._lock,
        )
        self.reservations = ReservationService(
            self.guard, self.supply, block_size=config.reserve_block_size
        )
        self.metadata = MetadataAdmin(self.guard, self.registry, metadata=metadata, lock=self._lock)

    # ------------------------------------------------------------------
    # Mutating entry points
    # ------------------------------------------------------------------

    def mint(self, requester: str, quantity: int, payment: AmountLike) -> MintReceipt:
        with self._lock:
            return self.sale.mint(requester, quantity, payment)

    def reserve_for_admin(self, caller: str) -> List[int]:
        with self._lock:
            return self.reservations.reserve_for_admin(caller)

    def withdraw(self, caller: str) -> Decimal:
        with self._lock:
            return self.vault.withdraw(caller)

    def set_active(self, caller: str, active: bool) -> None:
        with self._lock:
            self.sale.set_active(caller, active)

    def flip_sale_state(self, caller: str) -> bool:
        with self._lock:
            return self.sale.flip_sale_state(caller)

    def set_provenance_hash(self, caller: str, value: str) -> None:
        with self._lock:
            self.metadata.set_provenance_hash(caller, value)

    def set_reveal_timestamp(self, caller: str, value: Optional[int]) -> None:
        with self._lock:
            self.metadata.set_reveal_timestamp(caller, value)

    def set_base_uri(self, caller: str, value: str) -> None:
        with self._lock:
            self.metadata.set_base_uri(caller, value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def symbol(self) -> str:
        return self._config.symbol

    @property
    def admin(self) -> str:
        return self._config.admin

    @property
    def issued_count(self) -> int:
        return self.supply.issued_count

    @property
    def max_supply(self) -> int:
        return self.supply.max_supply

    @property
    def active(self) -> bool:
        return self.sale.active

    @property
    def max_batch_size(self) -> int:
        return self.sale.max_batch_size

    @property
    def unit_price(self) -> Decimal:
        return self.pricing.unit_price

    @property
    def currency(self) -> str:
        return self.pricing.currency

    @property
    def reserve_block_size(self) -> int:
        return self.reservations.block_size

    @property
    def provenance_hash(self) -> str:
        return self.metadata.provenance_hash

    @property
    def reveal_timestamp(self) -> Optional[int]:
        return self.metadata.reveal_timestamp

    @property
    def base_uri(self) -> str:
        return self.metadata.base_uri

    @property
    def treasury_balance(self) -> Decimal:
        return self.vault.balance

    def quote(self, quantity: int) -> MintQuote:
        return self.pricing.quote(quantity)

    def owner_of(self, item_id: int) -> str:
        return self.registry.owner_of(item_id)

    def count_of(self, owner: str) -> int:
        return self.registry.count_of(owner)

    def items_of(self, owner: str) -> List[int]:
        return self.registry.items_of(owner)

    def token_uri(self, item_id: int) -> str:
        return self.registry.token_uri(item_id)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def snapshot(self) -> CollectionSnapshot:
        """Capture the single persisted record under the collection lock."""
        with self._lock:
            return CollectionSnapshot(
                name=self.name,
                symbol=self.symbol,
                admin=self.admin,
                max_supply=self.max_supply,
                issued_count=self.issued_count,
                active=self.active,
                max_batch_size=self.max_batch_size,
                unit_price=self.unit_price,
                currency=self.currency,
                reserve_block_size=self.reserve_block_size,
                provenance_hash=self.provenance_hash,
                reveal_timestamp=self.reveal_timestamp,
                base_uri=self.base_uri,
                treasury_balance=self.treasury_balance,
            )

    @classmethod
    def restore(
        cls,
        snapshot: CollectionSnapshot,
        registry: InMemoryItemRegistry,
        *,
        rail: Optional[PaymentRail] = None,
    ) -> "Collection":
        """
        Rebuild a collection from a persisted record.

        The registry must already hold exactly `snapshot.issued_count` items.

        Raises:
            ValueError: if the registry and the snapshot disagree
        """
        if registry.total_issued != snapshot.issued_count:
            raise ValueError(
                f"Registry holds {registry.total_issued} items but snapshot "
                f"records {snapshot.issued_count}"
            )

        config = CollectionConfig(
            admin=snapshot.admin,
            name=snapshot.name,
            symbol=snapshot.symbol,
            max_supply=snapshot.max_supply,
            max_batch_size=snapshot.max_batch_size,
            unit_price=snapshot.unit_price,
            currency=snapshot.currency,
            reserve_block_size=snapshot.reserve_block_size,
            base_uri=snapshot.base_uri,
        )
        registry.set_base_uri(snapshot.base_uri)
        return cls(
            config,
            registry=registry,
            rail=rail,
            issued_count=snapshot.issued_count,
            active=snapshot.active,
            metadata=AdminMetadata(
                provenance_hash=snapshot.provenance_hash,
                reveal_timestamp=snapshot.reveal_timestamp,
            ),
            treasury_balance=snapshot.treasury_balance,
        )


__all__ = ["Collection"]
