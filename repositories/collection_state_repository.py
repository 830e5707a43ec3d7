"""
Collection state repository (persistence).

This module provides *only* persistence operations for the CollectionSnapshot
record. It does not enforce issuance rules; it stores and fetches the single
row that describes a collection, keyed by its symbol.

Ownership records are not stored here; they belong to the item registry.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from domain.snapshot import CollectionSnapshot

# Supabase table name for collection state.
# Keep this aligned with your database schema.
_STATE_TABLE: str = "collection_state"


def _default_client() -> Any:
    from repositories.client import get_supabase

    return get_supabase()


def _snapshot_to_row(snapshot: CollectionSnapshot) -> Dict[str, Any]:
    """Convert a CollectionSnapshot into a Supabase row payload."""

    return {
        "symbol": snapshot.symbol,
        "name": snapshot.name,
        "admin_address": snapshot.admin,
        "max_supply": snapshot.max_supply,
        "issued_count": snapshot.issued_count,
        "sale_active": snapshot.active,
        "max_batch_size": snapshot.max_batch_size,
        # Stored as text to keep fixed-point precision.
        "unit_price": str(snapshot.unit_price),
        "currency": snapshot.currency,
        "reserve_block_size": snapshot.reserve_block_size,
        "provenance_hash": snapshot.provenance_hash,
        "reveal_timestamp": snapshot.reveal_timestamp,
        "base_uri": snapshot.base_uri,
        "treasury_balance": str(snapshot.treasury_balance),
        "updated_at_utc": datetime.now(timezone.utc).isoformat(),
    }


def _row_to_snapshot(row: Mapping[str, Any]) -> CollectionSnapshot:
    """Convert a Supabase row into a CollectionSnapshot."""

    reveal = row.get("reveal_timestamp")
    return CollectionSnapshot(
        name=str(row["name"]),
        symbol=str(row["symbol"]),
        admin=str(row["admin_address"]),
        max_supply=int(row["max_supply"]),
        issued_count=int(row["issued_count"]),
        active=bool(row.get("sale_active", False)),
        max_batch_size=int(row["max_batch_size"]),
        unit_price=Decimal(str(row["unit_price"])),
        currency=str(row.get("currency", "ETH")),
        reserve_block_size=int(row["reserve_block_size"]),
        provenance_hash=str(row.get("provenance_hash") or ""),
        reveal_timestamp=int(reveal) if reveal is not None else None,
        base_uri=str(row.get("base_uri") or ""),
        treasury_balance=Decimal(str(row.get("treasury_balance", "0"))),
    )


def save_snapshot(snapshot: CollectionSnapshot, *, client: Any = None) -> None:
    """
    Upsert the collection record into Supabase.

    Args:
        snapshot: Record to persist
        client: Supabase client (defaults to the shared client)

    Raises:
        RuntimeError: if Supabase reports an error
    """
    db = client if client is not None else _default_client()
    response = db.table(_STATE_TABLE).upsert(_snapshot_to_row(snapshot), on_conflict="symbol").execute()

    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Failed to save collection state: {error}")


def load_snapshot(symbol: str, *, client: Any = None) -> Optional[CollectionSnapshot]:
    """
    Fetch the collection record for `symbol`.

    Returns:
        CollectionSnapshot or None if no record exists

    Example:
        snapshot = load_snapshot("BRD")
        if snapshot is not None:
            print(snapshot.issued_count)
    """
    db = client if client is not None else _default_client()
    response = (
        db.table(_STATE_TABLE)
        .select("*")
        .eq("symbol", symbol)
        .limit(1)
        .execute()
    )

    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Failed to fetch collection state: {error}")

    rows = getattr(response, "data", None) or []
    if not rows:
        return None

    return _row_to_snapshot(rows[0])


__all__ = ["save_snapshot", "load_snapshot"]
