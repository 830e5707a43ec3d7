"""
Collection configuration.

Values are read from the environment (optionally seeded from a `.env` file in
the project root). Defaults reproduce the reference collection.

Environment variables:
- COLLECTION_NAME, COLLECTION_SYMBOL
- COLLECTION_ADMIN: administrator identity (required by the HTTP app)
- COLLECTION_MAX_SUPPLY (default 25)
- COLLECTION_MAX_BATCH_SIZE (default 20)
- COLLECTION_UNIT_PRICE (default 0.08), COLLECTION_CURRENCY (default ETH)
- COLLECTION_RESERVE_BLOCK_SIZE (default 30)
- COLLECTION_BASE_URI (default empty)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain.identity import require_identity
from domain.money import require_non_negative, to_amount

DEFAULT_MAX_SUPPLY: int = 25
DEFAULT_MAX_BATCH_SIZE: int = 20
DEFAULT_UNIT_PRICE: Decimal = Decimal("0.08")
DEFAULT_RESERVE_BLOCK_SIZE: int = 30


@dataclass(frozen=True, slots=True)
class CollectionConfig:
    """Immutable creation parameters for a collection."""

    admin: str
    name: str = "BirdNFT"
    symbol: str = "BRD"
    max_supply: int = DEFAULT_MAX_SUPPLY
    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    unit_price: Decimal = DEFAULT_UNIT_PRICE
    currency: str = "ETH"
    reserve_block_size: int = DEFAULT_RESERVE_BLOCK_SIZE
    base_uri: str = ""

    def __post_init__(self) -> None:
        require_identity("admin", self.admin)
        if self.max_supply < 0:
            raise ValueError("max_supply must be non-negative")
        if self.max_batch_size <= 0:
            raise ValueError("max_batch_size must be positive")
        if self.reserve_block_size <= 0:
            raise ValueError("reserve_block_size must be positive")
        require_non_negative("unit_price", self.unit_price)


def _read_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid integer in environment variable {key}: {raw!r}") from exc


def load_config(
    env: Optional[Mapping[str, str]] = None,
    *,
    env_file: Optional[Path] = None,
) -> CollectionConfig:
    """
    Build a CollectionConfig from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ after loading .env)
        env_file: Optional .env path (defaults to the project root .env)

    Raises:
        RuntimeError: if COLLECTION_ADMIN is missing or a value is malformed
    """
    if env is None:
        load_dotenv(dotenv_path=env_file or Path(__file__).parent.parent / ".env")
        env = os.environ

    admin = env.get("COLLECTION_ADMIN")
    if not admin:
        raise RuntimeError(
            "Missing environment variable: COLLECTION_ADMIN. "
            "Set COLLECTION_ADMIN to the administrator address."
        )

    raw_price = env.get("COLLECTION_UNIT_PRICE")
    try:
        unit_price = to_amount("COLLECTION_UNIT_PRICE", raw_price) if raw_price else DEFAULT_UNIT_PRICE
    except (TypeError, ValueError) as exc:
        raise RuntimeError(str(exc)) from exc

    try:
        return CollectionConfig(
            admin=admin,
            name=env.get("COLLECTION_NAME", "BirdNFT"),
            symbol=env.get("COLLECTION_SYMBOL", "BRD"),
            max_supply=_read_int(env, "COLLECTION_MAX_SUPPLY", DEFAULT_MAX_SUPPLY),
            max_batch_size=_read_int(env, "COLLECTION_MAX_BATCH_SIZE", DEFAULT_MAX_BATCH_SIZE),
            unit_price=unit_price,
            currency=env.get("COLLECTION_CURRENCY", "ETH"),
            reserve_block_size=_read_int(env, "COLLECTION_RESERVE_BLOCK_SIZE", DEFAULT_RESERVE_BLOCK_SIZE),
            base_uri=env.get("COLLECTION_BASE_URI", ""),
        )
    except ValueError as exc:
        raise RuntimeError(f"Invalid collection configuration: {exc}") from exc


__all__ = ["CollectionConfig", "load_config"]
