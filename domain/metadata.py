"""
Domain: administrator-controlled reveal metadata.

The provenance hash and reveal timestamp are inputs for an external reveal
process. Both are plain overwrite-on-write values: no format validation, no
ordering check and no single-write lock.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True, slots=True)
class AdminMetadata:
    provenance_hash: str = ""
    reveal_timestamp: Optional[int] = None

    def with_provenance_hash(self, value: str) -> "AdminMetadata":
        return replace(self, provenance_hash=value)

    def with_reveal_timestamp(self, value: Optional[int]) -> "AdminMetadata":
        return replace(self, reveal_timestamp=value)
