"""
Administrator-only reveal metadata.

Stores the provenance hash and reveal timestamp consumed by an external reveal
process, and the base URI the item registry uses for content locators. Values
are overwritten unconditionally; no format, ordering or write-once checks.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol

from domain.metadata import AdminMetadata
from services.access_guard import AccessGuard, require_authorized

logger = logging.getLogger(__name__)


class BaseUriTarget(Protocol):
    @property
    def base_uri(self) -> str:
        ...

    def set_base_uri(self, base_uri: str) -> None:
        ...


class MetadataAdmin:
    def __init__(
        self,
        guard: AccessGuard,
        uri_target: BaseUriTarget,
        *,
        metadata: Optional[AdminMetadata] = None,
        lock: Optional[threading.RLock] = None,
    ):
        self._guard = guard
        self._uri_target = uri_target
        self._metadata = metadata or AdminMetadata()
        self._lock = lock or threading.RLock()

    @property
    def provenance_hash(self) -> str:
        return self._metadata.provenance_hash

    @property
    def reveal_timestamp(self) -> Optional[int]:
        return self._metadata.reveal_timestamp

    @property
    def base_uri(self) -> str:
        return self._uri_target.base_uri

    def set_provenance_hash(self, caller: str, value: str) -> None:
        require_authorized(self._guard, caller, "set_provenance_hash")
        with self._lock:
            self._metadata = self._metadata.with_provenance_hash(value)
        logger.info("Provenance hash updated", extra={"provenance_hash": value})

    def set_reveal_timestamp(self, caller: str, value: Optional[int]) -> None:
        require_authorized(self._guard, caller, "set_reveal_timestamp")
        with self._lock:
            self._metadata = self._metadata.with_reveal_timestamp(value)
        logger.info("Reveal timestamp updated", extra={"reveal_timestamp": value})

    def set_base_uri(self, caller: str, value: str) -> None:
        require_authorized(self._guard, caller, "set_base_uri")
        with self._lock:
            self._uri_target.set_base_uri(value)
        logger.info("Base URI updated", extra={"base_uri": value})


__all__ = ["MetadataAdmin"]
