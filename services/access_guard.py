"""
Access control for privileged collection operations.

Privileged operations receive a guard instead of comparing against a global
owner, so the single-administrator policy can be swapped for another one
without touching the operations themselves.
"""

from __future__ import annotations

import logging
from typing import Protocol

from domain.errors import Unauthorized
from domain.identity import require_identity

logger = logging.getLogger(__name__)


class AccessGuard(Protocol):
    def is_authorized(self, caller: str) -> bool:
        ...


class SingleAdminGuard:
    """Authorizes exactly one designated administrator identity."""

    def __init__(self, admin: str):
        self._admin = require_identity("admin", admin)

    @property
    def admin(self) -> str:
        return self._admin

    def is_authorized(self, caller: str) -> bool:
        return caller == self._admin


def require_authorized(guard: AccessGuard, caller: str, operation: str) -> None:
    """
    Raise Unauthorized unless `caller` passes the guard.

    Must be the first check of every privileged operation.
    """
    if guard.is_authorized(caller):
        return

    logger.warning(
        f"Rejected privileged call to '{operation}'",
        extra={"caller": caller, "operation": operation},
    )
    raise Unauthorized(caller=caller, operation=operation)


__all__ = ["AccessGuard", "SingleAdminGuard", "require_authorized"]
