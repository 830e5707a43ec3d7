"""
Domain: caller and owner identities.

Identities are opaque strings (typically hex account addresses). The only
reserved value is ZERO_ADDRESS, used as the sender of issuance notifications.
"""

from __future__ import annotations

ZERO_ADDRESS: str = "0x" + "0" * 40


def require_identity(name: str, value: str) -> str:
    """Validate that an identity is a non-empty string and return it stripped."""

    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string identity, got {type(value)!r}")
    text = value.strip()
    if not text:
        raise ValueError(f"{name} must not be empty")
    if text == ZERO_ADDRESS:
        raise ValueError(f"{name} must not be the zero address")
    return text
