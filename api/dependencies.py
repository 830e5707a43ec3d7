"""
Shared FastAPI dependencies.

The application serves one in-process Collection built from environment
configuration. Tests replace it through `app.dependency_overrides`.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Header, HTTPException

from domain.identity import require_identity
from services.collection import Collection
from services.config import load_config


@lru_cache(maxsize=1)
def get_collection() -> Collection:
    return Collection(load_config())


def get_caller(x_caller_address: str = Header(..., alias="X-Caller-Address")) -> str:
    """Identity of the account making the request."""
    try:
        return require_identity("X-Caller-Address", x_caller_address)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
