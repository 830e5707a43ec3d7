"""
Tests for `services/metadata_admin.py`.

Covers rules:
- Provenance hash defaults to empty, reveal timestamp to unset.
- Only the administrator may change metadata or the base URI.
- Values are overwritten unconditionally with no validation.
"""

from __future__ import annotations

import pytest

from conftest import ADMIN, BUYER
from domain.errors import Unauthorized
from services.access_guard import SingleAdminGuard
from services.item_registry import InMemoryItemRegistry
from services.metadata_admin import MetadataAdmin


def _admin() -> tuple[MetadataAdmin, InMemoryItemRegistry]:
    registry = InMemoryItemRegistry(base_uri="xyz")
    return MetadataAdmin(SingleAdminGuard(ADMIN), registry), registry


def test_defaults() -> None:
    metadata, _ = _admin()

    assert metadata.provenance_hash == ""
    assert metadata.reveal_timestamp is None
    assert metadata.base_uri == "xyz"


def test_non_admin_cannot_change_anything() -> None:
    metadata, registry = _admin()

    with pytest.raises(Unauthorized):
        metadata.set_provenance_hash(BUYER, "Provenance Hash Value")
    with pytest.raises(Unauthorized):
        metadata.set_reveal_timestamp(BUYER, 10000)
    with pytest.raises(Unauthorized):
        metadata.set_base_uri(BUYER, "ipfs://other/")

    assert metadata.provenance_hash == ""
    assert metadata.reveal_timestamp is None
    assert registry.base_uri == "xyz"


def test_admin_sets_provenance_and_reveal() -> None:
    metadata, _ = _admin()

    metadata.set_provenance_hash(ADMIN, "Provenance Hash Value")
    metadata.set_reveal_timestamp(ADMIN, 10000)

    assert metadata.provenance_hash == "Provenance Hash Value"
    assert metadata.reveal_timestamp == 10000


def test_values_are_overwritable_without_checks() -> None:
    metadata, _ = _admin()

    metadata.set_provenance_hash(ADMIN, "first")
    metadata.set_provenance_hash(ADMIN, "")
    metadata.set_reveal_timestamp(ADMIN, 10000)
    metadata.set_reveal_timestamp(ADMIN, -5)
    metadata.set_reveal_timestamp(ADMIN, None)

    assert metadata.provenance_hash == ""
    assert metadata.reveal_timestamp is None


def test_admin_sets_base_uri_on_registry() -> None:
    metadata, registry = _admin()
    registry.issue(0, BUYER)

    metadata.set_base_uri(ADMIN, "ipfs://birds/")

    assert registry.token_uri(0) == "ipfs://birds/0"
    assert metadata.base_uri == "ipfs://birds/"
