"""
Pytest configuration and shared fixtures.

This file adds the project root to the Python path so that tests can import
from the domain, services, repositories and api packages.
"""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from services.collection import Collection  # noqa: E402
from services.config import CollectionConfig  # noqa: E402

ADMIN = "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4"
BUYER = "0xAb8483F64d9C6d1EcF9b849Ae677dD3315835cb2"
PRICE = Decimal("0.08")


@pytest.fixture
def config() -> CollectionConfig:
    return CollectionConfig(admin=ADMIN, base_uri="xyz")


@pytest.fixture
def collection(config: CollectionConfig) -> Collection:
    return Collection(config)


@pytest.fixture
def active_collection(collection: Collection) -> Collection:
    collection.set_active(ADMIN, True)
    return collection
