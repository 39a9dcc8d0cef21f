"""Shared fixtures: in-memory stores and a ProductTools façade."""

import pytest

from core.inventory import InventoryStore
from core.sample_data import seed_sample_products
from tools.product_tools import ProductTools


@pytest.fixture
def store():
    """An empty in-memory inventory."""
    with InventoryStore(":memory:") as inventory:
        yield inventory


@pytest.fixture
def seeded_store(store):
    """The in-memory inventory loaded with the ten sample products."""
    seed_sample_products(store)
    return store


@pytest.fixture
def tools(seeded_store):
    """A ProductTools façade over the seeded inventory."""
    return ProductTools(seeded_store)
