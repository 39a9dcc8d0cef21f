# =============================================================================
# core/sample_data.py  —  Startup sample inventory
# =============================================================================
#
# Ten fixed products across four categories, loaded once before the server
# starts answering tool calls.  Seeding always starts from an empty store,
# so ids come out as 1..10 in the order listed here.
# =============================================================================

import logging

from core.inventory import InventoryStore
from core.models import Product

logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS: tuple[Product, ...] = (
    # --- Electronics ---
    Product(name="Laptop", category="Electronics", price=999.99, stock=15),
    Product(name="Wireless Mouse", category="Electronics", price=29.99, stock=50),
    Product(name="Mechanical Keyboard", category="Electronics", price=89.99, stock=30),
    # --- Books ---
    Product(name="Spring in Action", category="Books", price=45.99, stock=25),
    Product(name="Clean Code", category="Books", price=39.99, stock=20),
    # --- Clothing ---
    Product(name="T-Shirt", category="Clothing", price=19.99, stock=100),
    Product(name="Jeans", category="Clothing", price=59.99, stock=75),
    # --- Appliances ---
    Product(name="Coffee Maker", category="Appliances", price=79.99, stock=40),
    Product(name="Blender", category="Appliances", price=49.99, stock=35),
    Product(name="Toaster", category="Appliances", price=29.99, stock=45),
)


def seed_sample_products(store: InventoryStore) -> list[Product]:
    """Replace the store's contents with SAMPLE_PRODUCTS.

    Returns:
        The stored products, with their assigned ids, in insertion order.
    """
    store.clear()
    stored = [store.create(draft) for draft in SAMPLE_PRODUCTS]
    logger.info("Seeded %d sample products", len(stored))
    return stored
