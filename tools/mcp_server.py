# =============================================================================
# tools/mcp_server.py  —  FastMCP server for the product inventory
# =============================================================================
#
# HOW IT WORKS (the flow):
#   1. An agent connects over stdio and discovers the six inventory tools
#   2. It calls a tool by name (e.g. "searchByCategory")
#   3. FastMCP routes the call to the ProductTools method from the
#      registration table in tools/registry.py
#   4. The method calls the InventoryStore and returns formatted text
#
# STARTUP ORDER:
#   settings → logging → store → (optional) sample seeding → server → run.
#   Seeding finishes before the transport starts, so no tool call can ever
#   see a half-seeded inventory.
#
# RUNNING THIS SERVER:
#     a) python -m tools.mcp_server
#     b) inventory-mcp-server            (console script from pyproject.toml)
#     c) spawned by the demo agent via stdio transport (agent/inventory_agent.py)
# =============================================================================

import logging

from fastmcp import FastMCP

from core.inventory import InventoryStore
from core.sample_data import seed_sample_products
from core.settings import Settings, get_settings
from tools.product_tools import ProductTools
from tools.registry import register_tools
from tools.tool_logging import configure_logging

logger = logging.getLogger(__name__)


def create_server(store: InventoryStore, name: str = "product-inventory") -> FastMCP:
    """Build a FastMCP server exposing the inventory tools over ``store``."""
    mcp = FastMCP(name)
    registered = register_tools(mcp, ProductTools(store))
    logger.info("Registered %d tools: %s", len(registered), ", ".join(registered))
    return mcp


def build_from_settings(settings: Settings) -> tuple[FastMCP, InventoryStore]:
    """Open the store, seed it if configured, and build the server."""
    store = InventoryStore(settings.db_path)
    if settings.seed_sample_data:
        seed_sample_products(store)
    return create_server(store, name=settings.server_name), store


def main():
    settings = get_settings()
    configure_logging(settings.log_level_value)

    mcp, store = build_from_settings(settings)
    logger.info("Serving inventory at %s over stdio", settings.db_path)
    try:
        mcp.run(transport="stdio")
    finally:
        store.close()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    main()
