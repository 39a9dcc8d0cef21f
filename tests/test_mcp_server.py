"""Tests for the tool registration table and the FastMCP server.

The end-to-end tests drive the server through FastMCP's in-memory Client,
the same path a stdio client takes minus the transport.
"""

import asyncio

import pytest
from fastmcp import Client

from core.settings import Settings
from tools.mcp_server import build_from_settings, create_server
from tools.product_tools import ProductTools
from tools.registry import TOOL_SPECS, register_tools

WIRE_NAMES = [
    "getAllProducts",
    "searchByCategory",
    "findProductsUnderPrice",
    "addProduct",
    "updateProduct",
    "deleteProduct",
]


def _list_tools(mcp):
    async def run():
        async with Client(mcp) as client:
            return await client.list_tools()

    return asyncio.run(run())


def _call(mcp, name, arguments=None):
    async def run():
        async with Client(mcp) as client:
            result = await client.call_tool(name, arguments or {})
            return result.content[0].text

    return asyncio.run(run())


class TestRegistry:
    def test_table_covers_every_tool(self):
        assert [spec.name for spec in TOOL_SPECS] == WIRE_NAMES

    def test_every_method_exists_on_facade(self, tools):
        for spec in TOOL_SPECS:
            assert callable(spec.handler(tools))
            assert spec.description

    def test_register_tools_returns_names_in_order(self, tools):
        registered = []

        class RecordingServer:
            def tool(self, fn, name, description):
                registered.append((name, fn, description))

        assert register_tools(RecordingServer(), tools) == WIRE_NAMES
        assert [name for name, _, _ in registered] == WIRE_NAMES
        assert registered[0][1] == tools.get_all_products


class TestServer:
    @pytest.fixture
    def mcp(self, seeded_store):
        return create_server(seeded_store)

    def test_lists_tools_with_descriptions(self, mcp):
        listed = {tool.name: tool for tool in _list_tools(mcp)}

        assert sorted(listed) == sorted(WIRE_NAMES)
        assert listed["deleteProduct"].description.startswith("Deletes a product")
        assert set(listed["updateProduct"].inputSchema["properties"]) == {
            "id", "name", "category", "price", "stock",
        }
        assert set(listed["findProductsUnderPrice"].inputSchema["properties"]) == {
            "maxPrice",
        }

    def test_call_returns_text(self, mcp):
        assert _call(mcp, "searchByCategory", {"category": "Books"}).startswith(
            "Found 2 products in category 'Books':"
        )

    def test_add_then_list(self, mcp):
        added = _call(
            mcp,
            "addProduct",
            {"name": "Widget", "category": "Tools", "price": 9.99, "stock": 5},
        )
        listing = _call(mcp, "getAllProducts")

        assert added.startswith("Product added successfully!\nID: 11")
        assert "- Widget (ID: 11)\n  Category: Tools\n  Price: $9.99\n  Stock: 5 units" in listing

    def test_price_filter_takes_max_price_argument(self, mcp):
        result = _call(mcp, "findProductsUnderPrice", {"maxPrice": 30.0})

        assert result.startswith("Found 3 products under $30.00:")
        assert "- T-Shirt - $19.99 (Clothing) - Stock: 100" in result

    def test_errors_come_back_as_text(self, mcp):
        assert _call(mcp, "deleteProduct", {"id": 404}) == (
            "Error: Product with ID 404 not found."
        )


class TestBuildFromSettings:
    def test_seeds_when_enabled(self):
        mcp, store = build_from_settings(Settings(server_name="test-inventory"))
        try:
            assert store.count() == 10
            assert mcp.name == "test-inventory"
        finally:
            store.close()

    def test_skips_seeding_when_disabled(self):
        _, store = build_from_settings(Settings(seed_sample_data=False))
        try:
            assert ProductTools(store).get_all_products() == "Found 0 products:\n\n"
        finally:
            store.close()
