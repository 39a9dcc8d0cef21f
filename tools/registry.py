# =============================================================================
# tools/registry.py  —  Tool registration table
# =============================================================================
#
# One row per tool the server exposes: the wire name the agent sees, the
# ProductTools method that handles it, and the description the LLM reads to
# decide WHEN to call it.  FastMCP builds each parameter schema from the
# method's signature and type hints.
#
# register_tools() walks this table once, at server construction.
# =============================================================================

from dataclasses import dataclass

from tools.product_tools import ProductTools


@dataclass(frozen=True)
class ToolSpec:
    """One exposed tool: wire name → ProductTools method → description."""

    name: str
    method: str
    description: str

    def handler(self, tools: ProductTools):
        """Return the bound ProductTools method for this tool."""
        return getattr(tools, self.method)


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="getAllProducts",
        method="get_all_products",
        description=(
            "Retrieves all products from the inventory database. "
            "Returns a formatted list of all products with their details "
            "including ID, name, category, price, and stock quantity."
        ),
    ),
    ToolSpec(
        name="searchByCategory",
        method="search_by_category",
        description=(
            "Searches for products by category name. "
            "Returns all products that match the specified category (case-sensitive). "
            "Common categories include: Electronics, Books, Clothing, Appliances."
        ),
    ),
    ToolSpec(
        name="findProductsUnderPrice",
        method="find_products_under_price",
        description=(
            "Finds all products priced below a specified maximum price. "
            "Useful for finding budget-friendly options or products within a price range. "
            "Price should be specified as a decimal number (e.g., 50.00)."
        ),
    ),
    ToolSpec(
        name="addProduct",
        method="add_product",
        description=(
            "Adds a new product to the inventory database. "
            "Requires: name (product name), category (product category), "
            "price (decimal price), and stock (integer quantity). "
            "Returns confirmation with the created product details."
        ),
    ),
    ToolSpec(
        name="updateProduct",
        method="update_product",
        description=(
            "Updates an existing product's information in the inventory. "
            "Requires the product ID and new values for name, category, price, and stock. "
            "All fields are required even if only updating one field."
        ),
    ),
    ToolSpec(
        name="deleteProduct",
        method="delete_product",
        description=(
            "Deletes a product from the inventory by its ID. "
            "Returns confirmation of deletion or error if product not found."
        ),
    ),
)


def register_tools(mcp, tools: ProductTools) -> list[str]:
    """Register every TOOL_SPECS entry on a FastMCP server.

    Args:
        mcp: The FastMCP instance to register on.
        tools: The ProductTools façade whose bound methods handle the calls.

    Returns:
        The registered wire names, in table order.
    """
    registered = []
    for spec in TOOL_SPECS:
        mcp.tool(spec.handler(tools), name=spec.name, description=spec.description)
        registered.append(spec.name)
    return registered
