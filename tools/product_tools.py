# =============================================================================
# tools/product_tools.py  —  Tool Façade over the InventoryStore
# =============================================================================
#
# WHAT THIS FILE DOES:
#   ProductTools is the set of operations an agent can call.  Each method
#   takes primitive parameters, talks to the InventoryStore, and returns ONE
#   plain-text string.  Failures come back as sentences starting with
#   "Error:" on the same channel as successes; nothing structured, nothing
#   raised for validation or not-found cases.
#
# WIRING:
#   The store is handed in at construction time.  tools/registry.py maps the
#   wire names (getAllProducts, ...) onto the bound methods below.
#
# VALIDATION ASYMMETRY:
#   add_product validates every field; update_product does not.  See
#   DESIGN.md, "Open questions".
# =============================================================================

from core.errors import ProductNotFoundError, ProductValidationError
from core.inventory import InventoryStore
from core.models import Product
from core.validation import validate_new_product
from tools.tool_logging import log_request, log_response, log_status


def _money(amount: float) -> str:
    return f"${amount:.2f}"


def _not_found(product_id) -> str:
    return f"Error: {ProductNotFoundError(product_id)}"


def _details_block(headline: str, product: Product) -> str:
    return (
        f"{headline}\n"
        f"ID: {product.id}\n"
        f"Name: {product.name}\n"
        f"Category: {product.category}\n"
        f"Price: {_money(product.price)}\n"
        f"Stock: {product.stock} units"
    )


class ProductTools:
    """Text-in, text-out inventory operations for a calling agent."""

    def __init__(self, store: InventoryStore):
        self.store = store

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_all_products(self) -> str:
        """List every product with its id, category, price and stock."""
        log_request("getAllProducts")
        products = self.store.find_all()

        parts = [f"Found {len(products)} products:\n\n"]
        for product in products:
            parts.append(
                f"- {product.name} (ID: {product.id})\n"
                f"  Category: {product.category}\n"
                f"  Price: {_money(product.price)}\n"
                f"  Stock: {product.stock} units\n\n"
            )
        return log_response("getAllProducts", "".join(parts))

    def search_by_category(self, category: str) -> str:
        """List products whose category matches exactly (case-sensitive)."""
        log_request("searchByCategory", category=category)
        products = self.store.find_by_category(category)
        if not products:
            return log_response(
                "searchByCategory", f"No products found in category '{category}'."
            )

        header = f"Found {len(products)} products in category '{category}':\n\n"
        return log_response("searchByCategory", header + "".join(
            f"- {p.name} (ID: {p.id}) - {_money(p.price)} - Stock: {p.stock}\n"
            for p in products
        ))

    def find_products_under_price(self, maxPrice: float) -> str:
        """List products priced strictly below ``maxPrice``.

        The parameter name is the wire name clients send.
        """
        log_request("findProductsUnderPrice", maxPrice=maxPrice)
        products = self.store.find_by_price_less_than(maxPrice)
        if not products:
            return log_response(
                "findProductsUnderPrice", f"No products found under {_money(maxPrice)}."
            )

        header = f"Found {len(products)} products under {_money(maxPrice)}:\n\n"
        return log_response("findProductsUnderPrice", header + "".join(
            f"- {p.name} - {_money(p.price)} ({p.category}) - Stock: {p.stock}\n"
            for p in products
        ))

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def add_product(self, name: str, category: str, price: float, stock: int) -> str:
        """Validate and create a product; report the assigned id."""
        log_request("addProduct", name=name, category=category, price=price, stock=stock)
        try:
            validate_new_product(name, category, price, stock)
        except ProductValidationError as exc:
            log_status(f"Rejected: {exc.field} is {exc.problem}")
            return log_response("addProduct", f"Error: {exc}")

        saved = self.store.create(
            Product(name=name, category=category, price=price, stock=stock)
        )
        log_status(f"Created product {saved.id}")
        return log_response("addProduct", _details_block("Product added successfully!", saved))

    def update_product(self, id: int, name: str, category: str, price: float, stock: int) -> str:
        """Overwrite all four fields of an existing product.

        ``id`` keeps its wire name so the tool schema reads naturally for
        the calling agent.
        """
        log_request("updateProduct", id=id, name=name, category=category,
                    price=price, stock=stock)
        existing = self.store.find_by_id(id)
        if existing is None:
            return log_response("updateProduct", _not_found(id))

        existing.name = name
        existing.category = category
        existing.price = price
        existing.stock = stock
        try:
            updated = self.store.update(existing)
        except ProductNotFoundError:
            # Deleted between the lookup and the write.
            return log_response("updateProduct", _not_found(id))
        return log_response(
            "updateProduct", _details_block("Product updated successfully!", updated)
        )

    def delete_product(self, id: int) -> str:
        """Permanently remove a product."""
        log_request("deleteProduct", id=id)
        existing = self.store.find_by_id(id)
        if existing is None:
            return log_response("deleteProduct", _not_found(id))

        try:
            self.store.delete(existing)
        except ProductNotFoundError:
            return log_response("deleteProduct", _not_found(id))
        return log_response(
            "deleteProduct",
            f"Product '{existing.name}' (ID: {existing.id}) deleted successfully.",
        )
