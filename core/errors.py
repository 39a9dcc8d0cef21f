# =============================================================================
# core/errors.py  —  Inventory Exceptions
# =============================================================================
#
# core/ raises these; tools/ catches them and turns them into the
# "Error: ..." sentences the calling agent reads.  Anything that is not an
# InventoryError (sqlite3.Error, for instance) is left to propagate.
# =============================================================================


class InventoryError(Exception):
    """Base class for inventory domain errors."""


class ProductValidationError(InventoryError):
    """A product field failed validation.

    Attributes:
        field: The offending field name ("name", "category", "price", "stock").
        problem: What is wrong with it ("empty" or "negative").
    """

    def __init__(self, field: str, problem: str):
        self.field = field
        self.problem = problem
        super().__init__(f"Product {field} cannot be {problem}.")


class ProductNotFoundError(InventoryError):
    """No stored product has the requested id."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found.")
