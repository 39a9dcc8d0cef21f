# =============================================================================
# core/validation.py  —  Field validation for new products
# =============================================================================
#
# Checks run in a fixed order (name → category → price → stock) and stop at
# the first failure, so the caller always gets exactly one error message.
# =============================================================================

from core.errors import ProductValidationError


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def validate_new_product(name: str, category: str, price: float, stock: int) -> None:
    """Validate the fields of a product about to be created.

    Args:
        name: Must contain at least one non-whitespace character.
        category: Must contain at least one non-whitespace character.
        price: Must be >= 0.
        stock: Must be >= 0.

    Raises:
        ProductValidationError: For the first field that fails.
    """
    if _is_blank(name):
        raise ProductValidationError("name", "empty")
    if _is_blank(category):
        raise ProductValidationError("category", "empty")
    if price < 0:
        raise ProductValidationError("price", "negative")
    if stock < 0:
        raise ProductValidationError("stock", "negative")
