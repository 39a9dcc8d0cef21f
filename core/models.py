# =============================================================================
# core/models.py  —  Data Models
# =============================================================================
#
# The inventory has exactly one entity: Product.  A Product without an id is
# a draft (not yet stored); the InventoryStore assigns the id on create and
# never changes it afterwards.
# =============================================================================

from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class Product:
    """One inventory record.

    Field constraints (non-empty name/category, non-negative price/stock)
    are enforced by core.validation before a draft reaches the store; the
    store itself stores whatever it is given.
    """

    name: str                          # "Wireless Mouse"
    category: str                      # "Electronics" (case-sensitive)
    price: float                       # USD, >= 0
    stock: int                         # Units on hand, >= 0
    id: Optional[int] = None           # None until the store assigns one

    @property
    def is_stored(self) -> bool:
        return self.id is not None

    def with_id(self, product_id: int) -> "Product":
        """Return a copy of this product carrying ``product_id``."""
        return replace(self, id=product_id)
