# =============================================================================
# core/inventory.py  —  Inventory Store (SQLite)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns every Product record.  Offers create, read-all, read-by-id, the two
#   filtered reads the tools need (by category, by price), update and delete.
#
# STORAGE:
#   An embedded SQLite database.  The default path ":memory:" gives a fresh,
#   process-private database on every start; a file path makes the
#   inventory survive restarts.  Identity comes from an AUTOINCREMENT
#   primary key, so ids are never reused within one database.
#
# THREADING:
#   FastMCP may run synchronous tools off the event-loop thread, so the
#   connection is opened with check_same_thread=False and every statement
#   runs under one lock.  Each write is a single committed statement, so a
#   reader never sees half of an update.
#
# VALIDATION:
#   None here.  Field rules live in core/validation.py and are applied by
#   the tool layer before calling create().
# =============================================================================

import logging
import sqlite3
import threading
from typing import Optional

from core.errors import ProductNotFoundError
from core.models import Product

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id       INTEGER PRIMARY KEY AUTOINCREMENT,
    name     TEXT    NOT NULL,
    category TEXT    NOT NULL,
    price    REAL    NOT NULL,
    stock    INTEGER NOT NULL
)
"""

_COLUMNS = "id, name, category, price, stock"

# SQLite INTEGER is a signed 64-bit value
_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1


def _row_to_product(row) -> Product:
    product_id, name, category, price, stock = row
    return Product(name=name, category=category, price=price, stock=stock, id=product_id)


class InventoryStore:
    """SQLite-backed repository of Product records."""

    def __init__(self, db_path: str = ":memory:"):
        self.db_path = db_path
        self._lock = threading.Lock()
        self._connection = sqlite3.connect(db_path, check_same_thread=False)
        with self._lock:
            self._connection.execute(_SCHEMA)
            self._connection.commit()
        logger.debug("Opened inventory store at %s", db_path)

    def _query(self, sql: str, params=()) -> list:
        with self._lock:
            cursor = self._connection.execute(sql, params)
            try:
                return cursor.fetchall()
            finally:
                cursor.close()

    def _write(self, sql: str, params=()) -> sqlite3.Cursor:
        with self._lock:
            cursor = self._connection.execute(sql, params)
            self._connection.commit()
            return cursor

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, draft: Product) -> Product:
        """Persist ``draft`` under a newly assigned id.

        The draft itself is left untouched; the returned Product is a copy
        carrying the id.  Any id already on the draft is ignored.
        """
        cursor = self._write(
            "INSERT INTO products (name, category, price, stock) VALUES (?, ?, ?, ?)",
            (draft.name, draft.category, draft.price, draft.stock),
        )
        stored = draft.with_id(cursor.lastrowid)
        cursor.close()
        return stored

    def update(self, product: Product) -> Product:
        """Overwrite all mutable fields of the stored record with ``product.id``.

        Raises:
            ProductNotFoundError: If no record has that id.
        """
        if not product.is_stored:
            raise ProductNotFoundError(None)
        cursor = self._write(
            "UPDATE products SET name = ?, category = ?, price = ?, stock = ? WHERE id = ?",
            (product.name, product.category, product.price, product.stock, product.id),
        )
        updated = cursor.rowcount
        cursor.close()
        if updated == 0:
            raise ProductNotFoundError(product.id)
        return Product(
            name=product.name,
            category=product.category,
            price=product.price,
            stock=product.stock,
            id=product.id,
        )

    def delete(self, product: Product) -> None:
        """Remove the stored record with ``product.id``.

        Raises:
            ProductNotFoundError: If no record has that id.
        """
        if not product.is_stored:
            raise ProductNotFoundError(None)
        cursor = self._write("DELETE FROM products WHERE id = ?", (product.id,))
        deleted = cursor.rowcount
        cursor.close()
        if deleted == 0:
            raise ProductNotFoundError(product.id)

    def clear(self) -> None:
        """Delete every record and restart id assignment at 1."""
        with self._lock:
            self._connection.execute("DELETE FROM products")
            # sqlite_sequence only exists once an AUTOINCREMENT row was inserted
            if self._has_sequence_table():
                self._connection.execute("DELETE FROM sqlite_sequence WHERE name = 'products'")
            self._connection.commit()

    def _has_sequence_table(self) -> bool:
        cursor = self._connection.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'sqlite_sequence'"
        )
        found = cursor.fetchone() is not None
        cursor.close()
        return found

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def find_all(self) -> list[Product]:
        """Return every stored product, ordered by id."""
        rows = self._query(f"SELECT {_COLUMNS} FROM products ORDER BY id")
        return [_row_to_product(row) for row in rows]

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with ``product_id``, or None.

        Ids outside SQLite's 64-bit INTEGER range can never be stored, so
        they are reported as absent rather than sent to the database.
        """
        if not _MIN_ID <= product_id <= _MAX_ID:
            return None
        rows = self._query(f"SELECT {_COLUMNS} FROM products WHERE id = ?", (product_id,))
        return _row_to_product(rows[0]) if rows else None

    def find_by_category(self, category: str) -> list[Product]:
        """Return products whose category equals ``category`` exactly.

        Matching is case-sensitive and does not trim whitespace:
        "Books" matches "Books" but not "books" or "Books ".
        """
        rows = self._query(
            f"SELECT {_COLUMNS} FROM products WHERE category = ? ORDER BY id",
            (category,),
        )
        return [_row_to_product(row) for row in rows]

    def find_by_price_less_than(self, threshold: float) -> list[Product]:
        """Return products with ``price < threshold`` (strict)."""
        rows = self._query(
            f"SELECT {_COLUMNS} FROM products WHERE price < ? ORDER BY id",
            (threshold,),
        )
        return [_row_to_product(row) for row in rows]

    def count(self) -> int:
        return self._query("SELECT COUNT(*) FROM products")[0][0]

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            self._connection.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
