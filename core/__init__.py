# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains the inventory domain: the Product model, the SQLite
# backed InventoryStore, input validation, sample data and settings.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  tools/ depends on core/, never the other way around.
# =============================================================================
