# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP layer between a calling agent and core/.
#
#   product_tools.py  ProductTools: validation + text formatting per tool
#   registry.py       TOOL_SPECS: wire name → method → description
#   tool_logging.py   stderr logging of requests and responses
#   mcp_server.py     FastMCP server construction and stdio entry point
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT touch SQLite directly (that's core/inventory.py)
#   - They do NOT raise for bad input or missing ids; they answer in text
# =============================================================================
