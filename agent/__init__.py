# =============================================================================
# agent/__init__.py
# =============================================================================
# A demo Google ADK agent that uses the inventory MCP server.
#
# The agent starts tools/mcp_server.py as a stdio subprocess, discovers the
# six inventory tools, and lets an LLM (via LiteLlm) answer questions such
# as "what do we have in Books under $40?" by calling them.
#
# Nothing in core/ or tools/ depends on this package; the server runs fine
# without it.
# =============================================================================
