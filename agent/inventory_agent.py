# =============================================================================
# agent/inventory_agent.py  —  Google ADK agent wired to the inventory server
# =============================================================================
#
#   ┌──────────────────────────────┐        stdio        ┌──────────────────┐
#   │  Google ADK Agent            │ ──────────────────▶ │  FastMCP server  │
#   │  LiteLlm model + prompt      │ ◀────────────────── │  tools/          │
#   └──────────────────────────────┘                     └────────┬─────────┘
#                                                                 │
#                                                        ┌────────▼─────────┐
#                                                        │  core/ (SQLite)  │
#                                                        └──────────────────┘
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess with `uv run python -m
#   tools.mcp_server` from the project root, so the subprocess sees the
#   project's .venv and its packages.  Server settings (INVENTORY_*) are
#   inherited through the environment.
#
# MODEL:
#   Any LiteLlm model string works; the default routes GPT-4o through
#   OpenRouter and reads OPENROUTER_API_KEY from the environment.
# =============================================================================

import os
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_inventory_assistant_prompt
from core.settings import Settings, get_settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters() -> StdioServerParameters:
    """How ADK launches the inventory MCP server."""
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        env=dict(os.environ),
    )


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create the inventory assistant agent.

    Args:
        settings: Configuration to use; defaults to get_settings().

    Returns:
        A configured Google ADK Agent whose only tools are the inventory
        tools discovered from the MCP server.
    """
    settings = settings or get_settings()

    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="inventory_assistant",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_inventory_assistant_prompt(),
        tools=[mcp_tools],
    )
