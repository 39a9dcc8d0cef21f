# =============================================================================
# tools/tool_logging.py  —  Request/response logging for tool calls
# =============================================================================
# The MCP server talks to its client over STDOUT, so logs go to STDERR only;
# anything printed to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses (first line of the text result)
#     - YELLOW for intermediate status messages
# =============================================================================

import logging
import sys

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logger = logging.getLogger("inventory.tools")


def configure_logging(level=logging.INFO) -> None:
    """Send all log records to stderr in the server's compact format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(tool_name: str, result: str) -> str:
    """Log the first line of a tool's text result in GREEN, then return it."""
    first_line = result.splitlines()[0] if result else ""
    logger.info(f"{_GREEN}  ← {tool_name} response: {first_line}{_RESET}")
    return result
