"""FastMCP server initialization and tool registration."""

import logging
from mcp.server.fastmcp import FastMCP

from habit_vault.constants import LOG_LEVEL

# Initialize logger
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("habit_vault")

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Start the MCP server with stdio transport."""
    # Imported here so `python -m habit_vault.server` registers the tools too
    from habit_vault import tools  # noqa: F401

    logger.info("Starting Habit Vault MCP Server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
