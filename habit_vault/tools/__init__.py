"""MCP tool definitions for habit vault operations.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from habit_vault.tools import vault_tools
from habit_vault.tools import habit_tools

__all__ = [
    "vault_tools",
    "habit_tools",
]
