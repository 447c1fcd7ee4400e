"""MCP tools for vault configuration discovery."""

import logging
from typing import Any
from mcp.server.fastmcp import Context

from habit_vault.server import mcp
from habit_vault.models import HabitConfigurationInput
from habit_vault import config

logger = logging.getLogger(__name__)


@mcp.tool()
async def get_habit_configuration(
    input: HabitConfigurationInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Show the configured vault, habit order, emojis and default window.

    Args:
        input (HabitConfigurationInput): Validated input (no fields required)
        ctx (Context, optional): FastMCP context

    Returns:
        {
            "vault": {"name": str, "path": str, "description": str, "exists": bool},
            "habits": list[str],
            "emojis": dict[str, str],
            "window": {"start_offset": int, "end_offset": int}
        }

    Examples:
        - Use when: Starting a conversation, need the habit names before editing
        - Don't use: Need actual values (use get_habits)

    Error Handling:
        - Config file missing → Error with expected config path
        - Invalid config format → Error describing expected YAML structure
    """
    configuration = config.get_habit_configuration()
    logger.info("Reporting configuration for vault '%s'", configuration.vault.name)
    return configuration.as_payload()
