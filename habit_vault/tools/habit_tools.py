"""Habit tracking MCP tools.

This module provides MCP tool wrappers for daily habit front matter:
- Read a window of days
- Merge edits into several days
- Toggle a boolean habit / step a counter habit
- Render a window as a markdown table

All tools delegate to core operations in habit_vault.core.
"""
from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import Context

from habit_vault.server import mcp
from habit_vault import config
from habit_vault.data_models import HabitConfiguration
from habit_vault.models import (
    GetHabitsInput,
    UpdateHabitsInput,
    ToggleHabitInput,
    AdjustCounterInput,
)
from habit_vault.core.habit_operations import (
    adjust_counter,
    render_habit_table as render_table,
    toggle_habit as toggle,
)
from habit_vault.core.snapshot_operations import load_window, persist, snapshot_payload
from habit_vault.core.vault_operations import ensure_vault_ready

logger = logging.getLogger(__name__)


def _resolve_window(
    input: GetHabitsInput,
    configuration: HabitConfiguration,
) -> tuple[int, int]:
    start = configuration.start_offset if input.start_offset is None else input.start_offset
    end = configuration.end_offset if input.end_offset is None else input.end_offset
    return start, end


def _ready_configuration() -> HabitConfiguration:
    configuration = config.get_habit_configuration()
    ensure_vault_ready(configuration.vault)
    return configuration


# ==============================================================================
# WINDOW OPERATIONS
# ==============================================================================

@mcp.tool()
async def get_habits(
    input: GetHabitsInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Read habit front matter for a window of days around today.

    Days without a daily file (or with a malformed one) come back as ``{}``.
    Dates are ordered oldest first.

    Args:
        input (GetHabitsInput): Validated input containing:
            - start_offset (int, optional): First day relative to today (default -5)
            - end_offset (int, optional): Last day relative to today (default 0)

    Returns:
        {
            "vault": str,
            "start_offset": int,
            "end_offset": int,
            "dates": list[str],
            "habits": {"YYYY-MM-DD": {"habit": bool | number | str | null}}
        }

    Error Handling:
        - ValidationError: start_offset greater than end_offset
        - InvalidRangeError: resolved window inverted, wider than MAX_WINDOW_DAYS
          or outside the calendar
        - Vault inaccessible → FileNotFoundError with path
    """
    configuration = _ready_configuration()
    start, end = _resolve_window(input, configuration)
    snapshot = load_window(configuration.vault.path, start, end)
    return {
        "vault": configuration.vault.name,
        "start_offset": start,
        "end_offset": end,
        "dates": list(snapshot),
        "habits": snapshot_payload(snapshot),
    }


@mcp.tool()
async def update_habits(
    input: UpdateHabitsInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Merge habit values into one or more daily files.

    Only the listed fields change; other fields and the note body are kept.
    Each day is handled independently, so a missing file skips that day only.

    Args:
        input (UpdateHabitsInput): Validated input containing:
            - habits (dict): {"YYYY-MM-DD": {"habit": value}}

    Returns:
        {
            "vault": str,
            "status": "ok" | "partial",
            "updated": int,
            "unchanged": int,
            "skipped": int,
            "results": {"YYYY-MM-DD": {"status": str, "fields_updated": list[str], ...}}
        }

    Error Handling:
        - ValidationError: Non-object payload, bad date key or habit name
        - Missing or malformed daily file → that date reported as "skipped"
    """
    configuration = _ready_configuration()
    results = persist(configuration.vault.path, input.habits)

    counts = {"updated": 0, "unchanged": 0, "skipped": 0}
    for result in results.values():
        counts[result["status"]] += 1

    logger.info(
        "Habit update in vault '%s': %d updated, %d unchanged, %d skipped",
        configuration.vault.name,
        counts["updated"],
        counts["unchanged"],
        counts["skipped"],
    )
    return {
        "vault": configuration.vault.name,
        "status": "partial" if counts["skipped"] else "ok",
        **counts,
        "results": results,
    }


@mcp.tool()
async def render_habit_table(
    input: GetHabitsInput,
    ctx: Context | None = None,
) -> str:
    """Render a window of habits as a markdown table.

    Rows follow the configured habit order (or every field found when none is
    configured); columns are days, oldest leftmost, today in bold.

    Args:
        input (GetHabitsInput): Same window parameters as get_habits

    Returns:
        Markdown table text. ✓ marks a done boolean, '-' an unset value.
    """
    configuration = _ready_configuration()
    start, end = _resolve_window(input, configuration)
    snapshot = load_window(configuration.vault.path, start, end)
    return render_table(snapshot, configuration.habit_order, configuration.emojis)


# ==============================================================================
# CELL OPERATIONS
# ==============================================================================

@mcp.tool()
async def toggle_habit(
    input: ToggleHabitInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Flip a boolean habit for one day (true ↔ false; null or unset → true).

    Args:
        input (ToggleHabitInput): Validated input containing:
            - date (str): YYYY-MM-DD
            - habit (str): Front matter key

    Returns:
        {"date": str, "path": str, "status": "updated", "habit": str, "value": bool, ...}

    Error Handling:
        - Daily file missing → FileNotFoundError
        - Habit holds a number or string → ValueError
    """
    configuration = _ready_configuration()
    return toggle(configuration.vault.path, input.date, input.habit)


@mcp.tool()
async def adjust_habit_counter(
    input: AdjustCounterInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Add to (or subtract from) a counter habit for one day, floored at zero.

    Args:
        input (AdjustCounterInput): Validated input containing:
            - date (str): YYYY-MM-DD
            - habit (str): Front matter key
            - delta (int, optional): Amount to add (default 1)

    Returns:
        {"date": str, "path": str, "status": "updated" | "unchanged", "habit": str, "value": number, ...}

    Error Handling:
        - Daily file missing → FileNotFoundError
        - Habit holds a boolean or string → ValueError
    """
    configuration = _ready_configuration()
    return adjust_counter(configuration.vault.path, input.date, input.habit, input.delta)
