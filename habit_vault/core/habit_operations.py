"""Single-cell habit edits and markdown table rendering."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

from habit_vault.constants import DATE_FORMAT
from habit_vault.core.frontmatter_operations import read_front_matter
from habit_vault.core.scalar_codec import decode
from habit_vault.core.snapshot_operations import persist
from habit_vault.core.vault_operations import daily_file_path
from habit_vault.data_models import ABSENT, FieldValue

logger = logging.getLogger(__name__)

CHECKMARK = "✓"
EMPTY_CELL = "-"

# Fixed English labels so headers do not follow the host locale
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _current_value(vault_path: Path, date_str: str, habit: str) -> FieldValue:
    """Read one field from a daily file, returning ``ABSENT`` when unset."""
    front_matter = read_front_matter(daily_file_path(vault_path, date_str))
    return decode(front_matter.yaml).get(habit, ABSENT)


def _apply(vault_path: Path, date_str: str, habit: str, value: FieldValue) -> dict[str, Any]:
    result = persist(vault_path, {date_str: {habit: value}})[date_str]
    if result["status"] == "skipped":
        raise ValueError(result["error"])
    return {**result, "habit": habit, "value": value}


def _format_cell(value: FieldValue) -> str:
    if value is True:
        return CHECKMARK
    if value is False:
        return ""
    if value is None or value is ABSENT:
        return EMPTY_CELL
    return str(value).replace("|", "\\|")


def _format_date_header(date_str: str, today_str: str) -> str:
    day = datetime.strptime(date_str, DATE_FORMAT)
    label = f"{MONTH_NAMES[day.month - 1]} {day.day:02d} {WEEKDAY_NAMES[day.weekday()]}"
    return f"**{label}**" if date_str == today_str else label


# ==============================================================================
# HABIT OPERATIONS
# ==============================================================================


def toggle_habit(vault_path: Path, date_str: str, habit: str) -> dict[str, Any]:
    """Flip a boolean habit for one day.

    Booleans are strict: ``True`` and ``False`` swap, while a ``null``, empty or
    missing value becomes ``True``.

    Args:
        vault_path: Vault directory.
        date_str: Day to edit, ``YYYY-MM-DD``.
        habit: Field name.

    Returns:
        The persist result for the date plus ``habit`` and the new ``value``.

    Raises:
        DailyFileNotFoundError: If the day has no file.
        MalformedFileError: If the day's file has no front matter block.
        ValueError: If the field holds a number or string.
    """
    current = _current_value(Path(vault_path), date_str, habit)
    if current is None or current is ABSENT:
        new_value = True
    elif isinstance(current, bool):
        new_value = not current
    else:
        raise ValueError(
            f"Habit '{habit}' on {date_str} is not a boolean (found {current!r})."
        )

    logger.info("Toggling habit '%s' on %s to %s", habit, date_str, new_value)
    return _apply(Path(vault_path), date_str, habit, new_value)


def adjust_counter(vault_path: Path, date_str: str, habit: str, delta: int = 1) -> dict[str, Any]:
    """Add ``delta`` to a counter habit, never going below zero.

    A ``null``, empty or missing value counts as ``0``.

    Raises:
        DailyFileNotFoundError: If the day has no file.
        MalformedFileError: If the day's file has no front matter block.
        ValueError: If the field holds a boolean or string.
    """
    current = _current_value(Path(vault_path), date_str, habit)
    if current is None or current is ABSENT:
        current = 0
    elif isinstance(current, bool) or not isinstance(current, (int, float)):
        raise ValueError(
            f"Habit '{habit}' on {date_str} is not a counter (found {current!r})."
        )

    new_value = max(0, current + delta)
    logger.info("Adjusting habit '%s' on %s by %+d to %s", habit, date_str, delta, new_value)
    return _apply(Path(vault_path), date_str, habit, new_value)


def habit_names(snapshot: Mapping[str, Mapping[str, FieldValue]]) -> list[str]:
    """Return every field name in ``snapshot`` in first-seen order."""
    names: dict[str, None] = {}
    for fields in snapshot.values():
        for key in fields:
            names.setdefault(key, None)
    return list(names)


def render_habit_table(
    snapshot: Mapping[str, Mapping[str, FieldValue]],
    habit_order: Optional[Sequence[str]] = None,
    emojis: Optional[Mapping[str, str]] = None,
    today: Optional[date] = None,
) -> str:
    """Render a snapshot as a markdown table.

    One row per habit, one column per date with the earliest date leftmost.
    Today's column header is bold.

    Args:
        snapshot: Date → fields mapping, as returned by ``load_window``.
        habit_order: Rows to show, in order. Defaults to every field found.
        emojis: Optional habit → emoji prefix for the row label.
        today: Reference date used to highlight the current column.

    Returns:
        Markdown table text, or an empty string when ``snapshot`` is empty.
    """
    if not snapshot:
        return ""

    dates = sorted(snapshot)
    habits = list(habit_order) if habit_order else habit_names(snapshot)
    emojis = emojis or {}
    today_str = (today or date.today()).strftime(DATE_FORMAT)

    header = ["Habits"] + [_format_date_header(d, today_str) for d in dates]
    lines = [
        "| " + " | ".join(header) + " |",
        "| " + " | ".join(["---"] * len(header)) + " |",
    ]
    for habit in habits:
        label = f"{emojis[habit]} {habit}" if habit in emojis else habit
        cells = [_format_cell(snapshot[d].get(habit, ABSENT)) for d in dates]
        lines.append("| " + " | ".join([label] + cells) + " |")

    return "\n".join(lines) + "\n"
