"""Load habit snapshots for an offset window and persist edits back to disk."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Any, Optional

from habit_vault.constants import DAILY_NOTE_SUFFIX
from habit_vault.core.date_range import date_range
from habit_vault.core.frontmatter_operations import read_front_matter, write_front_matter
from habit_vault.core.scalar_codec import decode
from habit_vault.core.vault_operations import daily_file_path
from habit_vault.data_models import ABSENT, FieldValue, Fields, Snapshot
from habit_vault.errors import (
    DailyFileNotFoundError,
    MalformedFileError,
    SerializationError,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _load_day(vault_path: Path, date_str: str) -> Fields:
    """Decode one day's front matter, mapping absent or malformed files to ``{}``."""
    path = daily_file_path(vault_path, date_str)
    try:
        front_matter = read_front_matter(path)
    except DailyFileNotFoundError:
        logger.debug("No daily file for %s at %s", date_str, path)
        return {}
    except MalformedFileError as exc:
        logger.warning("Skipping malformed daily file for %s: %s", date_str, exc)
        return {}

    return decode(front_matter.yaml)


def _merge_fields(current: Fields, updates: Mapping[str, FieldValue]) -> Fields:
    """Shallow merge keeping the position of existing keys and appending new ones."""
    merged = dict(current)
    for key, value in updates.items():
        merged[key] = value
    return merged


def _changed_fields(current: Fields, merged: Fields) -> list[str]:
    changed = []
    for key, value in merged.items():
        if key not in current:
            changed.append(key)
            continue
        previous = current[key]
        # True == 1 in Python, so compare types as well as values
        if type(previous) is not type(value) or previous != value:
            changed.append(key)
    return sorted(changed)


def _persist_day(vault_path: Path, date_str: str, updates: Mapping[str, FieldValue]) -> dict[str, Any]:
    path = daily_file_path(vault_path, date_str)

    # Re-read right before writing so the body and untouched fields are current
    front_matter = read_front_matter(path)
    current = decode(front_matter.yaml)
    merged = _merge_fields(current, updates)
    changed = _changed_fields(current, merged)

    if not changed:
        logger.info("Habits for %s unchanged; skipping write", date_str)
        return {
            "date": date_str,
            "path": str(path),
            "status": "unchanged",
            "fields_updated": [],
        }

    write_front_matter(path, merged, front_matter.body)
    logger.info("Habits updated for %s (fields=%s)", date_str, ", ".join(changed))
    return {
        "date": date_str,
        "path": str(path),
        "status": "updated",
        "fields_updated": changed,
    }


# ==============================================================================
# SNAPSHOT OPERATIONS
# ==============================================================================


def load_window(
    vault_path: Path,
    start_offset: int,
    end_offset: int,
    today: Optional[date] = None,
) -> Snapshot:
    """Build a snapshot of habit fields for every day in an offset window.

    Args:
        vault_path: Vault directory holding ``YYYY-MM-DD.md`` files.
        start_offset: First day, in days from today.
        end_offset: Last day, in days from today (inclusive).
        today: Reference date; defaults to the local date.

    Returns:
        A dict with one entry per date in calendar order. Days whose file is
        missing or malformed map to ``{}``.

    Raises:
        InvalidRangeError: If the offsets do not describe a valid window.
    """
    dates = date_range(start_offset, end_offset, today=today)
    vault_path = Path(vault_path)

    snapshot: Snapshot = {}
    for date_str in dates:
        snapshot[date_str] = _load_day(vault_path, date_str)

    populated = sum(1 for fields in snapshot.values() if fields)
    logger.info(
        "Loaded habit window %s..%s from %s (%d of %d days populated)",
        dates[0],
        dates[-1],
        vault_path,
        populated,
        len(dates),
    )
    return snapshot


def persist(vault_path: Path, changes: Mapping[str, Mapping[str, FieldValue]]) -> dict[str, dict[str, Any]]:
    """Merge per-date field edits into the vault's daily files.

    Each date is handled independently: the file is re-read, the given fields
    are merged over the current ones, and the front matter is rewritten with
    the original body. Failures on one date are logged and reported in that
    date's result without affecting the others.

    Args:
        vault_path: Vault directory holding ``YYYY-MM-DD.md`` files.
        changes: Mapping of date string to the fields to set on that date.

    Returns:
        Mapping of date string to a result dictionary with ``date``, ``path``,
        ``status`` (``"updated"``, ``"unchanged"`` or ``"skipped"``),
        ``fields_updated`` and, for skipped dates, ``error``.

    Raises:
        ValueError: If ``changes`` is not a mapping of mappings. Nothing is
            written in that case.
    """
    if not isinstance(changes, Mapping):
        raise ValueError("Habit changes must be a mapping of date to fields.")
    for date_str, fields in changes.items():
        if not isinstance(fields, Mapping):
            raise ValueError(f"Changes for '{date_str}' must be a mapping of field to value.")

    vault_path = Path(vault_path)
    results: dict[str, dict[str, Any]] = {}
    for date_str, fields in changes.items():
        try:
            results[date_str] = _persist_day(vault_path, date_str, fields)
        except (
            DailyFileNotFoundError,
            MalformedFileError,
            SerializationError,
            ValueError,
            OSError,
        ) as exc:
            logger.warning("Skipping habit update for %s: %s", date_str, exc)
            results[date_str] = {
                "date": date_str,
                "path": str(vault_path / f"{date_str}{DAILY_NOTE_SUFFIX}"),
                "status": "skipped",
                "fields_updated": [],
                "error": str(exc),
            }

    return results


def snapshot_payload(snapshot: Mapping[str, Mapping[str, FieldValue]]) -> dict[str, dict[str, Any]]:
    """Return a JSON-ready copy of ``snapshot``.

    Dates are emitted in ascending order and ``ABSENT`` values are dropped,
    since JSON has no way to express a key without a value.
    """
    return {
        date_str: {key: value for key, value in snapshot[date_str].items() if value is not ABSENT}
        for date_str in sorted(snapshot)
    }
