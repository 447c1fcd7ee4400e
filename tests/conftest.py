"""Shared fixtures for the habit vault test suite."""

from datetime import date
from pathlib import Path

import pytest

FIXED_TODAY = date(2025, 1, 28)

DAILY_NOTE = """---
vitamins: true
pimsleur: 2
huel: false
teeth: null
---
# Tuesday

Went for a walk. Body text --- with a dash run.
"""


def write_daily(vault_path: Path, date_str: str, content: str) -> Path:
    """Write a daily file into ``vault_path`` and return its path."""
    note_path = vault_path / f"{date_str}.md"
    note_path.write_text(content, encoding="utf-8")
    return note_path


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def habit_vault_dir(tmp_path):
    """Create a vault with three days of notes around 2025-01-28.

    2025-01-27 is deliberately missing and 2025-01-25 is malformed.
    """
    vault_path = tmp_path / "Daily Notes"
    vault_path.mkdir()

    write_daily(vault_path, "2025-01-25", "vitamins: true\nno delimiters here\n")
    write_daily(
        vault_path,
        "2025-01-26",
        "---\nvitamins: false\npimsleur: 0\nhuel: true\nteeth: true\n---\nSunday.\n",
    )
    write_daily(vault_path, "2025-01-28", DAILY_NOTE)
    write_daily(
        vault_path,
        "2025-01-29",
        "---\nvitamins:\npimsleur: 1\nmood: good\n---\n",
    )
    return vault_path
