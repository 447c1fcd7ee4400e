"""Base Pydantic models for MCP tool input validation.

Base Models:
- BaseHabitInput: Common validation for tools that address one habit on one day
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from habit_vault.core.vault_operations import validate_date_string

HABIT_NAME_PATTERN = re.compile(r"^[^:\n]+$")


def clean_habit_name(v: str) -> str:
    """Strip a habit name and reject names that cannot be a front matter key.

    Raises:
        ValueError: If the name is empty or contains ':' or a newline.
    """
    cleaned = v.strip()
    if not cleaned:
        raise ValueError(
            "Habit name cannot be empty. "
            "Provide a front matter key such as 'vitamins' or 'pimsleur'."
        )
    if not HABIT_NAME_PATTERN.match(cleaned):
        raise ValueError(
            "Habit name cannot contain ':' or newlines. "
            f"Invalid habit: '{cleaned}'"
        )
    return cleaned


class BaseHabitInput(BaseModel):
    """Base model for operations on a single habit on a single day."""

    date: str = Field(
        description=(
            "Day to edit, formatted YYYY-MM-DD. "
            "The daily file '<vault>/<date>.md' must already exist."
        ),
        examples=["2025-01-28"],
    )

    habit: str = Field(
        min_length=1,
        description="Front matter key of the habit, e.g. 'vitamins' or 'pimsleur'.",
        examples=["vitamins", "pimsleur"],
    )

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Validate that the date is a real calendar day in YYYY-MM-DD form.

        Raises:
            ValueError: If the date is malformed or does not exist
        """
        return validate_date_string(v.strip())

    @field_validator("habit")
    @classmethod
    def validate_habit(cls, v: str) -> str:
        """Validate the habit name."""
        return clean_habit_name(v)
