"""Pydantic input models for habit operations.

This module defines input models for habit tracking tools:
- Read a window of days relative to today
- Merge field edits into several days at once
- Toggle a boolean habit
- Step a counter habit
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from habit_vault.constants import MAX_WINDOW_DAYS
from habit_vault.core.vault_operations import validate_date_string

from .base import BaseHabitInput, clean_habit_name

HabitValue = Union[bool, int, float, str, None]


class GetHabitsInput(BaseModel):
    """Input model for get_habits and render_habit_table tools.

    Offsets are days relative to today. Omitted offsets fall back to the
    configured window (``-5`` to ``0`` by default).

    Examples:
        >>> GetHabitsInput()
        >>> GetHabitsInput(start_offset=-6, end_offset=0)
    """

    start_offset: Optional[int] = Field(
        None,
        description="First day of the window in days from today (negative for the past).",
        examples=[-6, -5],
    )

    end_offset: Optional[int] = Field(
        None,
        description="Last day of the window in days from today, inclusive.",
        examples=[0, 1],
    )

    @model_validator(mode="after")
    def validate_window(self) -> "GetHabitsInput":
        """Reject inverted or oversized windows when both offsets are given."""
        if self.start_offset is None or self.end_offset is None:
            return self

        if self.start_offset > self.end_offset:
            raise ValueError(
                "start_offset must not be greater than end_offset. "
                f"Got start_offset={self.start_offset}, end_offset={self.end_offset}."
            )
        if self.end_offset - self.start_offset + 1 > MAX_WINDOW_DAYS:
            raise ValueError(
                f"Window cannot span more than {MAX_WINDOW_DAYS} days."
            )
        return self

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {},
                {"start_offset": -6, "end_offset": 0},
            ]
        }


class UpdateHabitsInput(BaseModel):
    """Input model for update_habits tool.

    Merges the given fields into each day's front matter. Fields not mentioned
    are preserved, as is the note body.

    Examples:
        >>> UpdateHabitsInput(habits={"2025-01-28": {"vitamins": False}})
    """

    habits: dict[str, dict[str, HabitValue]] = Field(
        description=(
            "Mapping of YYYY-MM-DD date to the fields to set on that day. "
            "Values are booleans, numbers, strings or null."
        ),
        examples=[
            {"2025-01-28": {"vitamins": False, "pimsleur": 2}},
        ],
    )

    @field_validator("habits")
    @classmethod
    def validate_habits(cls, v: dict[str, dict[str, HabitValue]]) -> dict[str, dict[str, HabitValue]]:
        """Validate date keys and habit names.

        Raises:
            ValueError: If the payload is empty, a date is malformed, or a habit
                name cannot be used as a front matter key
        """
        if not v:
            raise ValueError(
                "Provide at least one date with fields to update."
            )

        cleaned: dict[str, dict[str, HabitValue]] = {}
        for date_str, fields in v.items():
            day = validate_date_string(date_str.strip())
            cleaned[day] = {clean_habit_name(name): value for name, value in fields.items()}
        return cleaned

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"habits": {"2025-01-28": {"vitamins": False}}},
                {"habits": {"2025-01-27": {"huel": True}, "2025-01-28": {"pimsleur": 2}}},
            ]
        }


class ToggleHabitInput(BaseHabitInput):
    """Input model for toggle_habit tool.

    Examples:
        >>> ToggleHabitInput(date="2025-01-28", habit="vitamins")
    """

    # Inherits date and habit from BaseHabitInput

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"date": "2025-01-28", "habit": "vitamins"},
            ]
        }


class AdjustCounterInput(BaseHabitInput):
    """Input model for adjust_habit_counter tool.

    Examples:
        >>> AdjustCounterInput(date="2025-01-28", habit="pimsleur")
        >>> AdjustCounterInput(date="2025-01-28", habit="pimsleur", delta=-1)
    """

    delta: int = Field(
        1,
        description="Amount to add to the counter. Negative values decrement; the result never drops below 0.",
        examples=[1, -1],
    )

    @field_validator("delta")
    @classmethod
    def validate_delta(cls, v: int) -> int:
        """Reject a zero delta, which would be a no-op."""
        if v == 0:
            raise ValueError("delta must be non-zero.")
        return v

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"date": "2025-01-28", "habit": "pimsleur", "delta": 1},
                {"date": "2025-01-28", "habit": "pimsleur", "delta": -1},
            ]
        }
