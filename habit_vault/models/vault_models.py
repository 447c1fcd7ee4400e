"""Pydantic input models for vault configuration discovery."""

from __future__ import annotations

from pydantic import BaseModel


class HabitConfigurationInput(BaseModel):
    """Input model for get_habit_configuration tool.

    Takes no parameters, but using a model maintains API consistency.

    Examples:
        >>> HabitConfigurationInput()
    """

    # No fields required - this model exists for API consistency

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }
