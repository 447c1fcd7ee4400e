"""Pydantic input models for MCP tool validation.

Each model is the input schema for one or more tools, with field-level
validation and descriptive error messages.

Architecture:
- base: ``BaseHabitInput`` with date and habit validation shared by cell edits
- habit_models: Input models for window reads, bulk updates and cell edits
- vault_models: Input model for configuration discovery

Usage:
    from habit_vault.models import GetHabitsInput, UpdateHabitsInput
    from habit_vault.models import ToggleHabitInput, AdjustCounterInput
"""

from .base import BaseHabitInput
from .habit_models import (
    GetHabitsInput,
    UpdateHabitsInput,
    ToggleHabitInput,
    AdjustCounterInput,
)
from .vault_models import HabitConfigurationInput

__all__ = [
    # Base models
    "BaseHabitInput",
    # Habit models
    "GetHabitsInput",
    "UpdateHabitsInput",
    "ToggleHabitInput",
    "AdjustCounterInput",
    # Vault models
    "HabitConfigurationInput",
]
