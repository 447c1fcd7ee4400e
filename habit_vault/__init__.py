"""Habit Vault MCP Server

Daily-note habit tracking over YAML front matter via Model Context Protocol.
"""

from habit_vault.data_models import ABSENT, HabitConfiguration, VaultMetadata
from habit_vault.errors import (
    DailyFileNotFoundError,
    HabitVaultError,
    InvalidRangeError,
    MalformedFileError,
    SerializationError,
)
from habit_vault.config import get_habit_configuration, load_habit_configuration
from habit_vault.core.date_range import date_range
from habit_vault.core.frontmatter_operations import read_front_matter, write_front_matter
from habit_vault.core.scalar_codec import decode, encode
from habit_vault.core.snapshot_operations import load_window, persist, snapshot_payload
from habit_vault.server import mcp, run_server

# Import tools to register them with the MCP server
from habit_vault import tools  # noqa: F401

__version__ = "0.1.0"
__all__ = [
    "ABSENT",
    "HabitConfiguration",
    "VaultMetadata",
    "HabitVaultError",
    "DailyFileNotFoundError",
    "MalformedFileError",
    "InvalidRangeError",
    "SerializationError",
    "get_habit_configuration",
    "load_habit_configuration",
    "date_range",
    "read_front_matter",
    "write_front_matter",
    "decode",
    "encode",
    "load_window",
    "persist",
    "snapshot_payload",
    "mcp",
    "run_server",
]
