"""Module-level constants for the habit vault MCP server."""

import re
from pathlib import Path

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "habits.yaml"
CONFIG_ENV_VAR = "HABIT_VAULT_CONFIG"

# Daily files
FRONTMATTER_DELIMITER = "---"
DAILY_NOTE_SUFFIX = ".md"
DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Default offset window (days relative to today)
DEFAULT_START_OFFSET = -5
DEFAULT_END_OFFSET = 0

# Limits
MAX_FRONTMATTER_BYTES = 10_240
MAX_WINDOW_DAYS = 366

# Logging
LOG_LEVEL = "INFO"
