"""Exception types raised by the habit vault core.

Each error also derives from the closest builtin so callers that only know
about ``FileNotFoundError`` or ``ValueError`` keep working.
"""


class HabitVaultError(Exception):
    """Base class for all habit vault errors."""


class DailyFileNotFoundError(HabitVaultError, FileNotFoundError):
    """No daily file exists for the requested date."""


class MalformedFileError(HabitVaultError, ValueError):
    """A daily file lacks the two ``---`` front-matter delimiters."""


class InvalidRangeError(HabitVaultError, ValueError):
    """An offset window whose start lies after its end."""


class SerializationError(HabitVaultError, ValueError):
    """A field value cannot be written as a flat front-matter scalar."""
