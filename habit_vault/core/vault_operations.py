"""Core vault operations and validation."""

from datetime import datetime
from pathlib import Path

from habit_vault.constants import DAILY_NOTE_SUFFIX, DATE_FORMAT, DATE_PATTERN
from habit_vault.data_models import VaultMetadata


def ensure_vault_ready(vault: VaultMetadata) -> None:
    """Ensure the target vault directory is accessible before performing operations.

    Args:
        vault: Metadata describing the vault to use.

    Raises:
        FileNotFoundError: If the vault path does not exist or is not a directory.
    """
    if not vault.path.is_dir():
        raise FileNotFoundError(f"Vault '{vault.name}' is not accessible at {vault.path}")


def validate_date_string(value: str) -> str:
    """Check that ``value`` is a real calendar date written as ``YYYY-MM-DD``.

    Args:
        value: Candidate date string.

    Returns:
        The same string, unchanged.

    Raises:
        ValueError: If the string is not in ``YYYY-MM-DD`` form or names a
            date that does not exist (e.g. ``2025-02-30``).
    """
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        raise ValueError(f"Date '{value}' must use the YYYY-MM-DD format.")
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError as exc:
        raise ValueError(f"Date '{value}' is not a valid calendar date.") from exc
    return value


def daily_file_path(vault_path: Path, date_str: str) -> Path:
    """Resolve the daily file for ``date_str`` inside the vault.

    Examples:
        >>> daily_file_path(Path("/notes"), "2025-01-28")
        PosixPath('/notes/2025-01-28.md')
    """
    validate_date_string(date_str)
    return Path(vault_path) / f"{date_str}{DAILY_NOTE_SUFFIX}"
