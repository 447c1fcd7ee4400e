"""Configuration loading for the habit vault."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml

from habit_vault.constants import (
    CONFIG_ENV_VAR,
    CONFIG_PATH,
    DEFAULT_END_OFFSET,
    DEFAULT_START_OFFSET,
)
from habit_vault.data_models import HabitConfiguration, VaultMetadata

logger = logging.getLogger(__name__)


def resolve_config_path(config_path: Optional[Path] = None) -> Path:
    """Pick the configuration file to load.

    An explicit ``config_path`` wins, then the ``HABIT_VAULT_CONFIG`` environment
    variable, then ``habits.yaml`` at the project root.
    """
    if config_path is not None:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return CONFIG_PATH


def _parse_offset(window: dict, key: str, default: int) -> int:
    value = window.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Window '{key}' must be an integer number of days")
    return value


def load_habit_configuration(config_path: Optional[Path] = None) -> HabitConfiguration:
    """Load and validate the habit configuration file.

    Args:
        config_path: Path to the YAML configuration file. Defaults to the
            ``HABIT_VAULT_CONFIG`` environment variable, then ``habits.yaml`` at
            the project root.

    Returns:
        A fully populated :class:`HabitConfiguration`.

    Raises:
        FileNotFoundError: If the configuration file is missing.
        ValueError: If the file exists but does not provide the expected structure
            (missing vault path, non-list habit order, inverted window, etc.).
    """
    path = resolve_config_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Habit configuration file not found at {path}")

    raw_config = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError("Habit configuration must be a YAML mapping")

    vault_section = raw_config.get("vault")
    if not isinstance(vault_section, dict):
        raise ValueError("Habit configuration must include a 'vault' mapping")

    raw_path = vault_section.get("path")
    if not isinstance(raw_path, str) or not raw_path.strip():
        raise ValueError("Vault is missing a valid 'path' string")

    resolved_path = Path(raw_path).expanduser()
    try:
        resolved_path = resolved_path.resolve(strict=False)
    except RuntimeError:
        # resolve can raise if underlying filesystem is inaccessible; fall back to expanded path
        pass

    vault = VaultMetadata(
        name=str(vault_section.get("name") or resolved_path.name),
        path=resolved_path,
        description=str(vault_section.get("description") or "").strip(),
        exists=resolved_path.is_dir(),
    )

    habits_section = raw_config.get("habits") or {}
    if not isinstance(habits_section, dict):
        raise ValueError("'habits' must be a mapping with optional 'order' and 'emojis'")

    order = habits_section.get("order") or []
    if not isinstance(order, list) or not all(isinstance(h, str) and h.strip() for h in order):
        raise ValueError("'habits.order' must be a list of habit names")

    emojis = habits_section.get("emojis") or {}
    if not isinstance(emojis, dict):
        raise ValueError("'habits.emojis' must map habit names to strings")

    window = raw_config.get("window") or {}
    if not isinstance(window, dict):
        raise ValueError("'window' must be a mapping with 'start_offset' and 'end_offset'")
    start_offset = _parse_offset(window, "start_offset", DEFAULT_START_OFFSET)
    end_offset = _parse_offset(window, "end_offset", DEFAULT_END_OFFSET)
    if start_offset > end_offset:
        raise ValueError("'window.start_offset' must not be greater than 'window.end_offset'")

    if not vault.exists:
        logger.warning("Configured vault '%s' does not exist at %s", vault.name, vault.path)

    return HabitConfiguration(
        vault=vault,
        habit_order=[h.strip() for h in order],
        emojis={str(k): str(v) for k, v in emojis.items()},
        start_offset=start_offset,
        end_offset=end_offset,
    )


@lru_cache(maxsize=1)
def get_habit_configuration() -> HabitConfiguration:
    """Return the process-wide configuration, loading it on first call."""
    configuration = load_habit_configuration()
    logger.info(
        "Loaded habit configuration for vault '%s' at %s",
        configuration.vault.name,
        configuration.vault.path,
    )
    return configuration
