"""Data models for vault metadata, habit configuration and field values."""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union


class _Absent:
    """Marker for a front-matter key written without a value (``key:``).

    Distinct from ``None``, which is an explicit YAML ``null``.
    """

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Absent":
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()

FieldValue = Union[bool, int, float, str, None, _Absent]
Fields = dict[str, FieldValue]
Snapshot = dict[str, Fields]


@dataclass(frozen=True)
class FrontMatter:
    """Raw front-matter text and the opaque body that follows it."""

    yaml: str
    body: str


@dataclass(frozen=True)
class VaultMetadata:
    """Normalized metadata describing the daily-notes vault."""

    name: str
    path: Path
    description: str
    exists: bool

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "name": self.name,
            "path": str(self.path),
            "description": self.description,
            "exists": self.path.is_dir(),
        }


@dataclass(frozen=True)
class HabitConfiguration:
    """Holds the vault location, habit display settings and default window.

    Loaded from ``habits.yaml`` on first use.
    """

    vault: VaultMetadata
    habit_order: list[str] = field(default_factory=list)
    emojis: dict[str, str] = field(default_factory=dict)
    start_offset: int = -5
    end_offset: int = 0

    def as_payload(self) -> dict[str, Any]:
        """Return serializable configuration payload.

        Returns:
            Dictionary with vault metadata, habit order, emojis and default window.
        """
        return {
            "vault": self.vault.as_payload(),
            "habits": list(self.habit_order),
            "emojis": dict(self.emojis),
            "window": {
                "start_offset": self.start_offset,
                "end_offset": self.end_offset,
            },
        }
