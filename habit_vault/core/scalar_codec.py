"""Flat front-matter codec: one ``key: value`` line per scalar.

This is deliberately not a YAML reader. Lists, nested mappings, multi-line
scalars, comments and anchors are unsupported; a line that uses them degrades
to a raw string value.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

import yaml

from habit_vault.constants import MAX_FRONTMATTER_BYTES
from habit_vault.data_models import ABSENT, FieldValue
from habit_vault.errors import SerializationError

logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


# ==============================================================================
# DECODING
# ==============================================================================


def coerce_scalar(raw_value: str) -> FieldValue:
    """Convert a trimmed raw value into its typed form.

    Rules are applied in order: empty → ``ABSENT``, ``null`` → ``None``,
    ``true``/``false`` → bool, numeric → int or float, anything else stays a
    string. The coercion is lossy: the string ``"true"`` always becomes ``True``.
    """
    if raw_value == "":
        return ABSENT
    if raw_value == "null":
        return None
    if raw_value == "true":
        return True
    if raw_value == "false":
        return False
    if _NUMBER_PATTERN.match(raw_value):
        if _INTEGER_PATTERN.match(raw_value):
            return int(raw_value)
        return float(raw_value)
    return raw_value


def decode(yaml_text: str) -> dict[str, FieldValue]:
    """Decode flat front-matter text into a typed mapping.

    Args:
        yaml_text: Text found between the two ``---`` delimiters.

    Returns:
        Mapping of field name to coerced value, in line order. A later line
        with the same key overrides an earlier one.

    Raises:
        TypeError: If ``yaml_text`` is not a string.
    """
    if not isinstance(yaml_text, str):
        raise TypeError("Front matter text must be a string")

    fields: dict[str, FieldValue] = {}
    for line in yaml_text.splitlines():
        if not line.strip():
            continue

        key, separator, raw_value = line.partition(":")
        key = key.strip()
        if not key:
            logger.debug("Ignoring front matter line without a key: %r", line)
            continue

        # no colon: the key is present but carries no value
        fields[key] = coerce_scalar(raw_value.strip()) if separator else ABSENT

    return fields


# ==============================================================================
# ENCODING
# ==============================================================================


def _is_verbatim(value: str) -> bool:
    """True when ``decode`` would read ``value`` back unchanged if written bare."""
    return value == value.strip() and coerce_scalar(value) == value


def _render_value(value: FieldValue) -> str:
    """Render one scalar the way it should appear after ``key:``.

    Strings that decode back to themselves are written as-is, so text such as
    ``2025-01-28`` or ``[daily]`` is never quoted on rewrite. Anything else is
    emitted by PyYAML's safe dumper.
    """
    if value is ABSENT:
        return ""
    if isinstance(value, str) and _is_verbatim(value):
        return value

    try:
        dumped = yaml.safe_dump(
            {"v": value},
            default_flow_style=False,
            allow_unicode=True,
            width=float("inf"),
        )
    except yaml.YAMLError as exc:
        raise SerializationError(f"Front matter cannot be serialized to YAML: {exc}") from exc
    return dumped.rstrip("\n")[len("v: "):]


def _check_fields(fields: Mapping[str, Any]) -> None:
    if not isinstance(fields, Mapping):
        raise SerializationError("Front matter fields must be a mapping of key/value pairs.")

    for key, value in fields.items():
        if not isinstance(key, str) or not key.strip():
            raise SerializationError("Front matter keys must be non-empty strings.")
        if key != key.strip():
            raise SerializationError(f"Front matter key '{key}' cannot have surrounding whitespace.")
        if ":" in key or "\n" in key:
            raise SerializationError(f"Front matter key '{key}' cannot contain ':' or newlines.")
        if isinstance(value, float) and not math.isfinite(value):
            raise SerializationError(f"Front matter field '{key}' must be a finite number.")
        if value is None or value is ABSENT or isinstance(value, (bool, int, float)):
            continue
        if isinstance(value, str):
            if "\n" in value:
                raise SerializationError(
                    f"Front matter field '{key}' cannot hold a multi-line string."
                )
            continue
        raise SerializationError(
            f"Front matter field '{key}' uses unsupported type '{type(value).__name__}'."
        )


def encode(fields: Mapping[str, FieldValue]) -> str:
    """Serialize a flat mapping as front-matter text.

    Args:
        fields: Mapping of field name to scalar value. Iteration order is kept.

    Returns:
        One ``key: value`` line per entry, newline-terminated. An empty mapping
        yields an empty string.

    Raises:
        SerializationError: If a key or value is not a flat scalar, or the
            output exceeds ``MAX_FRONTMATTER_BYTES``.
    """
    _check_fields(fields)
    if not fields:
        return ""

    lines = []
    for key, value in fields.items():
        rendered = _render_value(value)
        lines.append(f"{key}: {rendered}" if rendered else f"{key}:")
    dumped = "\n".join(lines) + "\n"

    if len(dumped.encode("utf-8")) > MAX_FRONTMATTER_BYTES:
        raise SerializationError(
            f"Front matter exceeds maximum size of {MAX_FRONTMATTER_BYTES // 1024}KB."
        )

    return dumped
