"""Split daily files into front matter and body, and write them back."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from habit_vault.constants import FRONTMATTER_DELIMITER
from habit_vault.core.scalar_codec import encode
from habit_vault.data_models import FieldValue, FrontMatter
from habit_vault.errors import DailyFileNotFoundError, MalformedFileError

logger = logging.getLogger(__name__)


def split_front_matter(text: str) -> FrontMatter:
    """Split raw file text on the first two ``---`` delimiters.

    Args:
        text: Full file contents.

    Returns:
        A :class:`FrontMatter` whose ``yaml`` is the trimmed text between the
        delimiters and whose ``body`` is everything after the second delimiter
        with leading whitespace removed.

    Raises:
        MalformedFileError: If fewer than two delimiters are present.
    """
    first = text.find(FRONTMATTER_DELIMITER)
    if first == -1:
        raise MalformedFileError("Front matter delimiters not found")

    second = text.find(FRONTMATTER_DELIMITER, first + len(FRONTMATTER_DELIMITER))
    if second == -1:
        raise MalformedFileError("Closing front matter delimiter not found")

    yaml_text = text[first + len(FRONTMATTER_DELIMITER):second].strip()
    body = text[second + len(FRONTMATTER_DELIMITER):].lstrip()
    return FrontMatter(yaml=yaml_text, body=body)


def read_front_matter(path: Path) -> FrontMatter:
    """Read a daily file and return its front matter and body slices.

    Args:
        path: Absolute path to the daily file.

    Returns:
        The :class:`FrontMatter` for the file.

    Raises:
        DailyFileNotFoundError: If ``path`` does not exist.
        MalformedFileError: If the file is not UTF-8 or lacks two delimiters.
    """
    path = Path(path)
    if not path.is_file():
        raise DailyFileNotFoundError(f"Daily file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DailyFileNotFoundError(f"Daily file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedFileError(f"Daily file {path} is not UTF-8 encoded") from exc

    try:
        return split_front_matter(text)
    except MalformedFileError as exc:
        raise MalformedFileError(f"{exc} in {path}") from exc


def build_daily_text(fields: Mapping[str, FieldValue], body: str) -> str:
    """Assemble file text from front matter fields and an opaque body."""
    return f"{FRONTMATTER_DELIMITER}\n{encode(fields)}{FRONTMATTER_DELIMITER}\n{body}"


def write_front_matter(path: Path, new_fields: Mapping[str, FieldValue], body: str) -> None:
    """Overwrite a daily file with new front matter and the given body.

    The file is rewritten in place. There is no temporary file, rename or
    backup, so a crash mid-write can leave the file truncated.

    Args:
        path: Absolute path to the daily file.
        new_fields: Complete front matter to write, in output order.
        body: Body text to place after the closing delimiter.

    Raises:
        SerializationError: If ``new_fields`` cannot be encoded. Nothing is
            written in that case.
    """
    text = build_daily_text(new_fields, body)
    Path(path).write_text(text, encoding="utf-8")
    logger.debug("Wrote %d front matter fields to %s", len(new_fields), path)
