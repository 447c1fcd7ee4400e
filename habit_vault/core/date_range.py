"""Calendar date windows relative to today."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from habit_vault.constants import DATE_FORMAT, MAX_WINDOW_DAYS
from habit_vault.errors import InvalidRangeError


def date_range(
    start_offset: int,
    end_offset: int,
    today: Optional[date] = None,
) -> list[str]:
    """Return ``YYYY-MM-DD`` strings for each day in an offset window.

    Args:
        start_offset: First offset in days from today (negative for the past).
        end_offset: Last offset in days from today, inclusive.
        today: Reference date. Defaults to the local calendar date at call time.

    Returns:
        Date strings in ascending calendar order.

    Raises:
        InvalidRangeError: If either offset is not an integer, ``start_offset``
            is greater than ``end_offset``, the window spans more than
            ``MAX_WINDOW_DAYS`` days, or a date falls outside years 1-9999.

    Examples:
        >>> date_range(-2, 1, today=date(2025, 1, 28))
        ['2025-01-26', '2025-01-27', '2025-01-28', '2025-01-29']
    """
    for name, value in (("start_offset", start_offset), ("end_offset", end_offset)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRangeError(f"{name} must be an integer, got {value!r}")

    if start_offset > end_offset:
        raise InvalidRangeError(
            f"start_offset ({start_offset}) must not be greater than end_offset ({end_offset})"
        )

    if end_offset - start_offset + 1 > MAX_WINDOW_DAYS:
        raise InvalidRangeError(f"Window cannot span more than {MAX_WINDOW_DAYS} days")

    anchor = today if today is not None else date.today()
    try:
        return [
            (anchor + timedelta(days=offset)).strftime(DATE_FORMAT)
            for offset in range(start_offset, end_offset + 1)
        ]
    except OverflowError as exc:
        raise InvalidRangeError(
            f"Offsets {start_offset}..{end_offset} fall outside the supported calendar"
        ) from exc
