"""Resolution of year-less report dates.

SWPC reports label their columns with ``Mon DD`` only. The year is taken
from a reference date (today, in the process's local time, unless one is
supplied) with a single adjustment around the new year: a January column
seen in December belongs to next year, and a December column seen in
January belongs to last year.
"""

from __future__ import annotations

import datetime

_MONTHS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}


def month_to_number(name: str) -> int:
    """Convert a month abbreviation (``"Jul"``) to its number (``7``).

    Matching is case-insensitive and uses the first three letters.

    Args:
        name: Month name or abbreviation.

    Returns:
        Month number in ``1..12``.

    Raises:
        ValueError: If *name* is not a recognised month.
    """
    try:
        return _MONTHS[name[:3].lower()]
    except KeyError:
        raise ValueError(f"Unknown month name: '{name}'") from None


def resolve_year(month: int, reference: datetime.date) -> int:
    """Return the year a year-less date in *month* most likely falls in.

    Args:
        month: Month number of the report date.
        reference: Date the report is assumed to be close to.

    Returns:
        The resolved year.
    """
    year = reference.year
    if reference.month == 12 and month == 1:
        return year + 1
    if reference.month == 1 and month == 12:
        return year - 1
    return year


def resolve_month_day(
    month_name: str,
    day: int,
    reference: datetime.date | None = None,
) -> datetime.date:
    """Build a full date from a ``Mon DD`` pair.

    Args:
        month_name: Month abbreviation, e.g. ``"Jul"``.
        day: Day of month.
        reference: Reference date for year resolution. Defaults to today.

    Returns:
        The resolved calendar date.

    Raises:
        ValueError: If the month is unknown or the day is out of range.
    """
    if reference is None:
        reference = datetime.date.today()
    month = month_to_number(month_name)
    return datetime.date(resolve_year(month, reference), month, day)
