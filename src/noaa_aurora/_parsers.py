"""Parsers for SWPC fixed-layout text reports.

Supports two products of the NOAA Space Weather Prediction Center:

- ``3-day-forecast.txt``: the *NOAA Kp index breakdown* table, a header
  row of three ``Mon DD`` dates followed by eight ``HH-HHUT`` rows of Kp
  values, each optionally tagged with a ``(Gn)`` storm level.
- ``27-day-outlook.txt``: ``:``/``#`` prefixed header lines followed by one
  ``YYYY Mon DD  flux  ap  kp`` row per day.

Both parsers run a small line-oriented state machine
(:class:`ParserState`) and tokenize each line before interpreting it.
Lines that do not have the shape of a table row are skipped, while a row
whose numeric cells cannot be parsed raises
:class:`~noaa_aurora.MalformedNumberError`, as that means the report
layout has changed.
"""

from __future__ import annotations

import datetime
import logging
import re
from enum import Enum

from noaa_aurora._dates import month_to_number, resolve_month_day
from noaa_aurora._errors import MalformedNumberError, MissingHeaderError
from noaa_aurora._types import OutlookPoint

logger = logging.getLogger(__name__)

_UTC = datetime.timezone.utc

_HEADER_RE = re.compile(
    r"^\s*"
    r"([A-Z][a-z]{2})\s+(\d{1,2})\s+"
    r"([A-Z][a-z]{2})\s+(\d{1,2})\s+"
    r"([A-Z][a-z]{2})\s+(\d{1,2})\s*$"
)
_BUCKET_RE = re.compile(r"^(\d{2})-\d{2}UT$")
_G_TAG_RE = re.compile(r"^\(G\d\)$")
_OUTLOOK_DATE_RE = re.compile(r"^(\d{4})\s+([A-Z][a-z]{2})\s+(\d{1,2})$")

_COMMENT_PREFIXES = (":", "#")


class ParserState(Enum):
    """Position of a report parser within the text."""

    SEEKING_HEADER = "seeking_header"
    READING_ROWS = "reading_rows"
    DONE = "done"


def _parse_number(token: str, line_number: int) -> float:
    try:
        return float(token)
    except ValueError:
        raise MalformedNumberError(token, line_number) from None


# ---------------------------------------------------------------------------
# 3-day forecast
# ---------------------------------------------------------------------------


def _parse_header(
    line: str, reference: datetime.date
) -> list[datetime.date] | None:
    """Return the three column dates if *line* is the Kp table header."""
    match = _HEADER_RE.match(line)
    if match is None:
        return None
    groups = match.groups()
    try:
        return [
            resolve_month_day(groups[i], int(groups[i + 1]), reference)
            for i in (0, 2, 4)
        ]
    except ValueError:
        return None


def _tokenize_kp_row(line: str) -> tuple[int, list[str]] | None:
    """Split a ``HH-HHUT`` row into its start hour and three Kp cells.

    ``(Gn)`` storm tags are dropped. Returns ``None`` if the line is not
    a Kp row.
    """
    tokens = line.split()
    if not tokens:
        return None
    match = _BUCKET_RE.match(tokens[0])
    if match is None:
        return None
    hour = int(match.group(1))
    if hour > 23:
        return None
    cells = [t for t in tokens[1:] if not _G_TAG_RE.match(t)]
    if len(cells) != 3:
        return None
    return hour, cells


def parse_3day_forecast(
    text: str,
    *,
    reference: datetime.date | None = None,
) -> dict[datetime.datetime, float]:
    """Parse the Kp breakdown table of a SWPC 3-day forecast.

    Args:
        text: Full report text.
        reference: Date used to resolve the year of the ``Mon DD``
            columns. Defaults to today (local time).

    Returns:
        Mapping from bucket start time (aware, UTC) to predicted Kp, one
        entry per table cell.

    Raises:
        MissingHeaderError: If no three-date header row is found.
        MalformedNumberError: If a Kp cell is not a number.

    Examples:
        ```python
        import datetime
        from noaa_aurora import AuroraClient, parse_3day_forecast
        text = AuroraClient().get_forecast(format="text")
        kp = parse_3day_forecast(text, reference=datetime.date(2025, 7, 3))
        ```
    """
    if reference is None:
        reference = datetime.date.today()

    state = ParserState.SEEKING_HEADER
    dates: list[datetime.date] = []
    kp_data: dict[datetime.datetime, float] = {}

    for line_number, line in enumerate(text.splitlines(), start=1):
        if state is ParserState.SEEKING_HEADER:
            header = _parse_header(line, reference)
            if header is not None:
                dates = header
                state = ParserState.READING_ROWS
                logger.debug("Kp table header on line %d: %s", line_number, dates)
            continue

        row = _tokenize_kp_row(line)
        if row is None:
            # The Kp table ends where the next dated table begins.
            if _parse_header(line, reference) is not None:
                state = ParserState.DONE
                break
            continue

        hour, cells = row
        for day, cell in zip(dates, cells):
            ts = datetime.datetime(day.year, day.month, day.day, hour, tzinfo=_UTC)
            kp_data[ts] = _parse_number(cell, line_number)

    if state is ParserState.SEEKING_HEADER:
        raise MissingHeaderError(
            "3-day forecast has no 'Mon DD  Mon DD  Mon DD' header row"
        )
    return kp_data


# ---------------------------------------------------------------------------
# 27-day outlook
# ---------------------------------------------------------------------------


def _tokenize_outlook_row(line: str) -> tuple[datetime.date, list[str]] | None:
    """Split a ``YYYY Mon DD flux ap kp`` row into its date and cells."""
    tokens = line.split()
    if len(tokens) != 6:
        return None
    match = _OUTLOOK_DATE_RE.match(" ".join(tokens[:3]))
    if match is None:
        return None
    year, month_name, day = match.groups()
    try:
        date = datetime.date(int(year), month_to_number(month_name), int(day))
    except ValueError:
        return None
    return date, tokens[3:]


def parse_27day_outlook(text: str) -> list[OutlookPoint]:
    """Parse a SWPC 27-day outlook table.

    Args:
        text: Full report text.

    Returns:
        One :class:`OutlookPoint` per data row, in document order, with the
        timestamp at 00:00 UTC of that day.

    Raises:
        MalformedNumberError: If a flux, Ap or Kp cell is not a number.
    """
    state = ParserState.SEEKING_HEADER
    points: list[OutlookPoint] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if state is ParserState.SEEKING_HEADER:
            if not stripped or stripped.startswith(_COMMENT_PREFIXES):
                continue
            state = ParserState.READING_ROWS

        row = _tokenize_outlook_row(stripped)
        if row is None:
            continue

        date, (flux, ap, kp) = row
        points.append(
            OutlookPoint(
                timestamp=datetime.datetime(
                    date.year, date.month, date.day, tzinfo=_UTC
                ),
                flux=_parse_number(flux, line_number),
                ap=_parse_number(ap, line_number),
                kp=_parse_number(kp, line_number),
            )
        )

    return points
