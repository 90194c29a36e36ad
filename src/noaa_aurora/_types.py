"""Value types returned by the aurora client.

- :class:`KpForecastPoint`: one 3-hour Kp prediction.
- :class:`OutlookPoint`: one day of the 27-day outlook.
- :class:`Hemisphere`, :class:`DateFormat`, :class:`ReportFormat`: request
  options.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import NamedTuple, Union

from noaa_aurora._scales import kp_to_g

Timestamp = Union[datetime.datetime, int, str]
"""A timestamp in any of the :class:`DateFormat` representations."""


class KpForecastPoint(NamedTuple):
    """Predicted Kp for the 3-hour bucket starting at *timestamp*.

    Attributes:
        timestamp: Bucket start (UTC).
        kp: Predicted Kp index.
    """

    timestamp: Timestamp
    kp: float

    @property
    def g_scale(self) -> int | str:
        """NOAA G level for this point (see :func:`kp_to_g`)."""
        return kp_to_g(self.kp)


class OutlookPoint(NamedTuple):
    """One row of the 27-day outlook.

    Attributes:
        timestamp: The day, at 00:00 UTC.
        flux: 10.7 cm solar radio flux [sfu].
        ap: Planetary A index.
        kp: Largest expected Kp index.
    """

    timestamp: Timestamp
    flux: float
    ap: float
    kp: float

    @property
    def g_scale(self) -> int | str:
        """NOAA G level for the day's largest Kp."""
        return kp_to_g(self.kp)


class Hemisphere(Enum):
    """Hemisphere of an Ovation aurora image."""

    NORTH = "north"
    SOUTH = "south"

    @classmethod
    def parse(cls, value: Hemisphere | str | None) -> Hemisphere:
        """Interpret *value* as a hemisphere.

        Strings starting with ``s`` (any case) are south; anything else,
        including ``None`` and the empty string, is north.
        """
        if isinstance(value, Hemisphere):
            return value
        if value and value[0].lower() == "s":
            return cls.SOUTH
        return cls.NORTH

    def __str__(self) -> str:
        return self.value


class DateFormat(Enum):
    """Representation of timestamps in structured results."""

    DATETIME = "datetime"
    UNIX = "unix"
    ISO = "iso"
    RFC = "rfc"

    @classmethod
    def parse(cls, value: DateFormat | str) -> DateFormat:
        """Convert a name such as ``"iso"`` to a DateFormat.

        Raises:
            ValueError: If *value* is not a known format.
        """
        if isinstance(value, DateFormat):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            valid = ", ".join(f.value for f in cls)
            raise ValueError(
                f"Unknown date format '{value}'. Expected one of: {valid}"
            ) from None

    def __str__(self) -> str:
        return self.value


class ReportFormat(Enum):
    """Output of forecast and outlook retrievals."""

    DATA = "data"
    TEXT = "text"

    @classmethod
    def parse(cls, value: ReportFormat | str | None) -> ReportFormat:
        """Convert ``"data"``/``"text"`` (or ``None``) to a ReportFormat.

        Raises:
            ValueError: If *value* is not a known format.
        """
        if value is None:
            return cls.DATA
        if isinstance(value, ReportFormat):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(
                f"Unknown report format '{value}'. Expected 'data' or 'text'"
            ) from None

    def __str__(self) -> str:
        return self.value


def format_timestamp(ts: datetime.datetime, fmt: DateFormat) -> Timestamp:
    """Render an aware UTC datetime in the requested representation.

    Args:
        ts: Timezone-aware timestamp.
        fmt: Target representation.

    Returns:
        *ts* itself for ``DATETIME``, integer seconds for ``UNIX``,
        ``YYYY-MM-DDTHH:MM:SSZ`` for ``ISO`` and ``YYYY-MM-DD HH:MM:SSZ``
        for ``RFC``.
    """
    if fmt is DateFormat.UNIX:
        return int(ts.timestamp())
    if fmt is DateFormat.ISO:
        return ts.strftime("%Y-%m-%dT%H:%M:%SZ")
    if fmt is DateFormat.RFC:
        return ts.strftime("%Y-%m-%d %H:%M:%SZ")
    return ts
