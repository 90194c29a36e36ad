"""Client for the NOAA SWPC aurora forecast service.

Retrieves Ovation aurora images and probability grids and the 3-day and
27-day space weather text products, caching responses in memory for a
configurable time-to-live.

Typical usage::

    from noaa_aurora import AuroraClient, kp_to_g

    aurora = AuroraClient()
    aurora.get_image(hemisphere="north", output="aurora_north.jpg")
    probability = aurora.get_probability(lat=51.2, lon=-1.8)
    forecast = aurora.get_forecast()
    outlook = aurora.get_outlook()
"""

from noaa_aurora._cache import CacheEntry, ResponseCache
from noaa_aurora._client import AuroraClient, ProbabilityGrid
from noaa_aurora._dates import month_to_number, resolve_month_day, resolve_year
from noaa_aurora._errors import (
    AuroraError,
    FetchError,
    FileWriteError,
    MalformedNumberError,
    MissingHeaderError,
    ParseError,
    TransportError,
)
from noaa_aurora._parsers import (
    ParserState,
    parse_3day_forecast,
    parse_27day_outlook,
)
from noaa_aurora._scales import kp_to_g
from noaa_aurora._types import (
    DateFormat,
    Hemisphere,
    KpForecastPoint,
    OutlookPoint,
    ReportFormat,
    format_timestamp,
)
from noaa_aurora.config import AuroraConfig, __version__

__all__ = [
    "__version__",
    # Client and configuration
    "AuroraClient",
    "AuroraConfig",
    # Cache
    "CacheEntry",
    "ResponseCache",
    # Enums
    "DateFormat",
    "Hemisphere",
    "ReportFormat",
    # Result types
    "KpForecastPoint",
    "OutlookPoint",
    "ProbabilityGrid",
    # Parsers
    "ParserState",
    "parse_3day_forecast",
    "parse_27day_outlook",
    # Dates and scales
    "month_to_number",
    "resolve_year",
    "resolve_month_day",
    "format_timestamp",
    "kp_to_g",
    # Errors
    "AuroraError",
    "FetchError",
    "TransportError",
    "ParseError",
    "MissingHeaderError",
    "MalformedNumberError",
    "FileWriteError",
]
