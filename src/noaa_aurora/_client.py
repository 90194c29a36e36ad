"""SWPC aurora HTTP client with in-memory caching.

Fetches Ovation aurora images and probability grids and the 3-day and
27-day text products from the NOAA Space Weather Prediction Center.
Each retrieval checks the instance's :class:`~noaa_aurora.ResponseCache`
first and only goes to the network on a miss. Raw-text report requests
are the exception: they always hit the network and are never cached.
"""

from __future__ import annotations

import datetime
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx

from noaa_aurora._cache import ResponseCache
from noaa_aurora._errors import FetchError, FileWriteError, ParseError
from noaa_aurora._parsers import parse_3day_forecast, parse_27day_outlook
from noaa_aurora._types import (
    DateFormat,
    Hemisphere,
    KpForecastPoint,
    OutlookPoint,
    ReportFormat,
    Timestamp,
    format_timestamp,
)
from noaa_aurora.config import AuroraConfig

logger = logging.getLogger(__name__)

_IMAGE_PATH = "/images/animations/ovation/{hemisphere}/latest.jpg"
_OVATION_PATH = "/json/ovation_aurora_latest.json"
_FORECAST_PATH = "/text/3-day-forecast.txt"
_OUTLOOK_PATH = "/text/27-day-outlook.txt"

_JSON_KEY = "json"
_GRID_KEY = "hash"
_FORECAST_KEY = "forecast"
_OUTLOOK_KEY = "outlook"

ProbabilityGrid = dict[int, dict[int, float]]
"""Non-zero Ovation probabilities indexed as ``grid[lon][lat]``."""


def _build_grid(document: dict[str, Any]) -> ProbabilityGrid:
    """Index the Ovation ``coordinates`` triples by longitude, then latitude."""
    try:
        coordinates = document["coordinates"]
    except (KeyError, TypeError):
        raise ParseError("Ovation document has no 'coordinates' array") from None

    grid: ProbabilityGrid = {}
    try:
        for lon, lat, value in coordinates:
            if value:
                grid.setdefault(int(lon), {})[int(lat)] = value
    except (TypeError, ValueError) as err:
        raise ParseError(
            "Malformed Ovation coordinates: expected [lon, lat, value] triples"
        ) from err
    return grid


def _write_image(path: str | Path, data: bytes) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as err:
        raise FileWriteError(path) from err
    logger.info("Aurora image written to %s", path)


class AuroraClient:
    """NOAA SWPC aurora forecast client with caching.

    Keyword arguments override the corresponding :class:`AuroraConfig`
    fields.

    Args:
        config: Base configuration. Default: ``AuroraConfig()``.
        cache: Cache TTL in seconds; ``0`` disables caching. Default: 120.
        swpc: SWPC host. Default: ``services.swpc.noaa.gov``.
        date_format: Timestamp representation of structured results.
            Default: ``DateFormat.DATETIME``.
        timeout: HTTP timeout in seconds. Default: 30.
        agent: ``User-Agent`` header value.
        client: Pre-configured ``httpx.Client`` to use as the transport.
            *timeout* and *agent* are not applied to it and it is not
            closed by :meth:`close`.
        clock: Monotonic clock used for cache expiry.
        **options: Unrecognised options; accepted and ignored.
    """

    def __init__(
        self,
        config: AuroraConfig | None = None,
        *,
        cache: float | None = None,
        swpc: str | None = None,
        date_format: DateFormat | str | None = None,
        timeout: float | None = None,
        agent: str | None = None,
        client: httpx.Client | None = None,
        clock: Callable[[], float] = time.monotonic,
        **options: Any,
    ) -> None:
        if options:
            logger.debug("Ignoring unrecognised options: %s", ", ".join(sorted(options)))
        config = config or AuroraConfig()
        self._config = AuroraConfig(
            cache=config.cache if cache is None else cache,
            swpc=config.swpc if swpc is None else swpc,
            date_format=config.date_format if date_format is None else date_format,
            timeout=config.timeout if timeout is None else timeout,
            agent=config.agent if agent is None else agent,
        )
        self._base_url = self._config.base_url
        self._cache = ResponseCache(self._config.cache, clock=clock)

        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                timeout=self._config.timeout,
                follow_redirects=True,
                headers={"User-Agent": self._config.agent},
            )
        self._client = client

    @property
    def config(self) -> AuroraConfig:
        """Effective configuration of this client."""
        return self._config

    @property
    def cache(self) -> ResponseCache:
        """The client's response cache."""
        return self._cache

    def close(self) -> None:
        """Close the HTTP transport if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> AuroraClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ========================================
    # Ovation images and probabilities
    # ========================================

    def get_image(
        self,
        hemisphere: Hemisphere | str | None = None,
        output: str | Path | None = None,
    ) -> bytes:
        """Return the latest Ovation aurora image as JPEG bytes.

        Args:
            hemisphere: ``"north"`` or ``"south"``; abbreviations are
                accepted. Default: north.
            output: If given, the image is also written to this path,
                replacing any existing file.

        Returns:
            JPEG image data.

        Raises:
            FetchError: If the image cannot be retrieved.
            FileWriteError: If *output* cannot be written.
        """
        hem = Hemisphere.parse(hemisphere)
        data = self._cache.get(hem.value)
        if data is None:
            path = _IMAGE_PATH.format(hemisphere=hem.value)
            data = self._cache.set(hem.value, self._fetch(path).content)

        if output is not None:
            _write_image(output, data)

        return data

    def get_probability(
        self,
        lat: float | None = None,
        lon: float | None = None,
        *,
        as_mapping: bool = False,
    ) -> float | dict[str, Any] | ProbabilityGrid:
        """Return Ovation aurora probabilities.

        With both *lat* and *lon*, returns the probability (0-100) at the
        nearest grid point, or ``0`` where the grid has no value. Without
        coordinates, returns the whole globe.

        Args:
            lat: Latitude in degrees, ``-90..90``.
            lon: Longitude in degrees, ``-180..360``. Negative values are
                wrapped into the ``0..359`` grid.
            as_mapping: For whole-globe requests, return the nested
                ``{lon: {lat: probability}}`` mapping instead of the
                decoded JSON document.

        Returns:
            A percentage, the decoded JSON document or the nested mapping.

        Raises:
            ValueError: If only one coordinate is given or either is out
                of range.
            FetchError: If the data cannot be retrieved.
            ParseError: If the response is not a valid Ovation document.
        """
        if (lat is None) != (lon is None):
            raise ValueError("Provide both lat and lon, or neither")

        if lat is not None and lon is not None:
            if not -90.0 <= lat <= 90.0:
                raise ValueError(f"Latitude must be in [-90, 90], got {lat}")
            if not -180.0 <= lon <= 360.0:
                raise ValueError(f"Longitude must be in [-180, 360], got {lon}")

        document, grid = self._get_probabilities()

        if lat is not None and lon is not None:
            return grid.get(round(lon) % 360, {}).get(round(lat), 0)

        return grid if as_mapping else document

    def _get_probabilities(self) -> tuple[dict[str, Any], ProbabilityGrid]:
        document = self._cache.get(_JSON_KEY)
        grid = self._cache.get(_GRID_KEY)
        if document is not None and grid is not None:
            return document, grid
        return self._refresh_probabilities()

    def _refresh_probabilities(self) -> tuple[dict[str, Any], ProbabilityGrid]:
        response = self._fetch(_OVATION_PATH)
        try:
            document = response.json()
        except ValueError as err:
            raise ParseError(f"Invalid Ovation JSON from {response.url}") from err

        grid = _build_grid(document)
        self._cache.set(_JSON_KEY, document)
        self._cache.set(_GRID_KEY, grid)
        return document, grid

    # ========================================
    # Text products
    # ========================================

    def get_forecast(
        self, format: ReportFormat | str | None = None
    ) -> dict[Timestamp, float] | str:
        """Return SWPC's 3-day Kp forecast.

        The 3-day forecast is preferred over the geomagnetic forecast as
        it is updated twice daily.

        Args:
            format: ``"data"`` (default) for a ``{timestamp: kp}`` mapping,
                or ``"text"`` for the raw report, which is never cached.

        Returns:
            Mapping of 3-hour bucket start to Kp, or the report text.

        Raises:
            FetchError: If the report cannot be retrieved.
            ParseError: If the report layout is not recognised.
        """
        if ReportFormat.parse(format) is ReportFormat.TEXT:
            return self._fetch(_FORECAST_PATH).text

        fmt = self._config.date_format
        return {
            format_timestamp(ts, fmt): kp
            for ts, kp in self._get_forecast_data().items()
        }

    def get_forecast_points(self) -> list[KpForecastPoint]:
        """Return the 3-day Kp forecast as chronologically sorted points."""
        fmt = self._config.date_format
        data = self._get_forecast_data()
        return [
            KpForecastPoint(format_timestamp(ts, fmt), data[ts])
            for ts in sorted(data)
        ]

    def _get_forecast_data(self) -> dict[datetime.datetime, float]:
        data = self._cache.get(_FORECAST_KEY)
        if data is None:
            text = self._fetch(_FORECAST_PATH).text
            data = self._cache.set(_FORECAST_KEY, parse_3day_forecast(text))
        return data

    def get_outlook(
        self, format: ReportFormat | str | None = None
    ) -> list[OutlookPoint] | str:
        """Return SWPC's 27-day outlook.

        Each point carries the forecast 10.7 cm solar radio flux, the
        planetary A index and the largest Kp index of the day.

        Args:
            format: ``"data"`` (default) for a list of :class:`OutlookPoint`,
                or ``"text"`` for the raw report, which is never cached.

        Returns:
            Outlook points in chronological order, or the report text.

        Raises:
            FetchError: If the report cannot be retrieved.
            ParseError: If a table cell is not a number.
        """
        if ReportFormat.parse(format) is ReportFormat.TEXT:
            return self._fetch(_OUTLOOK_PATH).text

        points = self._cache.get(_OUTLOOK_KEY)
        if points is None:
            text = self._fetch(_OUTLOOK_PATH).text
            points = self._cache.set(_OUTLOOK_KEY, parse_27day_outlook(text))

        fmt = self._config.date_format
        return [p._replace(timestamp=format_timestamp(p.timestamp, fmt)) for p in points]

    # ========================================
    # Transport
    # ========================================

    def _fetch(self, path: str) -> httpx.Response:
        """Execute an HTTP GET for *path* and return the successful response."""
        url = f"{self._base_url}{path}"
        logger.info("Fetching %s", url)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as err:
            status = err.response.status_code
            raise FetchError(f"HTTP {status} fetching {url}", url, status) from err
        except httpx.RequestError as err:
            raise FetchError(f"Failed to fetch {url}: {err}", url) from err
        return response
