"""Client configuration.

:class:`AuroraConfig` collects the options recognised by
:class:`~noaa_aurora.AuroraClient`. Defaults can be overridden per
instance or picked up from the environment with
:meth:`AuroraConfig.from_env`:

- ``NOAA_AURORA_CACHE``: cache TTL in seconds (``0`` disables caching).
- ``NOAA_AURORA_SWPC``: provider host.
- ``NOAA_AURORA_DATE_FORMAT``: ``datetime``, ``unix``, ``iso`` or ``rfc``.
- ``NOAA_AURORA_TIMEOUT``: HTTP timeout in seconds.
- ``NOAA_AURORA_AGENT``: ``User-Agent`` string.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from noaa_aurora._types import DateFormat

__version__ = "0.1.0"

DEFAULT_SWPC_HOST = "services.swpc.noaa.gov"
"""Default Space Weather Prediction Center services host."""

_DEFAULT_CACHE_TTL = 120.0
_DEFAULT_TIMEOUT = 30.0
_DEFAULT_AGENT = f"noaa-aurora/{__version__}"

_ENV_PREFIX = "NOAA_AURORA_"


@dataclass
class AuroraConfig:
    """Options for :class:`~noaa_aurora.AuroraClient`.

    Args:
        cache: Cache TTL in seconds. ``0`` disables caching.
        swpc: SWPC host, optionally with a scheme.
        date_format: Representation of returned timestamps.
        timeout: HTTP timeout in seconds.
        agent: ``User-Agent`` header value.
    """

    cache: float = _DEFAULT_CACHE_TTL
    swpc: str = DEFAULT_SWPC_HOST
    date_format: DateFormat = DateFormat.DATETIME
    timeout: float = _DEFAULT_TIMEOUT
    agent: str = _DEFAULT_AGENT

    def __post_init__(self) -> None:
        if self.cache < 0:
            raise ValueError(f"cache must be >= 0 seconds, got {self.cache}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0 seconds, got {self.timeout}")
        self.date_format = DateFormat.parse(self.date_format)
        self.swpc = self.swpc.strip().rstrip("/") or DEFAULT_SWPC_HOST

    @property
    def base_url(self) -> str:
        """URL prefix for all requests, e.g. ``https://services.swpc.noaa.gov``."""
        if "://" in self.swpc:
            return self.swpc
        return f"https://{self.swpc}"

    @classmethod
    def no_cache(cls) -> AuroraConfig:
        """Create a configuration with caching disabled."""
        return cls(cache=0.0)

    @classmethod
    def from_env(cls) -> AuroraConfig:
        """Create a configuration from ``NOAA_AURORA_*`` variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        config = cls()
        overrides: dict[str, object] = {}

        cache = os.environ.get(f"{_ENV_PREFIX}CACHE")
        if cache is not None:
            overrides["cache"] = float(cache)
        swpc = os.environ.get(f"{_ENV_PREFIX}SWPC")
        if swpc is not None:
            overrides["swpc"] = swpc
        date_format = os.environ.get(f"{_ENV_PREFIX}DATE_FORMAT")
        if date_format is not None:
            overrides["date_format"] = DateFormat.parse(date_format)
        timeout = os.environ.get(f"{_ENV_PREFIX}TIMEOUT")
        if timeout is not None:
            overrides["timeout"] = float(timeout)
        agent = os.environ.get(f"{_ENV_PREFIX}AGENT")
        if agent is not None:
            overrides["agent"] = agent

        return replace(config, **overrides)

    def __str__(self) -> str:
        return (
            f"AuroraConfig(cache={self.cache}, swpc={self.swpc!r}, "
            f"date_format={self.date_format.value!r}, timeout={self.timeout})"
        )

    def __repr__(self) -> str:
        return self.__str__()
