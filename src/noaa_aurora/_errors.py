"""Exception hierarchy for the aurora client.

Every error raised by the package derives from :class:`AuroraError` so
callers can catch the whole family at once. None of them is retried
internally; each is terminal for the call that raised it.
"""

from __future__ import annotations

from pathlib import Path


class AuroraError(Exception):
    """Base class for all noaa_aurora errors."""


class FetchError(AuroraError):
    """A resource could not be retrieved from the provider.

    Raised for network-level failures and for non-2xx HTTP responses.
    The originating ``httpx`` exception is available as ``__cause__``.

    Args:
        message: Human-readable description.
        url: The URL that was requested.
        status_code: HTTP status of the response, or ``None`` when no
            response was received.
    """

    def __init__(
        self, message: str, url: str, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


TransportError = FetchError


class ParseError(AuroraError, ValueError):
    """Report text does not match the expected fixed layout."""


class MissingHeaderError(ParseError):
    """The 3-day forecast has no ``Mon DD  Mon DD  Mon DD`` header row."""


class MalformedNumberError(ParseError):
    """A numeric cell of a report table is not a valid number.

    Args:
        token: The offending cell text.
        line_number: 1-based line number within the report.
    """

    def __init__(self, token: str, line_number: int) -> None:
        super().__init__(
            f"Malformed number {token!r} on line {line_number}"
        )
        self.token = token
        self.line_number = line_number


class FileWriteError(AuroraError, OSError):
    """A downloaded image could not be written to disk.

    Args:
        path: Destination that failed.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Cannot write image to '{path}'")
        self.path = Path(path)
