"""Canned SWPC responses and an in-process fake of the SWPC server."""

from __future__ import annotations

from typing import Any

import httpx

FORECAST_PATH = "/text/3-day-forecast.txt"
OUTLOOK_PATH = "/text/27-day-outlook.txt"
OVATION_PATH = "/json/ovation_aurora_latest.json"
NORTH_IMAGE_PATH = "/images/animations/ovation/north/latest.jpg"
SOUTH_IMAGE_PATH = "/images/animations/ovation/south/latest.jpg"

NORTH_JPEG = b"\xff\xd8\xff\xe0north-image\xff\xd9"
SOUTH_JPEG = b"\xff\xd8\xff\xe0south-image\xff\xd9"

OVATION_DOCUMENT: dict[str, Any] = {
    "Observation Time": "2025-07-03T00:30:00Z",
    "Forecast Time": "2025-07-03T01:20:00Z",
    "Data Format": "[Longitude, Latitude, Aurora]",
    "coordinates": [
        [0, -90, 0],
        [0, 65, 12],
        [100, 70, 33],
        [358, 51, 7],
        [359, 90, 0],
    ],
}


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSWPC:
    """Serves canned SWPC responses and records every request.

    Route values are ``(status, body)`` pairs where *body* is ``bytes``,
    ``str`` or a JSON-serialisable ``dict``, or an exception instance to
    raise from the transport.
    """

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(route, Exception):
            raise route
        status, body = route
        if isinstance(body, dict):
            return httpx.Response(status, json=body)
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, text=body)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def count(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == path)
