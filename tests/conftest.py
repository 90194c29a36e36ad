"""Shared fixtures: sample SWPC reports, a fake clock and a fake SWPC server."""

from __future__ import annotations

from pathlib import Path

import pytest

from fakes import (
    FORECAST_PATH,
    NORTH_IMAGE_PATH,
    NORTH_JPEG,
    OUTLOOK_PATH,
    OVATION_DOCUMENT,
    OVATION_PATH,
    SOUTH_IMAGE_PATH,
    SOUTH_JPEG,
    FakeClock,
    FakeSWPC,
)

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def forecast_text() -> str:
    return (DATA_DIR / "3-day-forecast.txt").read_text(encoding="utf-8")


@pytest.fixture
def outlook_text() -> str:
    return (DATA_DIR / "27-day-outlook.txt").read_text(encoding="utf-8")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def swpc(forecast_text: str, outlook_text: str) -> FakeSWPC:
    return FakeSWPC(
        {
            FORECAST_PATH: (200, forecast_text),
            OUTLOOK_PATH: (200, outlook_text),
            OVATION_PATH: (200, OVATION_DOCUMENT),
            NORTH_IMAGE_PATH: (200, NORTH_JPEG),
            SOUTH_IMAGE_PATH: (200, SOUTH_JPEG),
        }
    )
