# /// script
# requires-python = ">=3.10"
# dependencies = ["typer>=0.9.0", "noaa-aurora"]
#
# [tool.uv.sources]
# noaa-aurora = { path = ".." }
# ///
"""Print an aurora report for a location from NOAA SWPC data.

Fetches the Ovation probability at the given coordinates, the 3-day Kp
forecast and the 27-day outlook, and prints them with their NOAA G
storm levels. Optionally saves the latest aurora oval image.

Usage:
    uv run examples/aurora_report.py [OPTIONS]

Examples:
    # Probability over Stonehenge plus forecasts
    uv run examples/aurora_report.py --lat 51.2 --lon -1.8

    # Southern hemisphere, save the oval image
    uv run examples/aurora_report.py --lat -43.5 --lon 172.6 --image south.jpg
"""

import logging
from typing import Annotated, Optional

import typer

from noaa_aurora import AuroraClient, DateFormat, Hemisphere, kp_to_g


def main(
    lat: Annotated[float, typer.Option(help="Latitude in degrees")] = 51.2,
    lon: Annotated[float, typer.Option(help="Longitude in degrees")] = -1.8,
    image: Annotated[
        Optional[str], typer.Option(help="Save the latest oval image to this file")
    ] = None,
    days: Annotated[int, typer.Option(help="Outlook days to show")] = 7,
    verbose: Annotated[bool, typer.Option(help="Enable debug logging")] = False,
):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    with AuroraClient(date_format=DateFormat.RFC) as aurora:
        probability = aurora.get_probability(lat=lat, lon=lon)
        print(f"── Aurora probability at ({lat}, {lon}): {probability}% ──")

        if image:
            hemisphere = Hemisphere.SOUTH if lat < 0 else Hemisphere.NORTH
            data = aurora.get_image(hemisphere, output=image)
            print(f"  Saved {hemisphere} oval image ({len(data):,} bytes) to {image}")

        print("\n── 3-day Kp forecast ──")
        for point in aurora.get_forecast_points():
            level = point.g_scale or ""
            print(f"  {point.timestamp}  Kp {point.kp:4.2f}  {level}")

        print(f"\n── 27-day outlook (first {days} days) ──")
        for point in aurora.get_outlook()[:days]:
            level = kp_to_g(point.kp) or ""
            print(
                f"  {point.timestamp}  F10.7 {point.flux:5.0f}  "
                f"Ap {point.ap:3.0f}  Kp {point.kp:3.0f}  {level}"
            )


if __name__ == "__main__":
    typer.run(main)
