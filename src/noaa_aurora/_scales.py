"""NOAA geomagnetic storm scale."""

from __future__ import annotations

import math

_G_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (9.0, "G5"),
    (7.5, "G4"),
    (6.5, "G3"),
    (5.5, "G2"),
    (4.5, "G1"),
)


def kp_to_g(kp: float | None) -> int | str:
    """Convert a Kp index to the NOAA G storm level.

    Args:
        kp: Planetary Kp index (0-9), or ``None``.

    Returns:
        ``"G1"`` through ``"G5"``, or ``0`` if *kp* is unset or below
        storm level (4.5).

    Examples:
        ```python
        from noaa_aurora import kp_to_g
        kp_to_g(5.67)  # "G2"
        kp_to_g(3.0)   # 0
        ```
    """
    if not kp or math.isnan(kp):
        return 0
    for threshold, level in _G_THRESHOLDS:
        if kp >= threshold:
            return level
    return 0
