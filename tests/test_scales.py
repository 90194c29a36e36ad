"""Tests for kp_to_g()."""

import math

import pytest

from noaa_aurora import kp_to_g


class TestKpToG:
    """Tests for the Kp to G-scale conversion."""

    @pytest.mark.parametrize(
        "kp, expected",
        [
            (0, 0),
            (4.4, 0),
            (4.5, "G1"),
            (5.33, "G1"),
            (5.5, "G2"),
            (6.5, "G3"),
            (7.5, "G4"),
            (8.67, "G4"),
            (9.0, "G5"),
        ],
    )
    def test_thresholds(self, kp, expected):
        assert kp_to_g(kp) == expected

    def test_none_is_zero(self):
        assert kp_to_g(None) == 0

    def test_nan_is_zero(self):
        assert kp_to_g(math.nan) == 0
