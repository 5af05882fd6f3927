# tests/test_needle.py
"""
Tests for needle angle resolution (including out-of-range parking) and outline.
"""

from __future__ import annotations

import pytest

from speedometer.core.needle import (
    interpolate_needle_angle,
    needle_length,
    pointer_outline,
    pointer_path_d,
    resolve_needle_angle,
)
from speedometer.core.types import GaugeConfig


@pytest.mark.parametrize(
    ("value", "angle"),
    [(0, -90.0), (250, -45.0), (500, 0.0), (1000, 90.0)],
)
def test_in_range_values_map_linearly(value: float, angle: float) -> None:
    assert resolve_needle_angle(GaugeConfig(), value) == pytest.approx(angle)


def test_out_of_range_values_park_past_the_ends() -> None:
    config = GaugeConfig()
    assert resolve_needle_angle(config, -1) == -100.0
    assert resolve_needle_angle(config, -5000) == -100.0
    assert resolve_needle_angle(config, 1001) == 100.0


def test_needle_angle_with_custom_sweep() -> None:
    config = GaugeConfig(min_value=-50, max_value=50, min_angle=-135, max_angle=135)
    assert resolve_needle_angle(config, 0) == pytest.approx(0.0)
    assert resolve_needle_angle(config, 60) == 145.0


def test_needle_ignores_custom_stops() -> None:
    config = GaugeConfig(custom_segment_stops=[0, 500, 750, 900, 1000])
    assert resolve_needle_angle(config, 750) == pytest.approx(45.0)


def test_needle_length_rounds() -> None:
    assert needle_length(GaugeConfig()) == 135.0
    assert needle_length(GaugeConfig(needle_height_ratio=0.7)) == 105.0
    assert needle_length(GaugeConfig(width=301, height=301, needle_height_ratio=0.5)) == 75.0


def test_pointer_outline_is_closed() -> None:
    pts = pointer_outline(GaugeConfig())
    assert len(pts) == 5
    assert pts[0] == pts[-1]
    assert pts[1] == (0.0, -135.0)
    assert pts[3] == (0.0, 5.0)
    d = pointer_path_d(GaugeConfig())
    assert d.startswith("M 5.0000 0.0000")
    assert d.endswith("Z")


def test_interpolate_needle_angle_clamps_progress() -> None:
    config = GaugeConfig()
    assert interpolate_needle_angle(config, 45.0, 0.0) == -90.0
    assert interpolate_needle_angle(config, 45.0, 1.0) == 45.0
    assert interpolate_needle_angle(config, 45.0, 0.5) == pytest.approx(-22.5)
    assert interpolate_needle_angle(config, 45.0, 2.0) == 45.0


@pytest.mark.parametrize("value", [-50, -49.5, -12.25, 0, 0.001, 17, 33.3, 49.999, 50])
def test_in_domain_values_stay_on_the_dial(value: float) -> None:
    config = GaugeConfig(min_value=-50, max_value=50, min_angle=-135, max_angle=135)
    angle = resolve_needle_angle(config, value)
    assert config.min_angle <= angle <= config.max_angle
    assert angle == pytest.approx(-135 + (value + 50) / 100 * 270)
