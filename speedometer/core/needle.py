# speedometer/core/needle.py
"""
Needle angle and outline. Out-of-range values park the needle just past the
dial ends instead of clamping onto them.
"""

from __future__ import annotations

from speedometer.core.cache import memoize_one
from speedometer.core.config import NEEDLE_OVERRANGE_DEG
from speedometer.core.scale import build_scale
from speedometer.core.types import GaugeConfig


@memoize_one
def resolve_needle_angle(config: GaugeConfig, value: float) -> float:
    """Needle rotation in degrees for value."""
    ratio = build_scale(config)(value)
    angle = config.min_angle + ratio * config.sweep
    if angle < config.min_angle:
        return config.min_angle - NEEDLE_OVERRANGE_DEG
    if angle > config.max_angle:
        return config.max_angle + NEEDLE_OVERRANGE_DEG
    return angle


def needle_length(config: GaugeConfig) -> float:
    return float(round(config.radius * config.needle_height_ratio))


def pointer_outline(config: GaugeConfig) -> list[tuple[float, float]]:
    """Closed needle outline pointing up (angle 0), tail below the hub."""
    half = config.pointer_width / 2.0
    length = needle_length(config)
    return [
        (half, 0.0),
        (0.0, -length),
        (-half, 0.0),
        (0.0, config.pointer_tail_length),
        (half, 0.0),
    ]


def pointer_path_d(config: GaugeConfig) -> str:
    pts = pointer_outline(config)
    parts = [f"M {pts[0][0]:.4f} {pts[0][1]:.4f}"]
    parts.extend(f"L {x:.4f} {y:.4f}" for x, y in pts[1:])
    parts.append("Z")
    return " ".join(parts)


def interpolate_needle_angle(config: GaugeConfig, target_angle: float, t: float) -> float:
    """Angle at transition progress t in [0, 1], sweeping up from min_angle."""
    t = min(1.0, max(0.0, float(t)))
    return config.min_angle + (target_angle - config.min_angle) * t
