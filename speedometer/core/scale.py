# speedometer/core/scale.py
"""
Value scale and segment partitioning: linear value->ratio scale, tick data
(angular share per segment) and tick values (where labels are drawn).
See: docs/ALGORITHM.md S1-S3.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from speedometer.core.cache import memoize_one
from speedometer.core.types import GaugeConfig


@dataclass(frozen=True)
class LinearScale:
    """Linear map [min_value, max_value] -> [0, 1]. Not clamped; min == max maps to 0."""
    min_value: float
    max_value: float
    segments: int

    def __call__(self, value: float) -> float:
        span = self.max_value - self.min_value
        if span == 0:
            return 0.0
        return (float(value) - self.min_value) / span

    def invert(self, ratio: float) -> float:
        return self.min_value + float(ratio) * (self.max_value - self.min_value)


def linear_scale(min_value: float, max_value: float, segments: int) -> LinearScale:
    """Build the value->ratio scale. segments only participates in downstream ticks."""
    return LinearScale(float(min_value), float(max_value), int(segments))


def even_ticks(min_value: float, max_value: float, count: int) -> tuple[float, ...]:
    """count + 1 evenly spaced values from min to max inclusive; () for count <= 0."""
    if count <= 0:
        return ()
    values = np.linspace(min_value, max_value, int(count) + 1)
    return tuple(float(v) for v in values)


def segment_fractions(
    segment_count: int,
    custom_stops: tuple[float, ...],
    min_value: float,
    max_value: float,
) -> tuple[float, ...]:
    """
    Angular share of each segment. Equal 1/segment_count shares by default;
    with custom stops, each interval's share of the domain.
    """
    if custom_stops:
        span = max_value - min_value
        return tuple((b - a) / span for a, b in zip(custom_stops, custom_stops[1:]))
    if segment_count <= 0:
        return ()
    return tuple(1.0 / segment_count for _ in range(segment_count))


@memoize_one
def build_scale(config: GaugeConfig) -> LinearScale:
    return linear_scale(config.min_value, config.max_value, config.label_count)


@memoize_one
def build_tick_data(config: GaugeConfig) -> tuple[float, ...]:
    """Fractions of the sweep per segment; sums to 1."""
    return segment_fractions(
        config.segments,
        config.custom_segment_stops,
        config.min_value,
        config.max_value,
    )


@memoize_one
def build_ticks(config: GaugeConfig) -> tuple[float, ...]:
    """Domain values that get a label. Custom stops win unless labels are disabled."""
    if config.label_count == 0:
        return ()
    if config.custom_segment_stops:
        return config.custom_segment_stops
    return even_ticks(config.min_value, config.max_value, config.label_count)


def cumulative_fraction(tick_data: tuple[float, ...], count: int) -> float:
    """Sum of the first count fractions (clamped so the last boundary is exactly 1)."""
    if count <= 0:
        return 0.0
    if count >= len(tick_data):
        return 1.0 if tick_data else 0.0
    return float(sum(tick_data[:count]))


@memoize_one
def tick_angles(config: GaugeConfig) -> tuple[float, ...]:
    """Rotation (deg) of each tick label."""
    ticks = build_ticks(config)
    if config.custom_segment_stops:
        tick_data = build_tick_data(config)
        ratios = [cumulative_fraction(tick_data, i) for i in range(len(ticks))]
    else:
        scale = build_scale(config)
        ratios = [scale(t) for t in ticks]
    return tuple(config.min_angle + r * config.sweep for r in ratios)
