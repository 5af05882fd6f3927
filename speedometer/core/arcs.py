# speedometer/core/arcs.py
"""
Arc geometry: per-segment annular sectors, hover variants, padding stubs,
stroke width, polygon conversion and SVG path data.
Angles are degrees, 0 at 12 o'clock, increasing clockwise; coordinates are
relative to the gauge center with y pointing down (SVG frame).
See: docs/ALGORITHM.md A1-A4.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from shapely.geometry import Point, Polygon

from speedometer.core.cache import memoize_one
from speedometer.core.config import ARC_POLYGON_POINTS, HOVER_GROWTH_PX, STROKE_RING_FRACTION
from speedometer.core.scale import build_tick_data, cumulative_fraction
from speedometer.core.types import ArcDescriptor, GaugeConfig, StubEdge


def ring_radii(config: GaugeConfig) -> tuple[float, float]:
    """(inner_radius, outer_radius) of the colored ring."""
    outer = config.radius - config.ring_inset
    inner = outer - config.ring_width
    if config.position_label == "inner":
        # Inner labels need their band between the ring and the center.
        inner = min(outer, max(inner, config.label_inset))
    return max(0.0, inner), max(0.0, outer)


def boundary_angles(config: GaugeConfig) -> tuple[float, ...]:
    """Segment boundaries in degrees: len(tick data) + 1 values from min_angle to max_angle."""
    tick_data = build_tick_data(config)
    return tuple(
        config.min_angle + cumulative_fraction(tick_data, i) * config.sweep
        for i in range(len(tick_data) + 1)
    )


@memoize_one
def arcs_for(config: GaugeConfig) -> tuple[ArcDescriptor, ...]:
    """One descriptor per segment; adjacent descriptors share their boundary angle."""
    inner, outer = ring_radii(config)
    bounds = boundary_angles(config)
    return tuple(
        ArcDescriptor(
            index=i,
            inner_radius=inner,
            outer_radius=outer,
            start_angle_deg=start,
            end_angle_deg=end,
        )
        for i, (start, end) in enumerate(zip(bounds, bounds[1:]))
    )


def arc_for(config: GaugeConfig, index: int) -> ArcDescriptor:
    arcs = arcs_for(config)
    if not 0 <= index < len(arcs):
        raise IndexError(f"segment index {index} out of range (0..{len(arcs) - 1})")
    return arcs[index]


def arc_hover_for(config: GaugeConfig, index: int) -> ArcDescriptor:
    """
    Hover variant of segment index: the band moves HOVER_GROWTH_PX outward,
    same angles. Both radii are capped at the gauge radius.
    """
    base = arc_for(config, index)
    return ArcDescriptor(
        index=index,
        inner_radius=min(config.radius, base.inner_radius + HOVER_GROWTH_PX),
        outer_radius=min(config.radius, base.outer_radius + HOVER_GROWTH_PX),
        start_angle_deg=base.start_angle_deg,
        end_angle_deg=base.end_angle_deg,
    )


@memoize_one
def stroke_width_for(config: GaugeConfig) -> int:
    """Gap stroke between padded segments; 0 when padding is off or there is a single segment."""
    if config.padding_segment and len(build_tick_data(config)) > 1:
        # round() first: 0.1 * 30 must not ceil to 4.
        return int(math.ceil(round(STROKE_RING_FRACTION * config.ring_width, 9)))
    return 0


def arc_stub_for(
    config: GaugeConfig,
    edge: StubEdge,
    stroke_width: float,
    hover: bool = False,
) -> Optional[ArcDescriptor]:
    """
    Filler wedge inside the first ("start") or last ("end") segment covering the
    angle that half the stroke eats at the ring's inner edge. None when there is
    nothing to pad.
    """
    if edge not in ("start", "end"):
        raise ValueError(f"edge must be 'start' or 'end', got {edge!r}")
    arcs = arcs_for(config)
    if len(arcs) <= 1 or stroke_width <= 0:
        return None
    index = 0 if edge == "start" else len(arcs) - 1
    seg = arc_hover_for(config, index) if hover else arcs[index]
    ref_radius = seg.inner_radius if seg.inner_radius > 0 else seg.outer_radius
    if ref_radius <= 0:
        return None
    delta = min(math.degrees((stroke_width / 2.0) / ref_radius), seg.sweep_deg)
    if edge == "start":
        start, end = seg.start_angle_deg, seg.start_angle_deg + delta
    else:
        start, end = seg.end_angle_deg - delta, seg.end_angle_deg
    return ArcDescriptor(
        index=index,
        inner_radius=seg.inner_radius,
        outer_radius=seg.outer_radius,
        start_angle_deg=start,
        end_angle_deg=end,
    )


def stubs_for(config: GaugeConfig) -> list[ArcDescriptor]:
    """Stubs to draw for this configuration (start, end); empty unless padding applies."""
    if not config.padding_segment:
        return []
    stroke = stroke_width_for(config)
    out = [arc_stub_for(config, edge, stroke) for edge in ("start", "end")]
    return [s for s in out if s is not None]


def polar_point(radius: float, angle_deg: float) -> tuple[float, float]:
    """Point at radius/angle in the SVG frame (0 deg = up, clockwise)."""
    rad = math.radians(angle_deg)
    return (radius * math.sin(rad), -radius * math.cos(rad))


def arc_to_polygon(desc: ArcDescriptor, n_points: int = ARC_POLYGON_POINTS) -> Polygon:
    """Annular sector as a polygon (outer edge forward, inner edge back)."""
    if desc.sweep_deg <= 0 or desc.outer_radius <= 0:
        return Polygon()
    n = max(2, int(n_points))
    angles = np.radians(np.linspace(desc.start_angle_deg, desc.end_angle_deg, n))
    sin_a, cos_a = np.sin(angles), np.cos(angles)
    outer = np.column_stack((desc.outer_radius * sin_a, -desc.outer_radius * cos_a))
    if desc.inner_radius > 0:
        inner = np.column_stack((desc.inner_radius * sin_a, -desc.inner_radius * cos_a))[::-1]
    else:
        inner = np.zeros((1, 2))
    coords = np.vstack((outer, inner))
    return Polygon([(float(x), float(y)) for x, y in coords])


def _arc_command(radius: float, angle_deg: float, clockwise: bool) -> str:
    x, y = polar_point(radius, angle_deg)
    sweep_flag = 1 if clockwise else 0
    return f"A {radius:.4f} {radius:.4f} 0 0 {sweep_flag} {x:.4f} {y:.4f}"


def arc_path_d(desc: ArcDescriptor) -> str:
    """
    SVG path data for an annular sector. Each edge is drawn as two half arcs so
    sweeps up to a full turn never need the large-arc flag.
    """
    if desc.sweep_deg <= 0 or desc.outer_radius <= 0:
        return ""
    start, end = desc.start_angle_deg, desc.end_angle_deg
    mid = (start + end) / 2.0
    sx, sy = polar_point(desc.outer_radius, start)
    parts = [
        f"M {sx:.4f} {sy:.4f}",
        _arc_command(desc.outer_radius, mid, True),
        _arc_command(desc.outer_radius, end, True),
    ]
    if desc.inner_radius > 0:
        ex, ey = polar_point(desc.inner_radius, end)
        parts.append(f"L {ex:.4f} {ey:.4f}")
        parts.append(_arc_command(desc.inner_radius, mid, False))
        parts.append(_arc_command(desc.inner_radius, start, False))
    else:
        parts.append("L 0.0000 0.0000")
    parts.append("Z")
    return " ".join(parts)


def segment_at_point(
    config: GaugeConfig,
    x: float,
    y: float,
    hover: bool = False,
) -> Optional[int]:
    """Index of the segment covering (x, y) (center-relative, SVG frame), or None."""
    p = Point(x, y)
    for desc in arcs_for(config):
        shape = arc_hover_for(config, desc.index) if hover else desc
        poly = arc_to_polygon(shape)
        if not poly.is_empty and poly.covers(p):
            return desc.index
    return None
