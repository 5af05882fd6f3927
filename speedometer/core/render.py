# speedometer/core/render.py
"""
Matplotlib PNG rendering: gauge.png (preview) and debug.png (label budgets).
Geometry comes from the engine in the SVG frame (y down) and is flipped here.
"""

from __future__ import annotations

import math
import warnings
from pathlib import Path
from typing import Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from shapely.geometry.base import BaseGeometry

from speedometer.core.arcs import arc_to_polygon, arcs_for, boundary_angles, polar_point, stubs_for
from speedometer.core.colors import segment_colors_for
from speedometer.core.config import CURRENT_VALUE_OFFSET_Y_PX, RENDER_DPI, TITLE_OFFSET_Y_PX
from speedometer.core.formatting import format_current_value_text
from speedometer.core.labels import label_slots, layout_labels
from speedometer.core.needle import pointer_outline, resolve_needle_angle
from speedometer.core.text_metrics import Measure
from speedometer.core.types import GaugeConfig, LabelLayoutResult, LabelSlot


def _new_fig(config: GaugeConfig, scale: int) -> tuple[plt.Figure, plt.Axes]:
    w, h = config.width * scale, config.height * scale
    fig = plt.figure(figsize=(w / RENDER_DPI, h / RENDER_DPI), dpi=RENDER_DPI, constrained_layout=False)
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.axis("off")
    r = config.radius
    ax.set_xlim(-r, config.width - r)
    ax.set_ylim(-(config.height - r), r)
    ax.set_aspect("equal", adjustable="box")
    return fig, ax


def _rotate(x: float, y: float, angle_deg: float) -> tuple[float, float]:
    """SVG rotate(): clockwise on screen because y points down."""
    a = math.radians(angle_deg)
    return (x * math.cos(a) - y * math.sin(a), x * math.sin(a) + y * math.cos(a))


def _fill_geom(ax: plt.Axes, geom: BaseGeometry, color: str, **kwargs) -> None:
    if geom is None or geom.is_empty:
        return
    xy = np.array(geom.exterior.coords)
    ax.fill(xy[:, 0], -xy[:, 1], facecolor=color, **kwargs)


def _draw_label(ax: plt.Axes, config: GaugeConfig, slot: LabelSlot, layout: LabelLayoutResult) -> None:
    if layout.suppressed or not layout.lines:
        return
    ha = "center" if layout.text_anchor == "middle" else "left"
    offsets = layout.line_offsets or (0.0,) * len(layout.lines)
    for line, dy in zip(layout.lines, offsets):
        if layout.writing_mode == "vertical":
            x, y = _rotate(0.0, -slot.radius, slot.angle_deg)
        else:
            x, y = _rotate(layout.offset_x, -slot.radius + dy, slot.angle_deg)
        ax.text(
            x, -y, line,
            fontsize=config.label_font_size_px * 72.0 / RENDER_DPI,
            fontfamily=config.font_family,
            fontweight="bold",
            ha=ha, va="baseline",
            color=config.text_color,
            rotation=-layout.rotation_deg,
            rotation_mode="anchor",
            zorder=5,
        )


def _draw_center_text(ax: plt.Axes, config: GaugeConfig, text: str, y: float) -> None:
    ax.text(
        0.0, -y, text,
        fontsize=config.value_font_size_px * 72.0 / RENDER_DPI,
        fontfamily=config.font_family,
        fontweight="bold",
        ha="center", va="baseline",
        color=config.text_color,
        zorder=6,
    )


def _draw_needle(ax: plt.Axes, config: GaugeConfig, value: float) -> None:
    angle = resolve_needle_angle(config, value)
    pts = np.array([_rotate(x, y, angle) for x, y in pointer_outline(config)])
    ax.fill(pts[:, 0], -pts[:, 1], facecolor=config.needle_color, zorder=7)


def _save(fig: plt.Figure, output_path: str | Path) -> None:
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=RENDER_DPI, facecolor="white")
    plt.close(fig)


def render_gauge_png(
    config: GaugeConfig,
    output_path: str | Path,
    value: Optional[float] = None,
    measure: Optional[Measure] = None,
    scale: int = 1,
) -> None:
    """Render the gauge. scale multiplies output resolution (1x, 2x, 4x)."""
    v = config.value if value is None else value
    fig, ax = _new_fig(config, scale)
    colors = segment_colors_for(config)
    for desc in arcs_for(config):
        _fill_geom(ax, arc_to_polygon(desc), colors[desc.index], edgecolor="white", linewidth=0)
    for stub in stubs_for(config):
        _fill_geom(ax, arc_to_polygon(stub), colors[stub.index], linewidth=0)
    for slot, layout in zip(label_slots(config), layout_labels(config, measure)):
        _draw_label(ax, config, slot, layout)
    if config.title:
        _draw_center_text(ax, config, config.title, TITLE_OFFSET_Y_PX)
    _draw_center_text(ax, config, format_current_value_text(config, v), CURRENT_VALUE_OFFSET_Y_PX)
    _draw_needle(ax, config, v)
    _save(fig, output_path)


def render_debug_png(
    config: GaugeConfig,
    output_path: str | Path,
    scale: int = 1,
) -> None:
    """Ring outline, segment boundaries and each label's tangential budget (left red, right blue)."""
    fig, ax = _new_fig(config, scale)
    for desc in arcs_for(config):
        poly = arc_to_polygon(desc)
        if not poly.is_empty:
            xy = np.array(poly.exterior.coords)
            ax.plot(xy[:, 0], -xy[:, 1], linewidth=0.8, color="grey")
    for angle in boundary_angles(config):
        x, y = polar_point(config.radius, angle)
        ax.plot([0.0, x], [0.0, -y], linestyle="--", linewidth=0.5, color="lightgrey")
    for slot in label_slots(config):
        ax_, ay_ = _rotate(-slot.available_width_left, -slot.radius, slot.angle_deg)
        bx, by = _rotate(0.0, -slot.radius, slot.angle_deg)
        cx, cy = _rotate(slot.available_width_right, -slot.radius, slot.angle_deg)
        ax.plot([ax_, bx], [-ay_, -by], linewidth=2, color="tab:red")
        ax.plot([bx, cx], [-by, -cy], linewidth=2, color="tab:blue")
        ax.scatter([bx], [-by], s=8, color="black", zorder=5)
    _save(fig, output_path)
