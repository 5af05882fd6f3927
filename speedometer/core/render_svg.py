# speedometer/core/render_svg.py
"""
Export a gauge as self-contained SVG: colored segments (with padding stubs and
hover variants), tick labels, needle, current value text and title.
Segment tooltips are emitted as native <title> elements.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from speedometer.core.arcs import arc_hover_for, arc_path_d, arcs_for, stroke_width_for, stubs_for
from speedometer.core.colors import segment_colors_for, tooltip_for
from speedometer.core.config import (
    CURRENT_VALUE_OFFSET_Y_PX,
    DEFAULT_SEGMENT_STROKE_COLOR,
    TITLE_OFFSET_Y_PX,
)
from speedometer.core.formatting import format_current_value_text
from speedometer.core.labels import label_slots, layout_labels
from speedometer.core.needle import pointer_path_d, resolve_needle_angle
from speedometer.core.text_metrics import Measure
from speedometer.core.types import GaugeConfig, LabelLayoutResult, LabelSlot

SVG_NS = "http://www.w3.org/2000/svg"


def _center_transform(config: GaugeConfig) -> str:
    r = config.radius
    return f"translate({r:.2f} {r:.2f})"


def _append_segments(root: ET.Element, config: GaugeConfig) -> None:
    colors = segment_colors_for(config)
    stroke = stroke_width_for(config)
    g = ET.SubElement(root, "g", {"class": "arc", "transform": _center_transform(config)})
    for desc in arcs_for(config):
        attrs = {
            "class": "speedo-segment",
            "d": arc_path_d(desc),
            "fill": colors[desc.index],
            "stroke": DEFAULT_SEGMENT_STROKE_COLOR,
            "stroke-width": str(stroke),
        }
        if config.grow_segment_on_hover:
            attrs["data-hover-d"] = arc_path_d(arc_hover_for(config, desc.index))
        path = ET.SubElement(g, "path", attrs)
        tip = tooltip_for(config, desc.index)
        if tip is not None:
            ET.SubElement(path, "title").text = tip.text
    for stub in stubs_for(config):
        edge = "start" if stub.index == 0 else "end"
        ET.SubElement(
            g,
            "path",
            {
                "class": f"speedo-segment-stub-{edge}",
                "d": arc_path_d(stub),
                "fill": colors[stub.index],
            },
        )


def _label_transform(slot: LabelSlot, layout: LabelLayoutResult) -> str:
    if layout.writing_mode == "vertical":
        turn = layout.rotation_deg - slot.angle_deg
        return f"rotate({slot.angle_deg:.4f}) translate(0 {-slot.radius:.4f}) rotate({turn:.1f})"
    return f"rotate({slot.angle_deg:.4f}) translate({layout.offset_x:.4f} {-slot.radius:.4f})"


def _append_labels(root: ET.Element, config: GaugeConfig, measure: Optional[Measure]) -> None:
    slots = label_slots(config)
    layouts = layout_labels(config, measure)
    g = ET.SubElement(root, "g", {"class": "label", "transform": _center_transform(config)})
    for slot, layout in zip(slots, layouts):
        if layout.suppressed or not layout.lines:
            continue
        text = ET.SubElement(
            g,
            "text",
            {
                "class": "segment-value",
                "transform": _label_transform(slot, layout),
                "text-anchor": layout.text_anchor,
                "font-family": config.font_family,
                "font-size": f"{config.label_font_size_px:.0f}px",
                "font-weight": "bold",
                "fill": config.text_color,
            },
        )
        if len(layout.lines) == 1:
            text.text = layout.lines[0]
            continue
        for line, dy in zip(layout.lines, layout.line_offsets):
            tspan = ET.SubElement(text, "tspan", {"x": "0", "y": f"{dy:.4f}"})
            tspan.text = line


def _append_center_text(root: ET.Element, config: GaugeConfig, css_class: str, text: str, y: float) -> None:
    r = config.radius
    g = ET.SubElement(root, "g", {"transform": f"translate({r:.2f} {r:.2f})"})
    el = ET.SubElement(
        g,
        "text",
        {
            "class": css_class,
            "text-anchor": "middle",
            "y": f"{y:.0f}",
            "font-family": config.font_family,
            "font-size": f"{config.value_font_size_px:.0f}px",
            "font-weight": "bold",
            "fill": config.text_color,
        },
    )
    el.text = text


def _append_needle(root: ET.Element, config: GaugeConfig, value: float) -> None:
    angle = resolve_needle_angle(config, value)
    g = ET.SubElement(
        root,
        "g",
        {"class": "pointer", "transform": _center_transform(config), "fill": config.needle_color},
    )
    path = ET.SubElement(g, "path", {"d": pointer_path_d(config), "transform": f"rotate({angle:.4f})"})
    ET.SubElement(path, "title").text = format_current_value_text(config, value)


def gauge_to_svg(
    config: GaugeConfig,
    value: Optional[float] = None,
    measure: Optional[Measure] = None,
) -> str:
    """Serialize the full gauge for value (defaults to config.value)."""
    v = config.value if value is None else value
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "class": "speedometer",
            "width": f"{config.width:.0f}",
            "height": f"{config.height:.0f}",
        },
    )
    _append_segments(root, config)
    _append_labels(root, config, measure)
    if config.title:
        _append_center_text(root, config, "title", config.title, TITLE_OFFSET_Y_PX)
    _append_center_text(root, config, "current-value", format_current_value_text(config, v), CURRENT_VALUE_OFFSET_Y_PX)
    _append_needle(root, config, v)
    return ET.tostring(root, encoding="unicode", method="xml")


def export_gauge_svg(
    config: GaugeConfig,
    out_path: str | Path,
    value: Optional[float] = None,
    measure: Optional[Measure] = None,
) -> Path:
    """Write the gauge SVG to out_path and return the path."""
    out = Path(out_path)
    svg = gauge_to_svg(config, value=value, measure=measure)
    out.write_text('<?xml version="1.0" encoding="UTF-8"?>\n' + svg, encoding="utf-8")
    return out
