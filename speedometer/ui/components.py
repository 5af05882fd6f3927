# speedometer/ui/components.py
"""
Shared UI blocks for the preview page: SVG viewer, label table, needle metrics, downloads.
"""

from __future__ import annotations

import json

import streamlit as st

from speedometer.core.labels import label_slots, layout_labels
from speedometer.core.needle import resolve_needle_angle
from speedometer.core.reporting import layout_to_dict
from speedometer.core.scale import build_tick_data
from speedometer.core.types import GaugeConfig


def render_svg_viewer(svg_text: str, height: int = 520) -> None:
    """Inline SVG viewer. Constrained size so it does not over-stretch."""
    if "<svg" in svg_text and "style=" not in svg_text.split(">")[0]:
        svg_text = svg_text.replace("<svg", "<svg style=\"max-width:100%; height:auto;\"", 1)
    wrapper = f'<div style="overflow:auto; max-height:{height}px; text-align:center;"><div style="display:inline-block; max-width:100%;">{svg_text}</div></div>'
    st.components.v1.html(wrapper, height=height + 20, scrolling=True)


def render_needle_metrics(config: GaugeConfig, value: float) -> None:
    angle = resolve_needle_angle(config, value)
    left, mid, right = st.columns(3)
    left.metric("Needle angle", f"{angle:.1f}°")
    mid.metric("Segments", len(build_tick_data(config)))
    right.metric("Labels", len(label_slots(config)))
    if angle < config.min_angle or angle > config.max_angle:
        st.warning("Value is outside [min, max]; needle parked past the dial end.")


def render_label_table(config: GaugeConfig) -> None:
    """One row per tick: slot budgets and the fitted text."""
    rows = []
    for slot, layout in zip(label_slots(config), layout_labels(config)):
        rows.append(
            {
                "tick": slot.value,
                "angle°": round(slot.angle_deg, 2),
                "left px": round(slot.available_width_left, 1),
                "right px": round(slot.available_width_right, 1),
                "text": layout.text,
                "lines": " / ".join(layout.lines),
                "mode": "hidden" if layout.suppressed else layout.writing_mode,
                "truncated": layout.truncated,
            }
        )
    if rows:
        st.dataframe(rows, width="stretch")
    else:
        st.caption("Labels disabled (maxSegmentLabels = 0).")


def render_downloads(config: GaugeConfig, value: float, svg_text: str) -> None:
    st.download_button(
        "Download gauge.svg",
        data=svg_text.encode("utf-8"),
        file_name="gauge.svg",
        mime="image/svg+xml",
        key="dl_gauge_svg",
    )
    st.download_button(
        "Download layout.json",
        data=json.dumps(layout_to_dict(config, value=value), indent=2, ensure_ascii=False).encode("utf-8"),
        file_name="layout.json",
        mime="application/json",
        key="dl_layout_json",
    )
