"""
Streamlit preview: sidebar (preset, value, label and padding options), tabs Gauge/Labels/Debug/Help.
Run with: streamlit run speedometer/ui/app.py
"""

from __future__ import annotations

import io
import logging
import os
import sys
from pathlib import Path

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

# Ensure repo root is on path when Streamlit loads this file
_repo_root = Path(__file__).resolve().parent.parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import streamlit as st

from speedometer.core.error_codes import ConfigurationError, user_message
from speedometer.core.presets import PRESETS, preset_config
from speedometer.core.render import render_debug_png, render_gauge_png
from speedometer.core.render_svg import gauge_to_svg
from speedometer.core.types import GaugeConfig
from speedometer.ui import components as ui_components
from speedometer.ui.help_text import (
    GLOSSARY_MD,
    QUICK_TROUBLESHOOT_MD,
    TOOLTIP_CUSTOM_LABELS,
    TOOLTIP_GROW,
    TOOLTIP_PADDING,
    TOOLTIP_POSITION_LABEL,
    TOOLTIP_PRESET,
    TOOLTIP_RENDER_SCALE,
    TOOLTIP_VALUE,
)

logger = logging.getLogger(__name__)


def _build_config(preset: str, overrides: dict) -> GaugeConfig | None:
    try:
        return preset_config(preset, **overrides)
    except ConfigurationError as e:
        logger.warning(f"Rejected configuration: {e}")
        st.error(f"{user_message(e.key)} ({e.detail})" if e.detail else user_message(e.key))
        return None


st.set_page_config(page_title="Speedometer", layout="wide")
st.title("Speedometer layout preview")

with st.sidebar:
    preset = st.selectbox("Preset", list(PRESETS), help=TOOLTIP_PRESET)
    base = preset_config(preset)
    value = st.number_input(
        "Value",
        value=float(base.value),
        step=max(1.0, (base.max_value - base.min_value) / 100.0),
        help=TOOLTIP_VALUE,
    )
    position_label = st.radio(
        "Label position",
        ("outer", "inner"),
        index=0 if base.position_label == "outer" else 1,
        horizontal=True,
        help=TOOLTIP_POSITION_LABEL,
    )
    padding_segment = st.checkbox("Padding segments", value=base.padding_segment, help=TOOLTIP_PADDING)
    grow = st.checkbox("Grow segment on hover", value=base.grow_segment_on_hover, help=TOOLTIP_GROW)
    width = st.slider("Width (px)", 200, 1000, value=int(base.width), step=50)
    with st.expander("Labels", expanded=False):
        max_labels = st.number_input("Max segment labels", min_value=0, value=int(base.label_count), step=1)
        custom_labels_raw = st.text_area(
            "Custom segment labels",
            value="\n".join(base.custom_segment_labels),
            help=TOOLTIP_CUSTOM_LABELS,
        )
    render_scale = st.selectbox("PNG scale", (1, 2, 4), help=TOOLTIP_RENDER_SCALE)

overrides = {
    "value": value,
    "position_label": position_label,
    "padding_segment": padding_segment,
    "grow_segment_on_hover": grow,
    "width": float(width),
    "height": float(width) * base.height / base.width,
    "max_segment_labels": int(max_labels),
    "custom_segment_labels": tuple(custom_labels_raw.splitlines()),
}
config = _build_config(preset, overrides)

if config is not None:
    svg_text = gauge_to_svg(config, value=value)
    tab_gauge, tab_labels, tab_debug, tab_help = st.tabs(["Gauge", "Labels", "Debug", "Help"])
    with tab_gauge:
        ui_components.render_needle_metrics(config, value)
        ui_components.render_svg_viewer(svg_text, height=int(config.height) + 40)
        ui_components.render_downloads(config, value, svg_text)
    with tab_labels:
        ui_components.render_label_table(config)
    with tab_debug:
        left, right = st.columns(2)
        gauge_png = io.BytesIO()
        render_gauge_png(config, gauge_png, value=value, scale=render_scale)
        debug_png = io.BytesIO()
        render_debug_png(config, debug_png, scale=render_scale)
        with left:
            st.image(gauge_png.getvalue(), caption="Matplotlib preview")
        with right:
            st.image(debug_png.getvalue(), caption="Label budgets")
    with tab_help:
        st.markdown(GLOSSARY_MD)
        st.markdown("---")
        st.markdown("### Quick troubleshooting")
        st.markdown(QUICK_TROUBLESHOOT_MD)
