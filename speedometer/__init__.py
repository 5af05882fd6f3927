"""
Speedometer gauge geometry and label layout engine.
Pure functions over an immutable GaugeConfig; renderers live in speedometer.core.render*.
"""

from speedometer.core.arcs import (
    arc_for,
    arc_hover_for,
    arc_stub_for,
    arcs_for,
    segment_at_point,
    stroke_width_for,
    stubs_for,
)
from speedometer.core.error_codes import ConfigurationError
from speedometer.core.io import config_from_dict, load_config
from speedometer.core.labels import label_slots, layout_label, layout_labels
from speedometer.core.needle import resolve_needle_angle
from speedometer.core.scale import build_scale, build_tick_data, build_ticks, tick_angles
from speedometer.core.types import ArcDescriptor, GaugeConfig, LabelLayoutResult, LabelSlot

__all__ = [
    "ArcDescriptor",
    "ConfigurationError",
    "GaugeConfig",
    "LabelLayoutResult",
    "LabelSlot",
    "arc_for",
    "arc_hover_for",
    "arc_stub_for",
    "arcs_for",
    "build_scale",
    "build_tick_data",
    "build_ticks",
    "config_from_dict",
    "label_slots",
    "layout_label",
    "layout_labels",
    "load_config",
    "resolve_needle_angle",
    "segment_at_point",
    "stroke_width_for",
    "stubs_for",
    "tick_angles",
]
