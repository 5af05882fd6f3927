# speedometer/core/colors.py
"""
Segment colors and tooltip contents.
Colors interpolate start_color -> end_color through a matplotlib colormap unless
segment_colors supplies an explicit color for the segment.
"""

from __future__ import annotations

from typing import Callable, Optional

from matplotlib.colors import LinearSegmentedColormap, to_hex

from speedometer.core.cache import memoize_one
from speedometer.core.scale import build_tick_data, cumulative_fraction
from speedometer.core.types import GaugeConfig, TooltipContent


def color_interpolator(start_color: str, end_color: str) -> Callable[[float], str]:
    """ratio in [0, 1] -> "#rrggbb"; ratios outside are clamped."""
    cmap = LinearSegmentedColormap.from_list("gauge", [start_color, end_color])

    def arc_color(ratio: float) -> str:
        return to_hex(cmap(min(1.0, max(0.0, float(ratio)))))

    return arc_color


@memoize_one
def arc_color_fn(config: GaugeConfig) -> Callable[[float], str]:
    return color_interpolator(config.start_color, config.end_color)


def segment_color(config: GaugeConfig, index: int) -> str:
    """Explicit segment_colors[index] when present, else interpolated at the segment start."""
    if index < len(config.segment_colors) and config.segment_colors[index]:
        return config.segment_colors[index]
    ratio = cumulative_fraction(build_tick_data(config), index)
    return arc_color_fn(config)(ratio)


@memoize_one
def segment_colors_for(config: GaugeConfig) -> tuple[str, ...]:
    return tuple(segment_color(config, i) for i in range(len(build_tick_data(config))))


def tooltip_for(config: GaugeConfig, index: int) -> Optional[TooltipContent]:
    """Tooltip for segment index; None when segment_labels has no entry for it."""
    if not 0 <= index < len(config.segment_labels):
        return None
    text = config.segment_labels[index]
    if not text:
        return None
    colors = segment_colors_for(config)
    color = colors[index] if index < len(colors) else config.text_color
    return TooltipContent(index=index, text=text, color=color)
