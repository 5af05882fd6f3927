# speedometer/core/formatting.py
"""
Value formatting for tick labels and the current-value text.
"""

from __future__ import annotations

from typing import Callable

from speedometer.core.types import GaugeConfig


def default_label_format(value_format: str = "") -> Callable[[float], str]:
    """
    Formatter from a Python format spec. "" prints integers without a trailing
    ".0"; specs ending in "d" round to int first.
    """

    def fmt(value: float) -> str:
        v = float(value)
        if not value_format:
            return str(int(v)) if v.is_integer() else str(v)
        if value_format.endswith("d"):
            return format(int(round(v)), value_format)
        return format(v, value_format)

    return fmt


def format_value(config: GaugeConfig, value: float) -> str:
    """Format value with the config's label_format, or one derived from value_format."""
    fmt = config.label_format or default_label_format(config.value_format)
    return fmt(value)


def format_current_value_text(config: GaugeConfig, value: float | None = None) -> str:
    """Substitute the formatted value into current_value_text."""
    v = config.value if value is None else value
    return config.current_value_text.replace(
        config.current_value_placeholder_style,
        format_value(config, v),
    )
