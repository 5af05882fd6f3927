"""
Structured error codes for configuration failures.
ConfigurationError carries one of these keys; map to user-facing messages in the UI/CLI.
"""

from __future__ import annotations

# Known error keys (carried by ConfigurationError.key)
INVALID_DOMAIN = "invalid_domain"
INVALID_SWEEP = "invalid_sweep"
INVALID_SEGMENTS = "invalid_segments"
INVALID_SEGMENT_STOPS = "invalid_segment_stops"
NEGATIVE_DIMENSION = "negative_dimension"
RING_TOO_LARGE = "ring_too_large"
INVALID_NEEDLE_RATIO = "invalid_needle_ratio"
INVALID_POSITION_LABEL = "invalid_position_label"
INVALID_PLACEHOLDER = "invalid_placeholder"
UNKNOWN_FIELD = "unknown_field"
INVALID_CONFIG_FILE = "invalid_config_file"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_DOMAIN: "minValue must be smaller than maxValue.",
    INVALID_SWEEP: "minAngle must be smaller than maxAngle.",
    INVALID_SEGMENTS: "segments and maxSegmentLabels must be whole numbers, not negative.",
    INVALID_SEGMENT_STOPS: "customSegmentStops must increase strictly from minValue to maxValue.",
    NEGATIVE_DIMENSION: "Sizes, insets and pointer dimensions must not be negative.",
    RING_TOO_LARGE: "ringWidth + ringInset must fit inside half the gauge width.",
    INVALID_NEEDLE_RATIO: "needleHeightRatio must be between 0 and 1.",
    INVALID_POSITION_LABEL: "positionLabel must be 'outer' or 'inner'.",
    INVALID_PLACEHOLDER: "currentValuePlaceholderStyle must be '${value}' or '#{value}'.",
    UNKNOWN_FIELD: "Configuration contains an unknown field.",
    INVALID_CONFIG_FILE: "Configuration file is not a valid JSON object.",
}


class ConfigurationError(ValueError):
    """Invalid gauge configuration, rejected before any geometry is computed."""

    def __init__(self, key: str, detail: str | None = None) -> None:
        self.key = key
        self.detail = detail
        message = user_message(key)
        super().__init__(f"{message} ({detail})" if detail else message)


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
