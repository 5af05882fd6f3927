# speedometer/core/io.py
"""
Load and validate gauge configuration from JSON.
Accepts snake_case field names or camelCase gauge props
(e.g. "maxSegmentLabels", "customSegmentStops"); "12px" sizes are accepted.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

from speedometer.core.error_codes import INVALID_CONFIG_FILE, UNKNOWN_FIELD, ConfigurationError
from speedometer.core.types import GaugeConfig

logger = logging.getLogger(__name__)

# Props whose camelCase name does not map mechanically onto a field.
_ALIASES: dict[str, str] = {
    "majorTicks": "segments",
    "labelFontSize": "label_font_size_px",
    "valueTextFontSize": "value_font_size_px",
    "fontFamily": "font_family",
}

_FIELD_NAMES = {f.name for f in fields(GaugeConfig)} - {"label_format"}
_PX_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*px\s*$")


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _coerce(name: str, value: Any) -> Any:
    if name.endswith("_px") and isinstance(value, str):
        m = _PX_RE.match(value)
        if m is None:
            raise ConfigurationError(INVALID_CONFIG_FILE, f"{name}={value!r} is not a px size")
        return float(m.group(1))
    return value


def normalize_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase/snake_case keys onto GaugeConfig field names."""
    out: dict[str, Any] = {}
    for key, value in data.items():
        name = _ALIASES.get(key) or (key if key in _FIELD_NAMES else _snake(key))
        if name not in _FIELD_NAMES:
            raise ConfigurationError(UNKNOWN_FIELD, key)
        out[name] = _coerce(name, value)
    return out


def config_from_dict(data: Mapping[str, Any], **overrides: Any) -> GaugeConfig:
    """
    Build a validated GaugeConfig from a mapping. Keyword overrides use field
    names and win over data. Raises ConfigurationError.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(INVALID_CONFIG_FILE, f"expected an object, got {type(data).__name__}")
    kwargs = normalize_keys(data)
    kwargs.update(overrides)
    try:
        return GaugeConfig(**kwargs)
    except ConfigurationError:
        raise
    except (TypeError, ValueError) as e:
        # Wrong JSON types (e.g. a string where a number is expected).
        raise ConfigurationError(INVALID_CONFIG_FILE, str(e)) from e


def load_config(path: str | Path, repo_root: Path | None = None, **overrides: Any) -> GaugeConfig:
    """
    Load a gauge configuration JSON file and return a validated GaugeConfig.
    Raises FileNotFoundError if path is missing, ConfigurationError if invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Config file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(INVALID_CONFIG_FILE, f"{resolved.name}: {e}") from e
    config = config_from_dict(data, **overrides)
    logger.info(f"Loaded gauge config from {resolved}")
    return config
