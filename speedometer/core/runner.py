# speedometer/core/runner.py
"""
CLI entrypoint: load a gauge config (JSON file or preset), compute the layout,
write layout.json, gauge.svg and optionally PNG previews.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from speedometer.core.config import REPORTS_DIR
from speedometer.core.error_codes import ConfigurationError
from speedometer.core.io import load_config
from speedometer.core.presets import preset_config, preset_names
from speedometer.core.render_svg import export_gauge_svg
from speedometer.core.reporting import ensure_report_dir, write_layout_json, write_run_metadata_json

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Speedometer gauge geometry and label layout.")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--config", type=str, default=None, help="Gauge config JSON path (repo-relative)")
    src.add_argument("--preset", type=str, default="default", choices=preset_names(), help="Named demo gauge")
    p.add_argument("--value", type=float, default=None, help="Needle value (default: config value)")
    p.add_argument("--position-label", type=str, default=None, choices=("outer", "inner"), dest="position_label")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--png", action="store_true", help="Also render gauge.png and debug.png")
    p.add_argument("--scale", type=int, default=1, choices=(1, 2, 4), help="PNG resolution multiplier")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    overrides = {}
    if args.position_label:
        overrides["position_label"] = args.position_label
    try:
        if args.config:
            config = load_config(args.config, repo_root=repo_root, **overrides)
            source = args.config
        else:
            config = preset_config(args.preset, **overrides)
            source = f"preset:{args.preset}"
    except ConfigurationError as e:
        logger.error(f"Invalid configuration ({e.key}): {e}")
        return 2

    value = config.value if args.value is None else args.value
    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    outputs = [
        write_layout_json(report_dir, config, value=value),
        export_gauge_svg(config, report_dir / "gauge.svg", value=value),
        write_run_metadata_json(report_dir, args.run_name, source, value),
    ]
    if args.png:
        from speedometer.core.render import render_debug_png, render_gauge_png

        render_gauge_png(config, report_dir / "gauge.png", value=value, scale=args.scale)
        render_debug_png(config, report_dir / "debug.png", scale=args.scale)
        outputs += [report_dir / "gauge.png", report_dir / "debug.png"]

    for p in outputs:
        print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
