#!/usr/bin/env python3
"""Render a progress chart from a JSON file to a PNG.

Usage:
    python -m scripts.render_progress_chart --input points.json --output chart.png

The input is either a list of ``{"date": "YYYY-MM-DD", "value": n}`` objects
or a stored progress payload with a ``studyHistory`` list, which is first
aggregated into a daily series (see ``--metric`` and ``--days``).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional, Sequence

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from progress_chart.chart_renderer.contexts import RenderConfig, Series, as_series
from progress_chart.chart_renderer.exceptions import InsufficientDataError
from progress_chart.chart_renderer_helpers.drawing_surface import DrawingSurface
from progress_chart.chart_view import ChartView
from progress_chart.config import ConfigurationError
from progress_chart.logging_config import setup_logging
from progress_chart.study_history import METRICS, build_daily_series

logger = logging.getLogger(__name__)

DEFAULT_WIDTH_PX = 600


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--input", required=True, type=Path, help="JSON series or progress payload")
    parser.add_argument("--output", required=True, type=Path, help="PNG file to write")
    parser.add_argument("--title", default="Progress")
    parser.add_argument("--color", default=None, help="Series colour (defaults to PROGRESS_CHART_COLOR)")
    parser.add_argument("--height", type=int, default=None, help="Chart height in logical pixels")
    parser.add_argument("--width", type=float, default=DEFAULT_WIDTH_PX, help="Container width in logical pixels")
    parser.add_argument("--dpr", type=float, default=None, help="Device pixel ratio")
    parser.add_argument("--metric", choices=METRICS, default="activity")
    parser.add_argument("--days", type=int, default=7)
    parser.add_argument("--end-date", type=date.fromisoformat, default=None)
    return parser.parse_args(argv)


def load_series(payload: Any, *, metric: str, days: int, end_date: Optional[date]) -> Series:
    if isinstance(payload, dict) and "studyHistory" in payload:
        return build_daily_series(payload["studyHistory"], metric=metric, days=days, end_date=end_date)
    if isinstance(payload, list):
        return as_series(payload)
    raise ConfigurationError.invalid_format("input", type(payload).__name__, "a list of points or an object with studyHistory")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(user_friendly=True)

    try:
        payload = json.loads(args.input.read_text(encoding="utf-8"))
        series = load_series(payload, metric=args.metric, days=args.days, end_date=args.end_date)
        config = RenderConfig.from_environment(args.title, color=args.color, height_px=args.height)
        view = ChartView(DrawingSurface(args.width, device_pixel_ratio=args.dpr), config, series)
        view.mount()
        output = view.save_png(args.output)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, ConfigurationError, InsufficientDataError) as exc:
        logger.error("Failed to render %s: %s", args.input, exc)
        return 1

    print(f"Wrote {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
