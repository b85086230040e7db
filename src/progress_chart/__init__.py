"""Progress chart rendering for the learning dashboard."""

from __future__ import annotations

from typing import Any

from .chart_renderer.contexts import (
    DEFAULT_COLOR,
    DEFAULT_HEIGHT_PX,
    ChartGeometry,
    DataPoint,
    RenderConfig,
    Series,
    as_series,
)
from .chart_renderer.exceptions import InsufficientDataError, SurfaceNotReadyError
from .chart_renderer_helpers.drawing_surface import DrawingSurface
from .config import ConfigurationError

__all__ = [
    "ChartGeometry",
    "ChartRenderer",
    "ChartView",
    "ConfigurationError",
    "DEFAULT_COLOR",
    "DEFAULT_HEIGHT_PX",
    "DataPoint",
    "DrawingSurface",
    "InsufficientDataError",
    "RenderConfig",
    "Series",
    "StudyHistoryItem",
    "SurfaceNotReadyError",
    "as_series",
    "build_daily_series",
    "render_chart",
]


def __getattr__(name: str) -> Any:
    """Lazy loading for modules that import the renderer runtime."""
    if name in ("ChartRenderer", "render_chart"):
        from .chart_renderer import runtime

        return getattr(runtime, name)
    if name == "ChartView":
        from .chart_view import ChartView

        return ChartView
    if name in ("StudyHistoryItem", "build_daily_series"):
        from . import study_history

        return getattr(study_history, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
