from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .contexts import (
    DEFAULT_COLOR,
    DEFAULT_HEIGHT_PX,
    ChartGeometry,
    ChartPadding,
    ChartScale,
    DataPoint,
    GridlineLevel,
    PlotRect,
    RenderConfig,
    Series,
    as_series,
)
from .exceptions import InsufficientDataError, SurfaceNotReadyError

if TYPE_CHECKING:
    from .runtime import ChartRenderer, render_chart

LOGGER_NAME = "progress_chart.chart_renderer"
logger = logging.getLogger(LOGGER_NAME)

__all__ = [
    "ChartGeometry",
    "ChartPadding",
    "ChartRenderer",
    "ChartScale",
    "DEFAULT_COLOR",
    "DEFAULT_HEIGHT_PX",
    "DataPoint",
    "GridlineLevel",
    "InsufficientDataError",
    "PlotRect",
    "RenderConfig",
    "Series",
    "SurfaceNotReadyError",
    "as_series",
    "logger",
    "render_chart",
]


def __getattr__(name: str) -> Any:
    """Lazy loading for the renderer, whose helpers import this package's contexts."""
    if name == "ChartRenderer":
        from .runtime import ChartRenderer

        return ChartRenderer
    if name == "render_chart":
        from .runtime import render_chart

        return render_chart
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
