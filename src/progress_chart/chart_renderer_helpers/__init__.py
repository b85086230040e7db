"""
Helper classes for ChartRenderer

Each helper draws one layer of the chart or owns one piece of its layout.
"""

from .axis_label_renderer import AxisLabelRenderer
from .chart_saver import ChartSaver
from .chart_styler import ChartStyler, px_to_points
from .chart_title_applier import ChartTitleApplier
from .color_resolver import ColorResolver
from .drawing_surface import DrawingSurface, resolve_device_pixel_ratio
from .gridline_renderer import GridlineRenderer
from .point_marker_renderer import PointMarkerRenderer
from .primary_series_renderer import PrimarySeriesRenderer

__all__ = [
    "AxisLabelRenderer",
    "ChartSaver",
    "ChartStyler",
    "ChartTitleApplier",
    "ColorResolver",
    "DrawingSurface",
    "GridlineRenderer",
    "PointMarkerRenderer",
    "PrimarySeriesRenderer",
    "px_to_points",
    "resolve_device_pixel_ratio",
]
