"""Line/area progress chart renderer."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from progress_chart.chart_renderer_helpers.axis_label_renderer import AxisLabelRenderer
from progress_chart.chart_renderer_helpers.chart_styler import ChartStyler
from progress_chart.chart_renderer_helpers.chart_title_applier import ChartTitleApplier
from progress_chart.chart_renderer_helpers.color_resolver import ColorResolver
from progress_chart.chart_renderer_helpers.config import (
    AxisLabelRenderConfig,
    GridlineRenderConfig,
    SeriesRenderConfig,
    TitleRenderConfig,
)
from progress_chart.chart_renderer_helpers.drawing_surface import DrawingSurface
from progress_chart.chart_renderer_helpers.gridline_renderer import GridlineRenderer
from progress_chart.chart_renderer_helpers.plot_geometry import (
    compute_plot_rect,
    compute_scale,
    gridline_levels,
    point_positions,
    x_label_indices,
)
from progress_chart.chart_renderer_helpers.point_marker_renderer import PointMarkerRenderer
from progress_chart.chart_renderer_helpers.primary_series_renderer import PrimarySeriesRenderer

from .contexts import ChartGeometry, ChartPadding, RenderConfig, Series, as_series
from .exceptions import SurfaceNotReadyError

LOGGER_NAME = "progress_chart.chart_renderer"
logger = logging.getLogger(LOGGER_NAME)


class ChartRenderer:
    """Paints a labelled line/area chart of a series onto a drawing surface.

    Rendering is synchronous and touches nothing but the surface it is given,
    so one renderer may serve any number of surfaces.
    """

    def __init__(
        self,
        *,
        styler: Optional[ChartStyler] = None,
        padding: Optional[ChartPadding] = None,
    ):
        self.styler = styler or ChartStyler()
        self.padding = padding or ChartPadding()
        self._color_resolver = ColorResolver()
        self._gridline_renderer = GridlineRenderer(styler=self.styler)
        self._series_renderer = PrimarySeriesRenderer(styler=self.styler)
        self._marker_renderer = PointMarkerRenderer(styler=self.styler)
        self._axis_label_renderer = AxisLabelRenderer(styler=self.styler)
        self._title_applier = ChartTitleApplier(styler=self.styler)

    def render(
        self,
        surface: DrawingSurface,
        series: Iterable[Any],
        config: RenderConfig,
    ) -> Optional[ChartGeometry]:
        """Render ``series`` onto ``surface``.

        Returns the computed layout, or ``None`` when nothing was drawn: the
        surface has no context yet, the series is empty, or a point could not
        be read. Never raises for those cases.
        """
        try:
            points = as_series(series)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping chart %r: unreadable series (%s)", config.title, exc)
            return None

        try:
            surface.resize(config.height_px)
        except SurfaceNotReadyError as exc:
            logger.debug("Skipping chart %r: %s", config.title, exc)
            return None
        surface.clear()

        if not points:
            logger.debug("Chart %r has no data; surface cleared", config.title)
            return None

        geometry = self._draw(surface, points, config)
        logger.debug(
            "Rendered chart %r: %s points at %sx%s px (dpr %s)",
            config.title,
            len(points),
            geometry.surface_width_px,
            geometry.surface_height_px,
            surface.device_pixel_ratio,
        )
        return geometry

    def _draw(self, surface: DrawingSurface, points: Series, config: RenderConfig) -> ChartGeometry:
        width_px, height_px = surface.logical_size
        ax = surface.axes
        values = [point.value for point in points]

        plot_rect = compute_plot_rect(width_px, height_px, self.padding)
        scale = compute_scale(values, plot_rect)
        levels = gridline_levels(plot_rect, scale.max_value)
        positions = point_positions(values, plot_rect, scale)
        label_indices = x_label_indices(len(points))
        rgba = self._color_resolver.resolve(config.color)

        self._gridline_renderer.render_gridlines(
            config=GridlineRenderConfig(ax=ax, plot_rect=plot_rect, levels=levels),
        )
        series_config = SeriesRenderConfig(ax=ax, positions=positions, plot_rect=plot_rect, rgba=rgba)
        self._series_renderer.render_primary_series(config=series_config)
        self._marker_renderer.render_markers(config=series_config)
        x_labels = self._axis_label_renderer.render_x_labels(
            config=AxisLabelRenderConfig(
                ax=ax,
                points=points,
                positions=positions,
                plot_rect=plot_rect,
                label_indices=label_indices,
            ),
        )
        self._title_applier.apply_title(
            config=TitleRenderConfig(ax=ax, title=config.title, padding=self.padding),
        )

        return ChartGeometry(
            surface_width_px=width_px,
            surface_height_px=height_px,
            plot_rect=plot_rect,
            scale=scale,
            points=tuple(positions),
            gridlines=tuple(levels),
            x_label_indices=tuple(label_indices),
            x_labels=tuple(x_labels),
        )


_DEFAULT_RENDERER: Optional[ChartRenderer] = None


def render_chart(surface: DrawingSurface, series: Iterable[Any], config: RenderConfig) -> Optional[ChartGeometry]:
    """Render with a shared default renderer."""
    global _DEFAULT_RENDERER
    if _DEFAULT_RENDERER is None:
        _DEFAULT_RENDERER = ChartRenderer()
    return _DEFAULT_RENDERER.render(surface, series, config)
