"""Host-side binding that keeps a surface in sync with its series and config."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from progress_chart.chart_renderer.contexts import ChartGeometry, RenderConfig, Series, as_series
from progress_chart.chart_renderer.exceptions import InsufficientDataError
from progress_chart.chart_renderer.runtime import ChartRenderer
from progress_chart.chart_renderer_helpers.chart_saver import ChartSaver
from progress_chart.chart_renderer_helpers.drawing_surface import DrawingSurface

logger = logging.getLogger("progress_chart.chart_renderer")


class ChartView:
    """Observes ``(series, config)`` and re-renders synchronously when either changes.

    Changes are detected by value, so handing in an equal series or config is
    a no-op. Rendering also happens once on :meth:`mount` and whenever the
    container is resized.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        config: RenderConfig,
        series: Iterable[Any] = (),
        *,
        renderer: Optional[ChartRenderer] = None,
    ):
        self.surface = surface
        self._config = config
        self._series: Series = as_series(series)
        self._renderer = renderer or ChartRenderer()
        self._geometry: Optional[ChartGeometry] = None
        self._mounted = False
        self.render_count = 0

    @property
    def series(self) -> Series:
        return self._series

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def geometry(self) -> Optional[ChartGeometry]:
        return self._geometry

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def mount(self) -> Optional[ChartGeometry]:
        self._mounted = True
        return self._render()

    def update(
        self,
        *,
        series: Optional[Iterable[Any]] = None,
        config: Optional[RenderConfig] = None,
    ) -> bool:
        """Apply new inputs; return True when they changed and a render ran."""
        changed = False
        if series is not None:
            new_series = as_series(series)
            if new_series != self._series:
                self._series = new_series
                changed = True
        if config is not None and config != self._config:
            self._config = config
            changed = True

        if changed and self._mounted:
            self._render()
        return changed and self._mounted

    def resize(self, container_width_px: Optional[float]) -> Optional[ChartGeometry]:
        """Record a new laid-out width and redraw to fit it."""
        self.surface.container_width_px = container_width_px
        if not self._mounted:
            return None
        return self._render()

    def save_png(self, path: Optional[Union[str, Path]] = None) -> Path:
        if self._geometry is None:
            raise InsufficientDataError(f"Chart {self._config.title!r} has nothing rendered to save")
        return ChartSaver().save_surface(self.surface, path)

    def _render(self) -> Optional[ChartGeometry]:
        self._geometry = self._renderer.render(self.surface, self._series, self._config)
        self.render_count += 1
        return self._geometry
