from __future__ import annotations

"""Raster drawing surface backed by a matplotlib figure on the Agg canvas"""


import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple, Union

from progress_chart.chart_renderer.dependencies import Figure, FigureCanvasAgg, np
from progress_chart.chart_renderer.exceptions import SurfaceNotReadyError
from progress_chart.config import ConfigurationError, env_float

from .chart_styler import CSS_PIXELS_PER_INCH

if TYPE_CHECKING:
    from matplotlib.axes import Axes

logger = logging.getLogger("progress_chart.chart_renderer")

DEVICE_PIXEL_RATIO_ENV = "PROGRESS_CHART_DEVICE_PIXEL_RATIO"
_SIZE_EPSILON = 1e-6


def resolve_device_pixel_ratio(explicit: Optional[float] = None) -> float:
    """Return the host display density, falling back to 1 when unknown."""
    ratio = explicit
    if ratio is None:
        try:
            ratio = env_float(DEVICE_PIXEL_RATIO_ENV, or_value=1.0)
        except ConfigurationError as exc:
            logger.warning("Ignoring %s: %s", DEVICE_PIXEL_RATIO_ENV, exc)
            ratio = 1.0
    if not ratio or ratio <= 0:
        return 1.0
    return float(ratio)


class DrawingSurface:
    """A host-owned raster surface.

    The backing buffer is ``container_width_px * dpr`` by ``height_px * dpr``
    physical pixels; the axes span the whole figure with data limits
    ``[0, width] x [height, 0]`` so callers draw in logical pixels with y
    growing downward.
    """

    def __init__(
        self,
        container_width_px: Optional[float],
        *,
        device_pixel_ratio: Optional[float] = None,
    ):
        self.container_width_px = container_width_px
        self.device_pixel_ratio = resolve_device_pixel_ratio(device_pixel_ratio)
        self._figure: Optional[Figure] = None
        self._canvas: Optional[FigureCanvasAgg] = None
        self._axes: Optional[Axes] = None
        self._logical_size: Tuple[float, float] = (0.0, 0.0)

    @property
    def is_ready(self) -> bool:
        return self.container_width_px is not None and self.container_width_px > 0

    @property
    def logical_size(self) -> Tuple[float, float]:
        return self._logical_size

    @property
    def pixel_size(self) -> Tuple[int, int]:
        if self._canvas is None:
            return (0, 0)
        width, height = self._canvas.get_width_height()
        return (int(width), int(height))

    @property
    def axes(self) -> Axes:
        if self._axes is None:
            raise SurfaceNotReadyError("Drawing surface has not been sized yet")
        return self._axes

    def resize(self, height_px: float) -> Axes:
        """Rebuild the backing buffer for the current container width and density."""
        if not self.is_ready:
            raise SurfaceNotReadyError(f"Container width {self.container_width_px!r} is not laid out")

        width_px = float(self.container_width_px)
        height_px = float(height_px)
        dpi = CSS_PIXELS_PER_INCH * self.device_pixel_ratio
        # Truncate like a canvas width assignment; the epsilon survives Agg's int() of figsize * dpi.
        physical_width = int(width_px * self.device_pixel_ratio) + _SIZE_EPSILON
        physical_height = int(height_px * self.device_pixel_ratio) + _SIZE_EPSILON
        figure = Figure(
            figsize=(physical_width / dpi, physical_height / dpi),
            dpi=dpi,
            facecolor="none",
        )
        canvas = FigureCanvasAgg(figure)
        axes = figure.add_axes((0.0, 0.0, 1.0, 1.0))

        self.release()
        self._figure = figure
        self._canvas = canvas
        self._axes = axes
        self._logical_size = (width_px, height_px)
        self._configure_axes(axes)
        return axes

    def clear(self) -> None:
        """Remove every drawn artist, leaving a transparent surface."""
        axes = self.axes
        axes.cla()
        self._configure_axes(axes)

    def _configure_axes(self, axes: Axes) -> None:
        width_px, height_px = self._logical_size
        axes.set_axis_off()
        axes.set_xlim(0, width_px)
        axes.set_ylim(height_px, 0)
        axes.set_autoscale_on(False)

    def to_rgba(self) -> np.ndarray:
        """Rasterize and return an ``(height, width, 4)`` uint8 copy of the buffer."""
        if self._canvas is None:
            raise SurfaceNotReadyError("Drawing surface has not been sized yet")
        self._canvas.draw()
        return np.asarray(self._canvas.buffer_rgba()).copy()

    def save_png(self, path: Union[str, Path]) -> Path:
        if self._figure is None:
            raise SurfaceNotReadyError("Drawing surface has not been sized yet")
        target = Path(path)
        self._figure.savefig(target, format="png", dpi=self._figure.dpi, facecolor="none", edgecolor="none")
        return target

    def release(self) -> None:
        """Free the current figure's artists."""
        if self._figure is None:
            return
        try:
            self._figure.clear()
        except (RuntimeError, ValueError, TypeError) as cleanup_error:
            logger.warning("Error during matplotlib figure cleanup: %s", cleanup_error)
        self._figure = None
        self._canvas = None
        self._axes = None
