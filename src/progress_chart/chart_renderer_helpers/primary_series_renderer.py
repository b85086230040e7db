from __future__ import annotations

"""Helper for rendering the series polyline and the gradient area beneath it"""


import logging

from progress_chart.chart_renderer.dependencies import MplPath, PathPatch, np

from .chart_styler import ChartStyler, px_to_points
from .config import SeriesRenderConfig

logger = logging.getLogger("progress_chart.chart_renderer")

SERIES_LINE_GID = "series-line"
AREA_FILL_GID = "area-fill"


class PrimarySeriesRenderer:
    """Renders the series as a connected line over a fading area fill"""

    def __init__(self, *, styler: ChartStyler):
        self.styler = styler

    def render_primary_series(self, *, config: SeriesRenderConfig) -> None:
        """Draw line then area; a single point has neither a segment nor an area."""
        if len(config.positions) < 2:
            logger.debug("Single point series; skipping line and area")
            return
        self._render_line(config)
        self._render_area(config)

    def _render_line(self, config: SeriesRenderConfig) -> None:
        xs = [x for x, _ in config.positions]
        ys = [y for _, y in config.positions]
        (line,) = config.ax.plot(
            xs,
            ys,
            color=config.rgba,
            linewidth=px_to_points(self.styler.series_line_width_px),
            solid_capstyle="round",
            solid_joinstyle="round",
            zorder=2,
        )
        line.set_gid(SERIES_LINE_GID)

    def _render_area(self, config: SeriesRenderConfig) -> None:
        rect = config.plot_rect
        first_x = config.positions[0][0]
        last_x = config.positions[-1][0]
        verts = [*config.positions, (last_x, rect.bottom), (first_x, rect.bottom), config.positions[0]]
        codes = [MplPath.MOVETO] + [MplPath.LINETO] * (len(verts) - 2) + [MplPath.CLOSEPOLY]
        clip_patch = PathPatch(MplPath(verts, codes), facecolor="none", edgecolor="none")
        config.ax.add_patch(clip_patch)

        red, green, blue, alpha = config.rgba
        steps = self.styler.gradient_steps
        gradient = np.zeros((steps, 1, 4), dtype=float)
        gradient[..., 0] = red
        gradient[..., 1] = green
        gradient[..., 2] = blue
        gradient[:, 0, 3] = np.linspace(self.styler.area_top_alpha * alpha, 0.0, steps)

        # Row 0 sits at the plot top; y grows downward on this axes.
        image = config.ax.imshow(
            gradient,
            extent=(rect.left, rect.right, rect.bottom, rect.top),
            origin="upper",
            aspect="auto",
            interpolation="bilinear",
            zorder=3,
        )
        image.set_clip_path(clip_patch)
        image.set_gid(AREA_FILL_GID)
