from __future__ import annotations

"""Helper for rendering circular point markers"""


from progress_chart.chart_renderer.dependencies import Circle

from .chart_styler import ChartStyler, px_to_points
from .config import SeriesRenderConfig

POINT_MARKER_GID = "point-marker"


class PointMarkerRenderer:
    """Draws a white, colour-ringed circle on every data point"""

    def __init__(self, *, styler: ChartStyler):
        self.styler = styler

    def render_markers(self, *, config: SeriesRenderConfig) -> int:
        for x, y in config.positions:
            marker = Circle(
                (x, y),
                radius=self.styler.marker_radius_px,
                facecolor=self.styler.marker_fill_color,
                edgecolor=config.rgba,
                linewidth=px_to_points(self.styler.marker_line_width_px),
                zorder=4,
            )
            marker.set_gid(POINT_MARKER_GID)
            config.ax.add_patch(marker)
        return len(config.positions)
