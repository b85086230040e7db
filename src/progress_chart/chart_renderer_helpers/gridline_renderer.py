from __future__ import annotations

"""Helper for rendering horizontal gridlines and y-axis value labels"""


from .chart_styler import ChartStyler, px_to_points
from .config import GridlineRenderConfig

GRIDLINE_GID = "gridline"
Y_LABEL_GID = "y-label"


class GridlineRenderer:
    """Draws one gridline per level, labelled just left of the plot rect"""

    def __init__(self, *, styler: ChartStyler):
        self.styler = styler

    def render_gridlines(self, *, config: GridlineRenderConfig) -> None:
        styler = self.styler
        rect = config.plot_rect
        for level in config.levels:
            (line,) = config.ax.plot(
                [rect.left, rect.right],
                [level.y, level.y],
                color=styler.grid_color,
                linewidth=px_to_points(styler.grid_line_width_px),
                solid_capstyle="butt",
                zorder=1,
            )
            line.set_gid(GRIDLINE_GID)

            label = config.ax.text(
                rect.left - styler.y_label_gap_px,
                level.y + styler.y_label_baseline_px,
                str(level.label),
                ha="right",
                va="baseline",
                color=styler.label_color,
                fontsize=px_to_points(styler.y_label_font_px),
                family=styler.font_family,
                zorder=1,
            )
            label.set_gid(Y_LABEL_GID)
