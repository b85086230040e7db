from __future__ import annotations

"""Helper for rendering x-axis date labels"""


from typing import List

from .chart_styler import ChartStyler, px_to_points
from .config import AxisLabelRenderConfig
from .plot_geometry import format_date_label

X_LABEL_GID = "x-label"


class AxisLabelRenderer:
    """Writes ``month/day`` labels under the selected points"""

    def __init__(self, *, styler: ChartStyler):
        self.styler = styler

    def render_x_labels(self, *, config: AxisLabelRenderConfig) -> List[str]:
        styler = self.styler
        baseline = config.plot_rect.bottom + styler.x_label_baseline_px
        labels: List[str] = []
        for index in config.label_indices:
            x, _ = config.positions[index]
            label = format_date_label(config.points[index].date)
            text = config.ax.text(
                x,
                baseline,
                label,
                ha="center",
                va="baseline",
                color=styler.label_color,
                fontsize=px_to_points(styler.x_label_font_px),
                family=styler.font_family,
                zorder=5,
            )
            text.set_gid(X_LABEL_GID)
            labels.append(label)
        return labels
