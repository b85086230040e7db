from __future__ import annotations

"""Helper for applying the chart title"""


from .chart_styler import ChartStyler, px_to_points
from .config import TitleRenderConfig

TITLE_GID = "title"


class ChartTitleApplier:
    """Places a bold title at the top-left, outside the plot rect"""

    def __init__(self, *, styler: ChartStyler):
        self.styler = styler

    def apply_title(self, *, config: TitleRenderConfig) -> None:
        text = config.ax.text(
            config.padding.left,
            self.styler.title_baseline_px,
            config.title,
            ha="left",
            va="baseline",
            color=self.styler.title_color,
            fontsize=px_to_points(self.styler.title_font_px),
            fontweight="bold",
            family=self.styler.font_family,
            zorder=5,
        )
        text.set_gid(TITLE_GID)
