from __future__ import annotations

"""Helper for turning colour tokens into RGBA tuples"""


import logging
from typing import Tuple

from progress_chart.chart_renderer.contexts import DEFAULT_COLOR
from progress_chart.chart_renderer.dependencies import mcolors

logger = logging.getLogger("progress_chart.chart_renderer")

RGBA = Tuple[float, float, float, float]


class ColorResolver:
    """Resolves series colour tokens, falling back to the default colour"""

    def __init__(self, *, fallback_color: str = DEFAULT_COLOR):
        self.fallback_color = fallback_color

    def resolve(self, color: str) -> RGBA:
        try:
            return mcolors.to_rgba(color)
        except (TypeError, ValueError) as exc:
            logger.warning("Unrecognised chart color %r, using %s: %s", color, self.fallback_color, exc)
            return mcolors.to_rgba(self.fallback_color)
