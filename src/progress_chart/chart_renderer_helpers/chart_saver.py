from __future__ import annotations

"""Helper for saving rendered chart surfaces to PNG files"""


import logging
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .drawing_surface import DrawingSurface

logger = logging.getLogger("progress_chart.chart_renderer")


class ChartSaver:
    """Saves drawing surfaces to PNG files"""

    def save_surface(self, surface: DrawingSurface, path: Optional[Union[str, Path]] = None) -> Path:
        """Save to ``path``, or to a new temporary file when none is given, and return the path."""
        if path is None:
            with tempfile.NamedTemporaryFile(delete=False, suffix=".png") as temp_file:
                path = temp_file.name
        target = surface.save_png(path)
        width, height = surface.pixel_size
        logger.debug("Saved %sx%s chart to %s", width, height, target)
        return target
