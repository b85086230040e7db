from __future__ import annotations

import matplotlib

matplotlib.use("Agg")  # Surfaces own their canvases; no GUI backend
import matplotlib.colors as mcolors
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import Circle, PathPatch
from matplotlib.path import Path as MplPath

__all__ = [
    "mcolors",
    "np",
    "FigureCanvasAgg",
    "Figure",
    "Circle",
    "PathPatch",
    "MplPath",
]
