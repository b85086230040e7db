from __future__ import annotations

"""Helper for chart styling and configuration"""


CSS_PIXELS_PER_INCH = 96.0
POINTS_PER_INCH = 72.0


class ChartStyler:
    """Provides chart styling configuration"""

    def __init__(self):
        # Palette
        self.grid_color = "#e2e8f0"
        self.label_color = "#64748b"
        self.title_color = "#1e293b"
        self.marker_fill_color = "#ffffff"

        # Strokes, in logical pixels
        self.grid_line_width_px = 1
        self.series_line_width_px = 3
        self.marker_radius_px = 4
        self.marker_line_width_px = 2

        # Type, in logical pixels
        self.font_family = "sans-serif"
        self.y_label_font_px = 12
        self.x_label_font_px = 11
        self.title_font_px = 14

        # Label offsets from the plot rect
        self.y_label_gap_px = 10
        self.y_label_baseline_px = 4
        self.x_label_baseline_px = 20
        self.title_baseline_px = 15

        # Area gradient alpha at the plot top (0x40 of 0xff)
        self.area_top_alpha = 0x40 / 0xFF
        self.gradient_steps = 256


def px_to_points(value_px: float) -> float:
    """Convert logical (CSS) pixels to the points matplotlib sizes strokes and fonts in."""
    return value_px * POINTS_PER_INCH / CSS_PIXELS_PER_INCH
