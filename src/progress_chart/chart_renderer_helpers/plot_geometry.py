from __future__ import annotations

"""Pure layout math for progress charts, in logical (CSS) pixels."""


import math
from datetime import date
from typing import List, Sequence, Tuple

from progress_chart.chart_renderer.contexts import ChartPadding, ChartScale, GridlineLevel, PlotRect

VALUE_FLOOR = 10.0
GRIDLINE_INTERVALS = 5
MAX_X_LABELS = 7


def round_half_up(value: float) -> int:
    """Round like the browser's ``Math.round`` (halves go towards +inf)."""
    return int(math.floor(value + 0.5))


def compute_plot_rect(width_px: float, height_px: float, padding: ChartPadding) -> PlotRect:
    return PlotRect(
        left=padding.left,
        top=padding.top,
        width=width_px - padding.left - padding.right,
        height=height_px - padding.top - padding.bottom,
    )


def compute_scale(values: Sequence[float], plot_rect: PlotRect, *, floor: float = VALUE_FLOOR) -> ChartScale:
    """Vertical scale never compresses below ``floor``; one point spans the full width."""
    max_value = max([*values, floor])
    intervals = len(values) - 1
    if intervals <= 0:
        intervals = 1
    return ChartScale(
        max_value=max_value,
        x_scale=plot_rect.width / intervals,
        y_scale=plot_rect.height / max_value,
    )


def point_positions(values: Sequence[float], plot_rect: PlotRect, scale: ChartScale) -> List[Tuple[float, float]]:
    return [
        (
            plot_rect.left + index * scale.x_scale,
            plot_rect.top + plot_rect.height - value * scale.y_scale,
        )
        for index, value in enumerate(values)
    ]


def gridline_levels(plot_rect: PlotRect, max_value: float, *, intervals: int = GRIDLINE_INTERVALS) -> List[GridlineLevel]:
    """Equally spaced levels from the plot top (max_value) down to the floor (0)."""
    step_px = plot_rect.height / intervals
    step_value = max_value / intervals
    return [
        GridlineLevel(
            y=plot_rect.top + step_px * index,
            label=round_half_up(max_value - step_value * index),
        )
        for index in range(intervals + 1)
    ]


def x_label_indices(point_count: int, *, max_labels: int = MAX_X_LABELS) -> List[int]:
    """Indices that get a date label: every ``ceil(n/max)``-th plus the last one.

    When the last index pushes the count over ``max_labels`` the stepped
    label nearest to it is dropped, so at most ``max_labels`` are returned.
    """
    if point_count <= 0:
        return []
    step = math.ceil(point_count / max_labels)
    indices = [index for index in range(point_count) if index % step == 0 or index == point_count - 1]
    if len(indices) > max_labels:
        del indices[-2]
    return indices


def format_date_label(day: date) -> str:
    return f"{day.month}/{day.day}"
