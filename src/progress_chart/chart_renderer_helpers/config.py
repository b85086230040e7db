"""Configuration objects for chart renderer helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from progress_chart.chart_renderer.contexts import ChartPadding, DataPoint, GridlineLevel, PlotRect


@dataclass(frozen=True)
class GridlineRenderConfig:
    """Data for drawing gridlines and their value labels."""

    ax: Any  # Axes
    plot_rect: PlotRect
    levels: Sequence[GridlineLevel]


@dataclass(frozen=True)
class SeriesRenderConfig:
    """Data for drawing the series line, area fill and point markers."""

    ax: Any  # Axes
    positions: Sequence[Tuple[float, float]]
    plot_rect: PlotRect
    rgba: Tuple[float, float, float, float]


@dataclass(frozen=True)
class AxisLabelRenderConfig:
    """Data for drawing x-axis date labels."""

    ax: Any  # Axes
    points: Sequence[DataPoint]
    positions: Sequence[Tuple[float, float]]
    plot_rect: PlotRect
    label_indices: Sequence[int]


@dataclass(frozen=True)
class TitleRenderConfig:
    """Data for drawing the chart title."""

    ax: Any  # Axes
    title: str
    padding: ChartPadding
