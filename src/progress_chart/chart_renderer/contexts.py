from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional, Tuple

from progress_chart.config import ConfigurationError, env_int, env_str

DEFAULT_COLOR = "#6366f1"
DEFAULT_HEIGHT_PX = 200


def coerce_calendar_date(raw: Any) -> date:
    """Return the calendar date for a date, datetime or ISO-8601 string."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError as exc:
            raise ValueError(f"Unrecognised date {raw!r}; expected YYYY-MM-DD") from exc
    raise TypeError(f"Unsupported date value {raw!r}")


@dataclass(frozen=True)
class DataPoint:
    """One chronological sample of a progress series."""

    date: date
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", coerce_calendar_date(self.date))
        value = float(self.value)
        if not math.isfinite(value):
            raise ValueError(f"Non-finite value {value!r} on {self.date.isoformat()}")
        object.__setattr__(self, "value", value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "DataPoint":
        return cls(date=mapping["date"], value=mapping["value"])


Series = Tuple[DataPoint, ...]


def as_series(points: Iterable[Any]) -> Series:
    """Normalize DataPoints or ``{"date", "value"}`` mappings into a Series."""
    normalized = []
    for point in points:
        if isinstance(point, DataPoint):
            normalized.append(point)
        else:
            normalized.append(DataPoint.from_mapping(point))
    return tuple(normalized)


@dataclass(frozen=True)
class RenderConfig:
    """Display parameters for a progress chart.

    The container width is deliberately absent: it is read from the live
    surface on every render.
    """

    title: str
    color: str = DEFAULT_COLOR
    height_px: int = DEFAULT_HEIGHT_PX

    @classmethod
    def from_environment(
        cls,
        title: str,
        *,
        color: Optional[str] = None,
        height_px: Optional[int] = None,
    ) -> "RenderConfig":
        """Build a config whose unset fields fall back to PROGRESS_CHART_* variables."""
        resolved_color = color if color else env_str("PROGRESS_CHART_COLOR", or_value=DEFAULT_COLOR)
        resolved_height = height_px if height_px is not None else env_int("PROGRESS_CHART_HEIGHT_PX", or_value=DEFAULT_HEIGHT_PX)
        if resolved_height is None or resolved_height <= 0:
            raise ConfigurationError.invalid_value("height_px", resolved_height, "Chart height must be a positive integer")
        return cls(title=title, color=resolved_color or DEFAULT_COLOR, height_px=int(resolved_height))


@dataclass(frozen=True)
class ChartPadding:
    top: float = 20
    right: float = 20
    bottom: float = 40
    left: float = 50


@dataclass(frozen=True)
class PlotRect:
    """Padded region that holds gridlines, the series and its markers."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class ChartScale:
    max_value: float
    x_scale: float
    y_scale: float


@dataclass(frozen=True)
class GridlineLevel:
    y: float
    label: int


@dataclass(frozen=True)
class ChartGeometry:
    """Layout computed by the last completed render."""

    surface_width_px: float
    surface_height_px: float
    plot_rect: PlotRect
    scale: ChartScale
    points: Tuple[Tuple[float, float], ...]
    gridlines: Tuple[GridlineLevel, ...]
    x_label_indices: Tuple[int, ...]
    x_labels: Tuple[str, ...] = field(default=())
