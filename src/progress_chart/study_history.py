"""Daily progress series built from study history records."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional

from progress_chart.chart_renderer.contexts import DataPoint, Series, coerce_calendar_date
from progress_chart.chart_renderer_helpers.plot_geometry import round_half_up
from progress_chart.config import ConfigurationError

logger = logging.getLogger(__name__)

ITEM_TYPES = ("lesson", "quiz", "flashcard")
METRICS = ("activity", "score", "points")

LESSON_POINTS = 10
FLASHCARD_POINTS = 3
QUIZ_POINTS_PER_CORRECT = 5


@dataclass(frozen=True)
class StudyHistoryItem:
    """A single lesson, quiz or flashcard session from the learner's history."""

    type: str
    title: str
    date: date
    lesson_id: Optional[str] = None
    score: Optional[float] = None
    duration: Optional[float] = None

    def __post_init__(self) -> None:
        if self.type not in ITEM_TYPES:
            raise ConfigurationError.invalid_value("type", self.type, f"Expected one of {', '.join(ITEM_TYPES)}")
        object.__setattr__(self, "date", coerce_calendar_date(self.date))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "StudyHistoryItem":
        """Build from a stored progress record (camelCase ``lessonId``)."""
        lesson_id = mapping.get("lessonId", mapping.get("lesson_id"))
        return cls(
            type=mapping["type"],
            title=mapping.get("title", ""),
            date=mapping["date"],
            lesson_id=lesson_id,
            score=mapping.get("score"),
            duration=mapping.get("duration"),
        )


def _item_points(item: StudyHistoryItem) -> float:
    if item.type == "lesson":
        return LESSON_POINTS
    if item.type == "flashcard":
        return FLASHCARD_POINTS
    if item.score is None:
        return 0
    # History keeps the quiz percentage, not the raw correct count.
    return round_half_up(item.score * QUIZ_POINTS_PER_CORRECT / 100)


def _aggregate(metric: str, items: List[StudyHistoryItem]) -> float:
    if metric == "activity":
        return float(len(items))
    if metric == "points":
        return float(sum(_item_points(item) for item in items))
    scores = [item.score for item in items if item.type == "quiz" and item.score is not None]
    if not scores:
        return 0.0
    return float(round_half_up(sum(scores) / len(scores)))


def build_daily_series(
    items: Iterable[Any],
    *,
    metric: str = "activity",
    days: int = 7,
    end_date: Optional[date] = None,
) -> Series:
    """Return one point per day for the ``days`` days ending at ``end_date``, oldest first.

    Days without history are zero-filled and items outside the window are
    ignored. ``items`` may hold :class:`StudyHistoryItem` objects or stored
    mappings.
    """
    if metric not in METRICS:
        raise ConfigurationError.invalid_value("metric", metric, f"Expected one of {', '.join(METRICS)}")
    if days < 1:
        raise ConfigurationError.invalid_value("days", days, "Window must cover at least one day")

    last_day = end_date or date.today()
    first_day = last_day - timedelta(days=days - 1)

    by_day: Dict[date, List[StudyHistoryItem]] = defaultdict(list)
    skipped = 0
    for raw in items:
        item = raw if isinstance(raw, StudyHistoryItem) else StudyHistoryItem.from_mapping(raw)
        if first_day <= item.date <= last_day:
            by_day[item.date].append(item)
        else:
            skipped += 1
    if skipped:
        logger.debug("Ignored %s history items outside %s..%s", skipped, first_day, last_day)

    return tuple(
        DataPoint(date=day, value=_aggregate(metric, by_day.get(day, [])))
        for day in (first_day + timedelta(days=offset) for offset in range(days))
    )
