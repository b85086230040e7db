"""Tests for study_history module."""

from datetime import date

import pytest

from progress_chart.config import ConfigurationError
from progress_chart.study_history import StudyHistoryItem, build_daily_series

END = date(2024, 5, 10)


def history():
    return [
        {"id": "quiz-3", "type": "quiz", "lessonId": "l2", "title": "Greetings", "date": "2024-05-10T08:30:00.000Z", "score": 80},
        {"id": "quiz-2", "type": "quiz", "lessonId": "l2", "title": "Greetings", "date": "2024-05-10T07:00:00.000Z", "score": 95},
        {"id": "flashcard-1", "type": "flashcard", "title": "Numbers", "date": "2024-05-08T19:00:00.000Z", "duration": 120},
        {"id": "lesson-1", "type": "lesson", "lessonId": "l1", "title": "Alphabet", "date": "2024-05-08T18:00:00.000Z"},
        {"id": "lesson-0", "type": "lesson", "lessonId": "l0", "title": "Intro", "date": "2024-04-01T18:00:00.000Z"},
    ]


class TestStudyHistoryItem:
    """Tests for StudyHistoryItem."""

    def test_from_mapping_reads_camel_case(self) -> None:
        """Test stored records map lessonId and the calendar date."""
        item = StudyHistoryItem.from_mapping(history()[0])

        assert item.lesson_id == "l2"
        assert item.date == date(2024, 5, 10)
        assert item.score == 80

    def test_rejects_unknown_type(self) -> None:
        """Test an unknown activity type is a configuration error."""
        with pytest.raises(ConfigurationError, match="type"):
            StudyHistoryItem(type="exam", title="Final", date=END)


class TestBuildDailySeries:
    """Tests for build_daily_series."""

    def test_activity_counts_per_day_oldest_first(self) -> None:
        """Test one zero-filled point per day ending at end_date."""
        series = build_daily_series(history(), days=5, end_date=END)

        assert [point.date for point in series] == [date(2024, 5, day) for day in range(6, 11)]
        assert [point.value for point in series] == [0, 0, 2, 0, 2]

    def test_score_is_rounded_mean_of_quizzes(self) -> None:
        """Test the score metric averages quiz scores half-up and ignores other items."""
        series = build_daily_series(history(), metric="score", days=3, end_date=END)

        assert [point.value for point in series] == [0, 0, 88]

    def test_points_follow_award_rules(self) -> None:
        """Test lessons earn 10, flashcards 3 and quizzes score * 5 / 100."""
        series = build_daily_series(history(), metric="points", days=3, end_date=END)

        assert [point.value for point in series] == [13, 0, 9]

    def test_accepts_item_objects(self) -> None:
        """Test StudyHistoryItem objects are used as-is."""
        items = [StudyHistoryItem(type="lesson", title="Intro", date=END)]

        assert build_daily_series(items, days=1, end_date=END)[0].value == 1

    def test_defaults_to_today(self) -> None:
        """Test the window ends today when no end date is given."""
        series = build_daily_series([], days=2)

        assert series[-1].date == date.today()
        assert len(series) == 2

    def test_rejects_unknown_metric(self) -> None:
        """Test an unsupported metric raises."""
        with pytest.raises(ConfigurationError, match="metric"):
            build_daily_series([], metric="streak")

    def test_rejects_empty_window(self) -> None:
        """Test a window shorter than one day raises."""
        with pytest.raises(ConfigurationError, match="days"):
            build_daily_series([], days=0)
