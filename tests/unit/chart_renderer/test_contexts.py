"""Tests for chart_renderer.contexts module."""

from datetime import date, datetime

import pytest

from progress_chart.chart_renderer.contexts import (
    DEFAULT_COLOR,
    DEFAULT_HEIGHT_PX,
    DataPoint,
    RenderConfig,
    as_series,
    coerce_calendar_date,
)
from progress_chart.config import ConfigurationError


class TestCoerceCalendarDate:
    """Tests for coerce_calendar_date."""

    def test_accepts_date_datetime_and_iso_strings(self) -> None:
        """Test every supported input resolves to the calendar date."""
        assert coerce_calendar_date(date(2024, 5, 1)) == date(2024, 5, 1)
        assert coerce_calendar_date(datetime(2024, 5, 1, 23, 59)) == date(2024, 5, 1)
        assert coerce_calendar_date("2024-05-01") == date(2024, 5, 1)
        assert coerce_calendar_date("2024-05-01T23:30:00.000Z") == date(2024, 5, 1)

    def test_rejects_malformed_string(self) -> None:
        """Test unparseable strings raise ValueError."""
        with pytest.raises(ValueError, match="Unrecognised date"):
            coerce_calendar_date("yesterday")

    def test_rejects_other_types(self) -> None:
        """Test non-date values raise TypeError."""
        with pytest.raises(TypeError):
            coerce_calendar_date(20240501)


class TestDataPoint:
    """Tests for DataPoint."""

    def test_normalizes_fields(self) -> None:
        """Test date and value are normalized on construction."""
        point = DataPoint(date="2024-02-03", value=4)

        assert point.date == date(2024, 2, 3)
        assert point.value == 4.0
        assert isinstance(point.value, float)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), "inf"])
    def test_rejects_non_finite_values(self, value) -> None:
        """Test infinities and NaN are refused at construction."""
        with pytest.raises(ValueError, match="Non-finite value"):
            DataPoint(date="2024-02-03", value=value)

    def test_from_mapping(self) -> None:
        """Test construction from a {date, value} mapping."""
        assert DataPoint.from_mapping({"date": "2024-02-03", "value": 2.5}) == DataPoint(date(2024, 2, 3), 2.5)

    def test_as_series_mixes_points_and_mappings(self) -> None:
        """Test as_series keeps order and accepts both forms."""
        series = as_series([DataPoint(date(2024, 1, 1), 1), {"date": "2024-01-02", "value": 2}])

        assert series == (DataPoint(date(2024, 1, 1), 1), DataPoint(date(2024, 1, 2), 2))
        assert as_series([]) == ()


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self) -> None:
        """Test default color and height."""
        config = RenderConfig(title="Streak")

        assert config.color == DEFAULT_COLOR == "#6366f1"
        assert config.height_px == DEFAULT_HEIGHT_PX == 200

    def test_from_environment_reads_overrides(self, monkeypatch) -> None:
        """Test PROGRESS_CHART_* variables fill unset fields."""
        monkeypatch.setenv("PROGRESS_CHART_COLOR", "#10b981")
        monkeypatch.setenv("PROGRESS_CHART_HEIGHT_PX", "240")

        config = RenderConfig.from_environment("Scores")

        assert config == RenderConfig(title="Scores", color="#10b981", height_px=240)

    def test_from_environment_prefers_explicit_values(self, monkeypatch) -> None:
        """Test explicit arguments win over the environment."""
        monkeypatch.setenv("PROGRESS_CHART_COLOR", "#10b981")

        config = RenderConfig.from_environment("Scores", color="#f59e0b", height_px=150)

        assert config.color == "#f59e0b"
        assert config.height_px == 150

    def test_from_environment_rejects_non_positive_height(self, monkeypatch) -> None:
        """Test a zero height is a configuration error."""
        monkeypatch.setenv("PROGRESS_CHART_HEIGHT_PX", "0")

        with pytest.raises(ConfigurationError, match="height_px"):
            RenderConfig.from_environment("Scores")
