"""Tests for scripts/render_progress_chart.py."""

import json
from datetime import date

import pytest

from progress_chart.config import ConfigurationError
from scripts import render_progress_chart


def test_renders_point_list_to_png(tmp_path, capsys):
    source = tmp_path / "points.json"
    source.write_text(json.dumps([{"date": "2024-01-01", "value": 2}, {"date": "2024-01-02", "value": 5}]))
    output = tmp_path / "chart.png"

    exit_code = render_progress_chart.main(["--input", str(source), "--output", str(output), "--dpr", "2", "--width", "300"])

    assert exit_code == 0
    assert output.read_bytes()[:4] == b"\x89PNG"
    assert "Wrote" in capsys.readouterr().out

def test_renders_study_history_payload(tmp_path):
    source = tmp_path / "progress.json"
    source.write_text(
        json.dumps(
            {
                "totalPoints": 23,
                "studyHistory": [
                    {"type": "lesson", "title": "Alphabet", "date": "2024-05-09T10:00:00Z"},
                    {"type": "quiz", "title": "Alphabet", "date": "2024-05-10T10:00:00Z", "score": 100},
                ],
            }
        )
    )
    output = tmp_path / "history.png"

    exit_code = render_progress_chart.main(
        ["--input", str(source), "--output", str(output), "--metric", "points", "--days", "3", "--end-date", "2024-05-10"]
    )

    assert exit_code == 0
    assert output.exists()

def test_empty_series_fails(tmp_path):
    source = tmp_path / "empty.json"
    source.write_text("[]")

    exit_code = render_progress_chart.main(["--input", str(source), "--output", str(tmp_path / "none.png")])

    assert exit_code == 1
    assert not (tmp_path / "none.png").exists()

def test_missing_input_fails(tmp_path):
    exit_code = render_progress_chart.main(["--input", str(tmp_path / "missing.json"), "--output", str(tmp_path / "x.png")])

    assert exit_code == 1

def test_load_series_rejects_unknown_payload():
    with pytest.raises(ConfigurationError):
        render_progress_chart.load_series("nope", metric="activity", days=7, end_date=date(2024, 1, 1))
