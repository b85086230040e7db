"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from progress_chart.chart_renderer.contexts import RenderConfig
from progress_chart.chart_renderer_helpers.drawing_surface import DrawingSurface
from progress_chart.config import runtime


@pytest.fixture(autouse=True)
def isolate_chart_environment(monkeypatch):
    """Keep host .env files and PROGRESS_CHART_* variables out of tests."""
    for name in (
        "PROGRESS_CHART_COLOR",
        "PROGRESS_CHART_HEIGHT_PX",
        "PROGRESS_CHART_DEVICE_PIXEL_RATIO",
        "PROGRESS_CHART_LOG_DIR",
        "LOG_APPEND",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    yield
    runtime._DEFAULT_VALUES = None


@pytest.fixture
def render_config() -> RenderConfig:
    return RenderConfig(title="Daily activity", color="#6366f1", height_px=200)


@pytest.fixture
def surface_factory():
    """Build fresh surfaces, releasing their figures after the test."""
    surfaces = []

    def _make(width_px=470, device_pixel_ratio=1.0) -> DrawingSurface:
        surface = DrawingSurface(width_px, device_pixel_ratio=device_pixel_ratio)
        surfaces.append(surface)
        return surface

    yield _make
    for surface in surfaces:
        surface.release()
