"""
Shared fixtures for curve-series tests.
"""

from datetime import date

import pytest

from curve_series.config import Settings, configure
from curve_series.core.models import AxisConfig, CaptureRegion, Curve, Margins


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Give every test fresh settings writing into a temporary directory."""
    for var in ("CURVE_SERIES_LOG_LEVEL", "CURVE_SERIES_EXPORTS_DIR"):
        monkeypatch.delenv(var, raising=False)
    settings = configure(Settings(exports_dir=tmp_path / "exports"))
    yield settings
    configure()


@pytest.fixture
def region():
    """The default 800x500 canvas and margins."""
    return CaptureRegion(
        width=800,
        height=500,
        margins=Margins(top=40, right=40, bottom=60, left=80),
    )


@pytest.fixture
def to_canvas(region):
    """Convert normalized coordinates into canvas pixel positions."""

    def _convert(nx: float, ny: float) -> tuple[float, float]:
        x = region.margins.left + nx * region.inner_width
        y = region.margins.top + (1 - ny) * region.inner_height
        return x, y

    return _convert


@pytest.fixture
def axis():
    """Default 0-100 value axis."""
    return AxisConfig(y_min=0.0, y_max=100.0)


@pytest.fixture
def start_2024():
    """Start of a leap-year window: 2024-04-01."""
    return date(2024, 4, 1)


@pytest.fixture
def tent_curve():
    """Curve rising from 0 to 1 at the midpoint and back to 0."""
    return Curve(name="Tent", points=[(0.0, 0.0), (0.5, 1.0), (1.0, 0.0)])


@pytest.fixture
def partial_curve():
    """Curve only covering the middle of the window."""
    return Curve(name="Partial", points=[(0.25, 0.2), (0.75, 0.8)])
