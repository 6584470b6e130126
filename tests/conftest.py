"""
Pytest fixtures for Census Scatter tests.

Provides:
- Small in-memory datasets
- CSV files on disk (fixture files and temp files)
- Renderer and rendered chart instances on the headless Agg backend
"""
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from census_scatter.config.chart_config import SurfaceConfig
from census_scatter.models.data_types import Record
from census_scatter.rendering.renderer import ScatterChartRenderer


# ==================== PATHS ====================

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ==================== DATASET FIXTURES ====================

@pytest.fixture
def two_state_dataset():
    """
    Alabama and Alaska.

    Poverty max (19.1) exceeds healthcare max (11.9), so the y domain
    must reach 19.1.
    """
    return (
        Record(state="Alabama", abbr="AL", poverty=19.1, healthcare=11.9),
        Record(state="Alaska", abbr="AK", poverty=9.7, healthcare=8.0),
    )


@pytest.fixture
def healthcare_dominant_dataset():
    """Healthcare max (24.5) exceeds poverty max (15.0)."""
    return (
        Record(state="Texas", abbr="TX", poverty=15.0, healthcare=24.5),
        Record(state="Utah", abbr="UT", poverty=9.2, healthcare=12.1),
        Record(state="Iowa", abbr="IA", poverty=11.8, healthcare=5.0),
    )


@pytest.fixture
def dataset_with_nan():
    """One record whose poverty value failed to coerce."""
    return (
        Record(state="Alabama", abbr="AL", poverty=19.1, healthcare=11.9),
        Record(state="Nowhere", abbr="NW", poverty=float("nan"), healthcare=10.0),
        Record(state="Alaska", abbr="AK", poverty=9.7, healthcare=8.0),
    )


# ==================== SURFACE FIXTURES ====================

@pytest.fixture
def surface():
    """Default 750x500 surface: plot area 610x420."""
    return SurfaceConfig()


# ==================== FILE FIXTURES ====================

@pytest.fixture
def sample_csv_path():
    """Path to the six-state fixture CSV (with extra columns)."""
    return FIXTURES_DIR / "sample_census.csv"


@pytest.fixture
def missing_column_csv_path():
    """Path to a CSV without the healthcare column."""
    return FIXTURES_DIR / "missing_column.csv"


@pytest.fixture
def temp_csv(tmp_path):
    """
    Factory writing CSV text to a temp file.

    Returns:
        Callable taking the file contents and returning its Path
    """
    def _write(text, name="data.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


# ==================== RENDERING FIXTURES ====================

@pytest.fixture
def renderer(surface):
    """ScatterChartRenderer on the default surface."""
    return ScatterChartRenderer(surface=surface)


@pytest.fixture
def two_state_chart(renderer, two_state_dataset):
    """Rendered chart of the two-state dataset, closed after the test."""
    chart = renderer.render(two_state_dataset)
    yield chart
    chart.close()


@pytest.fixture(autouse=True)
def close_figures():
    """Close any figure a test left open."""
    yield
    plt.close("all")
