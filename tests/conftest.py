"""Shared fixtures for the canirun test suite."""

import sys
from pathlib import Path

import pytest

# Ensure src/ is on the path so "import canirun" works when running from repo root.
repo_root = Path(__file__).resolve().parents[1]
src_path = repo_root / "src"
src_str = str(src_path)
if src_str not in sys.path:
    sys.path.insert(0, src_str)

from canirun.config.benchmarks import HardwareCatalog  # noqa: E402
from canirun.models import ComparisonItem, UserSpecs  # noqa: E402


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog():
    """The curated tables only; never touches data/ CSVs."""
    return HardwareCatalog.from_static()


@pytest.fixture
def gaming_user():
    return UserSpecs(
        os="Windows 11 Home",
        cpu="AMD Ryzen 7 5800X",
        gpu="NVIDIA GeForce RTX 3070",
        cpu_cores=8,
        cpu_speed_ghz=3.8,
        ram_gb=32,
        storage_gb=500,
    )


@pytest.fixture
def budget_user():
    return UserSpecs(
        os="Windows 10",
        cpu="Intel Core i5-2500K",
        gpu="NVIDIA GeForce GTX 750 Ti",
        cpu_cores=4,
        cpu_speed_ghz=3.3,
        ram_gb=8,
        storage_gb=120,
    )


@pytest.fixture
def steam_min_html():
    """Minimum tier as Steam's appdetails serves it."""
    return (
        '<strong>Minimum:</strong><br><ul class="bb_ul">'
        "<li><strong>OS:</strong> Windows® 10 64-bit<br></li>"
        "<li><strong>Processor:</strong> Intel Core i5-4460 or AMD FX-6300<br></li>"
        "<li><strong>Memory:</strong> 8 GB RAM<br></li>"
        "<li><strong>Graphics:</strong> NVIDIA GeForce GTX 960 or AMD Radeon R9 280<br></li>"
        "<li><strong>DirectX:</strong> Version 11<br></li>"
        "<li><strong>Storage:</strong> 50 GB available space</li></ul>"
    )


@pytest.fixture
def steam_rec_html():
    return (
        '<strong>Recommended:</strong><br><ul class="bb_ul">'
        "<li><strong>OS:</strong> Windows® 10 64-bit<br></li>"
        "<li><strong>Processor:</strong> Intel Core i7-8700K or AMD Ryzen 5 3600<br></li>"
        "<li><strong>Memory:</strong> 16 GB RAM<br></li>"
        "<li><strong>Graphics:</strong> NVIDIA GeForce GTX 1070 or AMD Radeon RX 5700<br></li>"
        "<li><strong>Storage:</strong> 50 GB SSD</li></ul>"
    )


@pytest.fixture
def make_item():
    """Factory for ComparisonItem rows in verdict tests."""
    def _make(label="Graphics", min_status="pass", rec_status="pass",
              min_value="GTX 960", rec_value="GTX 1070", user_value="RTX 3070"):
        return ComparisonItem(
            label=label,
            user_value=user_value,
            min_value=min_value,
            rec_value=rec_value,
            min_status=min_status,
            rec_status=rec_status,
        )
    return _make
