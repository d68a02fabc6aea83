"""Shared fixtures: isolated font search paths and a recording page surface."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from textpdf.config import ConfigModel, load_config
from textpdf.layout.engine import LayoutParams


class RecordingSurface:
    """Page surface that records calls instead of drawing."""

    def __init__(self) -> None:
        self.pages = 0
        self.calls: list[tuple[int, float, float, str]] = []

    def add_page(self) -> None:
        self.pages += 1

    def draw_text(self, x: float, y: float, text: str) -> None:
        self.calls.append((self.pages - 1, x, y, text))


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def small_params() -> LayoutParams:
    """100pt page, 10pt margins and lines, 5pt blank gap: 8 lines per page."""

    return LayoutParams(
        page_width=100.0,
        page_height=100.0,
        top_margin=10.0,
        left_margin=10.0,
        bottom_margin=10.0,
        line_height=10.0,
        blank_gap=5.0,
    )


@pytest.fixture
def no_font_cfg() -> ConfigModel:
    """Defaults with an empty font search path."""

    cfg = load_config(env={})
    cfg.font.search_dirs = []
    return cfg


@pytest.fixture
def vera_ttf() -> Path:
    """A real TrueType file shipped with ReportLab."""

    import reportlab

    path = Path(reportlab.__file__).resolve().parent / "fonts" / "Vera.ttf"
    if not path.is_file():
        pytest.skip("ReportLab's bundled Vera.ttf is not available")
    return path


@pytest.fixture
def verabd_ttf(vera_ttf: Path) -> Path:
    path = vera_ttf.with_name("VeraBd.ttf")
    if not path.is_file():
        pytest.skip("ReportLab's bundled VeraBd.ttf is not available")
    return path


@pytest.fixture
def font_dir_with_vera(tmp_path: Path, vera_ttf: Path) -> Path:
    font_dir = tmp_path / "font"
    font_dir.mkdir()
    shutil.copy(vera_ttf, font_dir / "NotoSans-Regular.ttf")
    return font_dir
