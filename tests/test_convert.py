"""Tests for the file-to-file conversion API."""

from __future__ import annotations

from pathlib import Path

import pytest

from textpdf.config import ConfigModel
from textpdf.convert import convert_file
from textpdf.render.document import PdfDocument
from textpdf.utils.errors import InputReadError, TextRenderError


def test_convert_creates_directory_and_pdf(tmp_path: Path, no_font_cfg: ConfigModel) -> None:
    src = tmp_path / "cli.txt"
    src.write_text("Hello\n\nWorld\n", encoding="utf-8")
    out_dir = tmp_path / "PDF"

    result = convert_file(src, out_dir, cfg=no_font_cfg)

    assert result.output_path == out_dir / "output.pdf"
    assert result.created_dir is True
    assert result.page_count == 1
    assert result.line_count == 2
    assert result.font.fallback is True
    assert result.output_path.read_bytes().startswith(b"%PDF")


def test_convert_uses_config_paths(
    tmp_path: Path, no_font_cfg: ConfigModel, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    Path("cli.txt").write_text("default paths", encoding="utf-8")
    result = convert_file(cfg=no_font_cfg)
    assert result.output_path == Path("PDF") / "output.pdf"
    assert (tmp_path / "PDF" / "output.pdf").is_file()


def test_convert_overwrites_existing_output(tmp_path: Path, no_font_cfg: ConfigModel) -> None:
    src = tmp_path / "in.txt"
    src.write_text("fresh", encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    (out_dir / "result.pdf").write_bytes(b"stale")

    result = convert_file(src, out_dir, "result.pdf", no_font_cfg)

    assert result.created_dir is False
    assert result.output_path.read_bytes().startswith(b"%PDF")


def test_missing_input_creates_nothing(tmp_path: Path, no_font_cfg: ConfigModel) -> None:
    out_dir = tmp_path / "PDF"
    with pytest.raises(InputReadError):
        convert_file(tmp_path / "missing.txt", out_dir, cfg=no_font_cfg)
    assert not out_dir.exists()


def test_render_failure_leaves_no_file(
    tmp_path: Path, no_font_cfg: ConfigModel, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_draw(self: PdfDocument, x: float, y: float, text: str) -> None:
        raise RuntimeError("glyph lookup failed")

    monkeypatch.setattr(PdfDocument, "draw_text", broken_draw)
    src = tmp_path / "in.txt"
    src.write_text("text", encoding="utf-8")
    with pytest.raises(TextRenderError):
        convert_file(src, tmp_path / "PDF", cfg=no_font_cfg)
    assert not (tmp_path / "PDF" / "output.pdf").exists()


def test_convert_with_real_font(
    tmp_path: Path, no_font_cfg: ConfigModel, font_dir_with_vera: Path
) -> None:
    no_font_cfg.font.search_dirs = [str(font_dir_with_vera)]
    src = tmp_path / "in.txt"
    src.write_text("Embedded font line", encoding="utf-8")
    result = convert_file(src, tmp_path / "PDF", cfg=no_font_cfg)
    assert result.font.fallback is False
    assert result.font.path == font_dir_with_vera / "NotoSans-Regular.ttf"
