"""High-level conversion of a text file into a PDF file.

``convert_file`` runs the whole sequence: read the input, make sure the
output directory exists, render and write the PDF.  Each step raises its own
:mod:`textpdf.utils.errors` exception and nothing is written when rendering
fails.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import ConfigModel, load_config
from .fonts.resolver import FontResolver
from .io import ensure_directory, read_file, write_file
from .render.assembler import EffectiveFont, RenderResult


@dataclass(slots=True, frozen=True)
class ConversionResult:
    """Summary of a finished conversion."""

    output_path: Path
    page_count: int
    line_count: int
    font: EffectiveFont
    created_dir: bool = False


def convert_file(
    in_path: str | os.PathLike[str] | None = None,
    out_dir: str | os.PathLike[str] | None = None,
    out_name: str | None = None,
    cfg: ConfigModel | None = None,
    *,
    resolver: FontResolver | None = None,
) -> ConversionResult:
    """Convert ``in_path`` into ``out_dir/out_name``.

    Unset arguments fall back to the ``paths`` section of the configuration.
    """

    cfg = cfg or load_config()
    source = Path(in_path if in_path is not None else cfg.paths.input)
    target_dir = Path(out_dir if out_dir is not None else cfg.paths.output_dir)
    target = target_dir / (out_name or cfg.paths.output_name)

    text = read_file(source)
    created = ensure_directory(target_dir)
    result: RenderResult = write_file(target, text, config=cfg, resolver=resolver)

    return ConversionResult(
        output_path=target,
        page_count=result.page_count,
        line_count=len(result.layout.placements),
        font=result.font,
        created_dir=created,
    )


__all__ = ["ConversionResult", "convert_file"]
