"""PDF document writer.

Purpose:
    Export plain text into a paginated PDF file.

Key responsibilities:
    - Render text onto fixed-size pages via :mod:`textpdf.render`.
    - Replace any existing file at the destination.

Notes/Edge cases:
    - The whole document is rendered in memory first; a rendering failure
      leaves no partial file behind.
    - The output directory must already exist (see
      :func:`textpdf.io.dirs.ensure_directory`).
"""

from __future__ import annotations

import os
from pathlib import Path

from ...config import ConfigModel
from ...fonts.resolver import FontResolver
from ...render.assembler import RenderResult, render_pdf, write_pdf_bytes

PathLikeStr = os.PathLike[str]


def write_pdf(
    path: str | PathLikeStr,
    text: str,
    *,
    config: ConfigModel | None = None,
    resolver: FontResolver | None = None,
) -> RenderResult:
    """Render ``text`` and write it to ``path``.

    Returns the :class:`~textpdf.render.assembler.RenderResult` so callers can
    report page counts and the font that was used.
    """

    result = render_pdf(text, config, title=Path(path).name, resolver=resolver)
    write_pdf_bytes(path, result.data)
    return result


__all__ = ["write_pdf"]
