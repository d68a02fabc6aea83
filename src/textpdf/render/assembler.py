"""Document assembly: font selection, layout and serialization.

:func:`build_pdf` drives one conversion end to end:

1. create an A4 (by default) :class:`~textpdf.render.document.PdfDocument`;
2. resolve a script-capable font and activate it, or fall back to the
   built-in font with a warning;
3. start the first page and replay the text layout onto the document;
4. serialize to bytes.

Font problems never abort a conversion.  Not finding a font, failing to load
it and failing to activate it all end in the same :class:`EffectiveFont`
value with ``fallback=True``.  Every other failure propagates.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..config import ConfigModel, load_config
from ..fonts.resolver import FontResolver
from ..layout.engine import LayoutParams, TextLayout, layout_text, render_layout
from ..utils.errors import FontError, OutputWriteError
from ..utils.logging import get_logger
from .document import PdfDocument

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class EffectiveFont:
    """The font text is actually drawn with."""

    name: str
    size: float
    path: Path | None = None
    fallback: bool = False


@dataclass(slots=True, frozen=True)
class RenderResult:
    """Serialized PDF together with the layout and font that produced it."""

    data: bytes
    layout: TextLayout
    font: EffectiveFont

    @property
    def page_count(self) -> int:
        return self.layout.page_count


def resolver_from_config(cfg: ConfigModel) -> FontResolver:
    return FontResolver(cfg.font.search_dirs, cfg.font.candidates, explicit_path=cfg.font.path)


def select_font(
    doc: PdfDocument,
    cfg: ConfigModel,
    resolver: FontResolver | None = None,
) -> EffectiveFont:
    """Register and activate the best available font on ``doc``."""

    font_cfg = cfg.font
    resolver = resolver or resolver_from_config(cfg)
    font_path = resolver.resolve()

    if font_path is None:
        logger.warning(
            "No script-capable font file found; using built-in font '%s'. "
            "Place a TTF file (e.g. NotoSansJP-Regular.ttf) in ./font to render non-Latin text.",
            font_cfg.fallback,
        )
    else:
        logger.info("Using font file '%s'", font_path)
        try:
            registered = doc.register_font(font_cfg.logical_name, font_path)
            doc.set_font(registered, font_cfg.size)
        except FontError as exc:
            logger.warning("%s; using built-in font '%s'", exc, font_cfg.fallback)
        else:
            logger.debug("Activated font '%s' from %s", registered, font_path.name)
            return EffectiveFont(registered, font_cfg.size, font_path)

    doc.set_font(font_cfg.fallback, font_cfg.size)
    return EffectiveFont(font_cfg.fallback, font_cfg.size, None, fallback=True)


def render_pdf(
    text: str,
    cfg: ConfigModel | None = None,
    *,
    title: str | None = None,
    resolver: FontResolver | None = None,
) -> RenderResult:
    """Lay ``text`` out and return the serialized PDF with its layout."""

    cfg = cfg or load_config()
    params = LayoutParams.from_config(cfg)
    doc = PdfDocument(
        params.page_width,
        params.page_height,
        title=cfg.metadata.title or title,
        author=cfg.metadata.author,
    )
    font = select_font(doc, cfg, resolver)

    layout = layout_text(text, params)
    render_layout(layout, doc)
    data = doc.to_bytes()
    logger.debug(
        "Rendered %d line(s) on %d page(s) with font '%s'",
        len(layout.placements),
        layout.page_count,
        font.name,
    )
    return RenderResult(data=data, layout=layout, font=font)


def build_pdf(
    text: str,
    cfg: ConfigModel | None = None,
    *,
    title: str | None = None,
    resolver: FontResolver | None = None,
) -> bytes:
    """Return ``text`` rendered as PDF bytes."""

    return render_pdf(text, cfg, title=title, resolver=resolver).data


def write_pdf_bytes(path: str | os.PathLike[str], data: bytes) -> None:
    """Write ``data`` to ``path``, replacing any existing file."""

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise OutputWriteError(f"Failed to write PDF '{path}': {exc}") from exc


__all__ = [
    "EffectiveFont",
    "RenderResult",
    "resolver_from_config",
    "select_font",
    "render_pdf",
    "build_pdf",
    "write_pdf_bytes",
]
