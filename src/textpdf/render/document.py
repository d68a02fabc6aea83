"""ReportLab-backed page surface.

:class:`PdfDocument` wraps :class:`reportlab.pdfgen.canvas.Canvas` behind the
small interface the layout engine needs: start a page, place a string at a
top-down coordinate, serialize to bytes.  Pages are append-only.  The document
is rendered into an in-memory buffer so nothing touches the filesystem until
the caller writes the returned bytes.
"""

from __future__ import annotations

import hashlib
import io
import os
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from ..utils.errors import FontActivateError, FontLoadError, TextRenderError


def font_registry_name(name: str, path: str | os.PathLike[str]) -> str:
    """Return the ReportLab registry name for the font file at ``path``."""

    digest = hashlib.sha1(str(Path(path).resolve()).encode("utf-8")).hexdigest()[:8]
    return f"{name}-{digest}"


class PdfDocument:
    """A fixed-geometry PDF under construction."""

    def __init__(
        self,
        width: float,
        height: float,
        *,
        title: str | None = None,
        author: str | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.page_count = 0
        self._font: tuple[str, float] | None = None
        self._finalized = False
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(width, height))
        self._canvas.setCreator("textpdf")
        if title:
            self._canvas.setTitle(title)
        if author:
            self._canvas.setAuthor(author)

    @property
    def font(self) -> tuple[str, float] | None:
        """The active ``(name, size)`` pair, if any."""

        return self._font

    def register_font(self, name: str, path: str | os.PathLike[str]) -> str:
        """Load the TrueType file at ``path`` and return its registered name.

        ReportLab keeps fonts in a process-wide registry and ignores a second
        registration under an existing name, so the registered name is
        ``name`` suffixed with a digest of the resolved file path.
        """

        registered = font_registry_name(name, path)
        if registered in pdfmetrics.getRegisteredFontNames():
            return registered
        try:
            pdfmetrics.registerFont(TTFont(registered, os.fspath(path)))
        except Exception as exc:
            raise FontLoadError(f"Failed to load font '{path}': {exc}") from exc
        return registered

    def set_font(self, name: str, size: float) -> None:
        """Make ``name`` at ``size`` points the font for subsequent text."""

        try:
            self._canvas.setFont(name, size)
        except Exception as exc:
            raise FontActivateError(f"Failed to activate font '{name}': {exc}") from exc
        self._font = (name, size)

    def add_page(self) -> None:
        """Start a new page; the first call starts the first page."""

        self._ensure_open()
        if self.page_count > 0:
            self._canvas.showPage()
        self.page_count += 1
        # showPage() resets the graphics state, including the font
        if self._font is not None:
            self._canvas.setFont(*self._font)

    def draw_text(self, x: float, y: float, text: str) -> None:
        """Draw ``text`` with its baseline ``y`` points below the top edge."""

        self._ensure_open()
        if self.page_count == 0:
            raise TextRenderError("Cannot draw text before a page has been added", text=text)
        self._canvas.drawString(x, self.height - y, text)

    def to_bytes(self) -> bytes:
        """Finalize the document and return the serialized PDF."""

        if not self._finalized:
            if self.page_count == 0:
                self.add_page()
            self._canvas.showPage()
            self._canvas.save()
            self._finalized = True
        return self._buffer.getvalue()

    def _ensure_open(self) -> None:
        if self._finalized:
            raise RuntimeError("document has already been serialized")


__all__ = ["PdfDocument", "font_registry_name"]
