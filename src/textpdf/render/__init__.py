"""PDF rendering on top of ReportLab."""

from .assembler import EffectiveFont, RenderResult, build_pdf, render_pdf, select_font
from .document import PdfDocument

__all__ = ["EffectiveFont", "RenderResult", "PdfDocument", "build_pdf", "render_pdf", "select_font"]
