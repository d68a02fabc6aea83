"""Unit conversion and line-by-line pagination."""

from .engine import (
    LayoutCursor,
    LayoutParams,
    PageSurface,
    Placement,
    TextLayout,
    layout_text,
    render_layout,
)
from .units import mm_to_pt

__all__ = [
    "LayoutCursor",
    "LayoutParams",
    "PageSurface",
    "Placement",
    "TextLayout",
    "layout_text",
    "render_layout",
    "mm_to_pt",
]
