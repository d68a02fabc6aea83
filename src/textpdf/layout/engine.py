"""Line-by-line pagination.

The engine turns raw text into :class:`Placement` records: one per
content-bearing line, each carrying the page index and the ``(x, y)`` position
at which the line is drawn.  ``y`` is measured downward from the top edge of
the page, in points.

Rules:

* Input is split on ``\\r\\n``, ``\\r`` and ``\\n``; consecutive breaks are kept
  as blank lines and nothing is trimmed.
* A blank (whitespace-only) line advances the cursor by the blank-line gap and
  never triggers a page break by itself.
* Before a content line is placed, if the cursor lies below
  ``page_height - bottom_margin - line_height`` a new page is started and the
  cursor returns to the top margin.
* Lines are placed verbatim at the left margin; there is no wrapping or
  truncation, however wide the text renders.

No PDF backend is involved here.  :func:`render_layout` replays a finished
layout onto anything implementing :class:`PageSurface`.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..utils.errors import TextRenderError
from .units import mm_to_pt

if TYPE_CHECKING:
    from ..config import ConfigModel

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(slots=True, frozen=True)
class LayoutParams:
    """Page geometry and spacing, all in points."""

    page_width: float
    page_height: float
    top_margin: float
    left_margin: float
    bottom_margin: float
    line_height: float
    blank_gap: float

    def __post_init__(self) -> None:
        if self.page_width <= 0 or self.page_height <= 0:
            raise ValueError("page dimensions must be positive")
        if self.line_height <= 0:
            raise ValueError("line_height must be positive")
        if min(self.top_margin, self.left_margin, self.bottom_margin, self.blank_gap) < 0:
            raise ValueError("margins and blank_gap must not be negative")

    @property
    def break_threshold(self) -> float:
        """Lowest cursor position at which a content line may still be placed."""

        return self.page_height - self.bottom_margin - self.line_height

    @classmethod
    def from_mm(
        cls,
        *,
        page_width: float,
        page_height: float,
        margin: float,
        bottom_margin: float,
        line_height: float,
        blank_gap: float,
    ) -> "LayoutParams":
        """Build parameters from millimetre measurements."""

        return cls(
            page_width=mm_to_pt(page_width),
            page_height=mm_to_pt(page_height),
            top_margin=mm_to_pt(margin),
            left_margin=mm_to_pt(margin),
            bottom_margin=mm_to_pt(bottom_margin),
            line_height=mm_to_pt(line_height),
            blank_gap=mm_to_pt(blank_gap),
        )

    @classmethod
    def from_config(cls, cfg: "ConfigModel") -> "LayoutParams":
        return cls.from_mm(
            page_width=cfg.page.width_mm,
            page_height=cfg.page.height_mm,
            margin=cfg.layout.margin_mm,
            bottom_margin=cfg.layout.bottom_margin_mm,
            line_height=cfg.layout.line_height_mm,
            blank_gap=cfg.layout.blank_line_gap_mm,
        )


@dataclass(slots=True)
class LayoutCursor:
    """Current write position: page index and top-down ``y``."""

    y: float
    page: int = 0

    def advance(self, dy: float) -> None:
        self.y += dy

    def next_page(self, top: float) -> None:
        self.page += 1
        self.y = top


@dataclass(slots=True, frozen=True)
class Placement:
    """A single line drawn at ``(x, y)`` on page ``page``."""

    page: int
    x: float
    y: float
    text: str


@dataclass(slots=True, frozen=True)
class TextLayout:
    """Result of :func:`layout_text`."""

    page_count: int
    placements: tuple[Placement, ...]

    def lines_on(self, page: int) -> list[Placement]:
        """Return the placements that fall on ``page``."""

        return [p for p in self.placements if p.page == page]


@runtime_checkable
class PageSurface(Protocol):
    """Minimal drawing target the layout can be replayed onto."""

    def add_page(self) -> None:
        """Start a new page; the first call starts the first page."""

        ...

    def draw_text(self, x: float, y: float, text: str) -> None:
        """Draw ``text`` with its baseline at top-down position ``(x, y)``."""

        ...


def split_lines(content: str) -> list[str]:
    """Split ``content`` on line breaks, keeping empty segments."""

    return _LINE_BREAK_RE.split(content)


def is_blank(line: str) -> bool:
    return line.strip() == ""


def iter_placements(
    content: str,
    params: LayoutParams,
    cursor: LayoutCursor | None = None,
) -> Iterator[Placement]:
    """Yield placements for ``content`` while mutating ``cursor``.

    A caller-supplied cursor can be inspected afterwards for the final page
    index and ``y``; by default a fresh cursor at the top margin is used.
    """

    if cursor is None:
        cursor = LayoutCursor(y=params.top_margin)
    threshold = params.break_threshold

    for line in split_lines(content):
        if is_blank(line):
            cursor.advance(params.blank_gap)
            continue
        if cursor.y > threshold:
            cursor.next_page(params.top_margin)
        yield Placement(page=cursor.page, x=params.left_margin, y=cursor.y, text=line)
        cursor.advance(params.line_height)


def layout_text(content: str, params: LayoutParams) -> TextLayout:
    """Lay out ``content`` and return the page count with all placements."""

    cursor = LayoutCursor(y=params.top_margin)
    placements = tuple(iter_placements(content, params, cursor))
    return TextLayout(page_count=cursor.page + 1, placements=placements)


def render_layout(layout: TextLayout, surface: PageSurface) -> None:
    """Replay ``layout`` onto ``surface``.

    The first page is started here.  Any exception raised while drawing a
    line is re-raised as :class:`TextRenderError`; nothing is skipped.
    """

    surface.add_page()
    current = 0
    for placement in layout.placements:
        while current < placement.page:
            surface.add_page()
            current += 1
        try:
            surface.draw_text(placement.x, placement.y, placement.text)
        except TextRenderError:
            raise
        except Exception as exc:
            raise TextRenderError(
                f"Failed to draw line on page {placement.page + 1}: {exc}",
                page=placement.page,
                text=placement.text,
            ) from exc
    while current < layout.page_count - 1:
        surface.add_page()
        current += 1


__all__ = [
    "LayoutParams",
    "LayoutCursor",
    "Placement",
    "TextLayout",
    "PageSurface",
    "split_lines",
    "is_blank",
    "iter_placements",
    "layout_text",
    "render_layout",
]
