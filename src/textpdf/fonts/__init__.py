"""Font discovery on the local filesystem."""

from .resolver import DEFAULT_CANDIDATES, FontResolver, default_search_dirs, find_font

__all__ = ["DEFAULT_CANDIDATES", "FontResolver", "default_search_dirs", "find_font"]
