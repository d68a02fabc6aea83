"""Font file lookup.

:class:`FontResolver` probes an ordered list of directories and, inside each
directory, an ordered list of candidate file names.  The first combination
that exists as a regular file wins.  Directory order is the outer loop, so a
less preferred file in an earlier directory beats a more preferred file in a
later one.

Only ``stat`` calls are made; font contents are never read here.  Nothing
found is reported as ``None`` so callers can fall back to a built-in font.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path

from ..utils.logging import get_logger

logger = get_logger(__name__)

PathLikeStr = str | os.PathLike[str]

DEFAULT_CANDIDATES: tuple[str, ...] = (
    "static/NotoSansJP-Regular.ttf",
    "NotoSansJP-Regular.ttf",
    "NotoSansJP-VariableFont_wght.ttf",
    "static/NotoSansJP-Medium.ttf",
    "static/NotoSansJP-Light.ttf",
    "static/NotoSansJP-Bold.ttf",
    "static/NotoSansJP-SemiBold.ttf",
    "static/NotoSansJP-ExtraLight.ttf",
    "static/NotoSansJP-ExtraBold.ttf",
    "static/NotoSansJP-Thin.ttf",
    "static/NotoSansJP-Black.ttf",
    "NotoSansJP-Medium.ttf",
    "NotoSansJP-Light.ttf",
    "NotoSansJP-Bold.ttf",
    "NotoSansJP-SemiBold.ttf",
    "NotoSansCJK-Regular.ttf",
    "NotoSansCJK.ttf",
    "NotoSansJP.ttf",
    "NotoSans-Regular.ttf",
    "ZenOldMincho-Regular.ttf",
    "ZenOldMincho-Medium.ttf",
    "ZenOldMincho-SemiBold.ttf",
    "ZenOldMincho-Bold.ttf",
    "ZenOldMincho-Black.ttf",
)

PROJECT_FONT_DIRS: tuple[str, ...] = ("./font", "./fonts")


def default_search_dirs(
    platform: str | None = None,
    env: Mapping[str, str] | None = None,
) -> list[Path]:
    """Return project, user and system font directories for ``platform``.

    Project-local directories come first, then the user's personal font
    directory, then system-wide locations.  Directories are not checked for
    existence.
    """

    platform = platform or sys.platform
    environ = env if env is not None else os.environ
    dirs = [Path(d) for d in PROJECT_FONT_DIRS]
    home = environ.get("HOME") or environ.get("USERPROFILE")

    if platform == "darwin":
        if home:
            dirs.append(Path(home) / "Library" / "Fonts")
        dirs += [Path("/Library/Fonts"), Path("/System/Library/Fonts")]
    elif platform.startswith("win"):
        local = environ.get("LOCALAPPDATA")
        if local:
            dirs.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
        windir = environ.get("WINDIR") or environ.get("SystemRoot") or r"C:\Windows"
        dirs.append(Path(windir) / "Fonts")
    else:
        if home:
            dirs += [Path(home) / ".local" / "share" / "fonts", Path(home) / ".fonts"]
        dirs += [
            Path("/usr/local/share/fonts"),
            Path("/usr/share/fonts"),
            Path("/usr/share/fonts/truetype/noto"),
            Path("/usr/share/fonts/opentype/noto"),
        ]
    return dirs


def _is_font_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


class FontResolver:
    """Locate the most preferred font file on a prioritized search path."""

    def __init__(
        self,
        search_dirs: Sequence[PathLikeStr] | None = None,
        candidates: Sequence[str] | None = None,
        *,
        explicit_path: PathLikeStr | None = None,
    ) -> None:
        self.search_dirs = (
            [Path(d) for d in search_dirs] if search_dirs is not None else default_search_dirs()
        )
        self.candidates = list(candidates) if candidates is not None else list(DEFAULT_CANDIDATES)
        self.explicit_path = Path(explicit_path) if explicit_path is not None else None

    def iter_candidates(self) -> Iterator[Path]:
        """Yield every probed path in priority order."""

        for directory in self.search_dirs:
            for name in self.candidates:
                yield directory / name

    def resolve(self) -> Path | None:
        """Return the first existing font path, or ``None`` when nothing matches."""

        if self.explicit_path is not None:
            if _is_font_file(self.explicit_path):
                return self.explicit_path
            logger.warning("Configured font '%s' does not exist; searching defaults", self.explicit_path)

        for path in self.iter_candidates():
            if _is_font_file(path):
                logger.debug("Found font file %s", path)
                return path
        return None


def find_font(
    search_dirs: Sequence[PathLikeStr] | None = None,
    candidates: Sequence[str] | None = None,
) -> Path | None:
    """Shorthand for ``FontResolver(search_dirs, candidates).resolve()``."""

    return FontResolver(search_dirs, candidates).resolve()


__all__ = [
    "DEFAULT_CANDIDATES",
    "PROJECT_FONT_DIRS",
    "FontResolver",
    "default_search_dirs",
    "find_font",
]
