"""Output directory handling."""

from __future__ import annotations

import os
from pathlib import Path

from ..utils.errors import DirectoryCreateError
from ..utils.logging import get_logger

logger = get_logger(__name__)


def ensure_directory(path: str | os.PathLike[str], mode: int = 0o755) -> bool:
    """Create ``path`` (with parents) unless it already exists.

    Returns ``True`` when the directory was created.  An existing directory is
    left untouched; an existing non-directory raises
    :class:`~textpdf.utils.errors.DirectoryCreateError`.
    """

    dir_path = Path(path)
    if dir_path.is_dir():
        return False
    try:
        dir_path.mkdir(mode=mode, parents=True)
    except FileExistsError as exc:
        if dir_path.is_dir():
            return False
        raise DirectoryCreateError(f"'{dir_path}' exists and is not a directory") from exc
    except OSError as exc:
        raise DirectoryCreateError(f"Failed to create directory '{dir_path}': {exc}") from exc
    logger.info("Created directory '%s'", dir_path)
    return True


__all__ = ["ensure_directory"]
