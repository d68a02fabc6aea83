"""File I/O dispatched on the file extension.

``.txt`` files are read as UTF-8 text and ``.pdf`` files are written by
rendering text through :mod:`textpdf.render`.  Any other extension raises
:class:`~textpdf.utils.errors.UnsupportedFormatError`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .dirs import ensure_directory
from .readers.txt_reader import read_text
from .writers.pdf_writer import write_pdf

_READERS: dict[str, Callable[..., str]] = {".txt": read_text}
_WRITERS: dict[str, Callable[..., Any]] = {".pdf": write_pdf}


def get_extension(path: str | os.PathLike[str]) -> str:
    """Lower-cased suffix of ``path`` including the dot, or ``""``."""

    return Path(path).suffix.lower()


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Return the text content of ``path``."""

    ext = get_extension(path)
    if ext not in _READERS:
        raise UnsupportedFormatError(f"Unsupported input extension: '{ext}'")
    return _READERS[ext](path, **kwargs)


def write_file(path: str | os.PathLike[str], text: str, **kwargs: Any) -> Any:
    """Write ``text`` to ``path`` and return what the format writer returns.

    For ``.pdf`` that is the :class:`~textpdf.render.assembler.RenderResult`;
    ``config`` and ``resolver`` keyword arguments are passed through.
    """

    ext = get_extension(path)
    if ext not in _WRITERS:
        raise UnsupportedFormatError(f"Unsupported output extension: '{ext}'")
    return _WRITERS[ext](path, text, **kwargs)


__all__ = ["get_extension", "read_file", "write_file", "ensure_directory"]
