"""Plain-text reader.

This module exposes :func:`read_text` which loads text files without performing
any content normalization.  Newline characters are preserved exactly as stored
on disk and UTF-8 byte-order marks (BOM) are handled transparently by using the
``"utf-8-sig"`` codec by default.

A missing file, a directory, a permission problem or undecodable bytes are all
reported as :class:`~textpdf.utils.errors.InputReadError`.
"""

from __future__ import annotations

import os

from ...utils.errors import InputReadError

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file as-is.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"`` so that a UTF-8 BOM
        is consumed when present.
    errors:
        Error handling strategy passed to :func:`open`.

    Returns
    -------
    str
        The file contents without any newline translation.

    Raises
    ------
    InputReadError
        If the file does not exist or cannot be read or decoded.
    """

    try:
        with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise InputReadError(f"Input file '{path}' not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Failed to read input file '{path}': {exc}") from exc


__all__ = ["read_text"]
