"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``textpdf`` namespace.
    - Allow optional verbose/debug mode.

Notes/Edge cases:
    - Configuration is idempotent; repeated calls only adjust the level.
    - The handler looks ``sys.stderr`` up at emit time so that redirected
      streams (test runners, ``typer.testing.CliRunner``) are honoured.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "textpdf"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        """The current ``sys.stderr``; read-only, assignments are ignored."""
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package root logger.

    ``verbose`` lowers the threshold from ``WARNING`` to ``DEBUG``.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler, _StderrHandler):
            handler.setLevel(level)
            return root
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(level)
    root.addHandler(handler)
    return root


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
