"""Typer-based command line interface for text to PDF conversion.

The ``convert`` command reads a UTF-8 text file (``cli.txt`` by default),
creates the output directory when needed (``PDF`` by default) and writes a
paginated PDF (``output.pdf``) into it.  A script-capable TrueType font is
looked up in ``./font``, ``./fonts`` and the platform font directories; when
none is usable the built-in Helvetica font is used and a warning is logged.

Exit codes
----------
0 success
3 I/O error (input missing/unreadable, directory creation, output write)
4 configuration error
5 render error (a line could not be placed on a page)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer

from .config import ConfigModel, load_config
from .convert import convert_file
from .utils.errors import (
    DirectoryCreateError,
    InputReadError,
    OutputWriteError,
    TextRenderError,
    UnsupportedFormatError,
)
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="textpdf",
    help="Convert plain text into a paginated PDF. Use 'textpdf convert' to run a conversion.",
)

EXIT_IO = 3
EXIT_CONFIG = 4
EXIT_RENDER = 5


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(f"[ERROR] {msg}", err=True)
    raise typer.Exit(code)


def _apply_overrides(cfg: ConfigModel, *, font: Path | None) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if font is not None:
        new_cfg.font.path = str(font)
    return new_cfg


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the textpdf command group."""
    pass


@app.command()
def convert(
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--in", "--input", help="Input text file [default: cli.txt]"
    ),
    out_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out-dir", help="Output directory, created if missing [default: PDF]"
    ),
    out_name: Optional[str] = typer.Option(  # noqa: B008
        None, "--out-name", help="Output file name [default: output.pdf]"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    font: Optional[Path] = typer.Option(  # noqa: B008
        None, "--font", help="TrueType font file tried before the search path"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Convert a text file into a PDF document."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
    except Exception as exc:  # pragma: no cover - diverse
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])
    cfg = _apply_overrides(cfg, font=font)
    if verbose:
        typer.echo("Loaded config", err=True)

    source = in_path if in_path is not None else Path(cfg.paths.input)
    if verbose:
        typer.echo(f"Reading '{source}'", err=True)

    try:
        with Timing() as t_conv:
            result = convert_file(source, out_dir, out_name, cfg)
    except (InputReadError, UnsupportedFormatError, DirectoryCreateError, OutputWriteError) as exc:
        _safe_exit(EXIT_IO, str(exc))
    except TextRenderError as exc:
        _safe_exit(EXIT_RENDER, str(exc))
    except Exception as exc:  # pragma: no cover - unexpected
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(EXIT_RENDER, msg)

    if verbose:
        if result.created_dir:
            typer.echo(f"Created directory '{result.output_path.parent}'", err=True)
        font_desc = f"{result.font.name} (built-in)" if result.font.fallback else str(result.font.path)
        typer.echo(f"Font: {font_desc}", err=True)
        typer.echo(
            f"Placed {result.line_count} line(s) on {result.page_count} page(s) in {t_conv.ms:.1f} ms",
            err=True,
        )
    typer.echo(f"[OK] PDF written: {result.output_path}")


if __name__ == "__main__":  # pragma: no cover
    app()
