"""Typed exceptions for input, font, rendering and output failures."""


class TextPdfError(Exception):
    """Base class for all package errors."""


class ConfigError(TextPdfError, ValueError):
    """Raised when configuration values are inconsistent."""


class IOFormatError(TextPdfError, ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""


class InputReadError(TextPdfError, OSError):
    """Raised when the input text file is missing or unreadable."""


class DirectoryCreateError(TextPdfError, OSError):
    """Raised when the output directory cannot be created."""


class OutputWriteError(TextPdfError, OSError):
    """Raised when the finished PDF cannot be written to disk."""


class FontError(TextPdfError):
    """Base class for recoverable font problems."""


class FontLoadError(FontError):
    """Raised when a font file cannot be parsed or registered."""


class FontActivateError(FontError):
    """Raised when a registered font cannot be selected for drawing."""


class TextRenderError(TextPdfError):
    """Raised when a line cannot be placed on a page."""

    def __init__(self, message: str, *, page: int | None = None, text: str | None = None) -> None:
        super().__init__(message)
        self.page = page
        self.text = text
