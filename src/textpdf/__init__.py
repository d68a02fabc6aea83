"""Plain-text to PDF conversion.

The package lays text out line by line on fixed-size pages and embeds a
script-capable TrueType font when one can be found on the search path,
falling back to a built-in PDF font otherwise.  The command line interface
lives in :mod:`textpdf.cli`; :func:`textpdf.convert.convert_file` is the
library entry point.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
