"""Length unit conversion.

PDF user space is measured in points (1/72 inch); page geometry and layout
parameters are specified in millimetres and converted once, up front.
"""

from __future__ import annotations

POINTS_PER_INCH: float = 72.0
MM_PER_INCH: float = 25.4


def mm_to_pt(mm: float) -> float:
    """Return ``mm`` millimetres expressed in points."""

    return mm * POINTS_PER_INCH / MM_PER_INCH


__all__ = ["POINTS_PER_INCH", "MM_PER_INCH", "mm_to_pt"]
