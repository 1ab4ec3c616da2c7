"""Pixel to OOXML length conversions.

Pixels are measured at a fixed reference resolution of 96 per inch. Both
conversions truncate toward zero rather than rounding.
"""

REFERENCE_DPI = 96
EMUS_PER_INCH = 914400
POINTS_PER_INCH = 72
TWIPS_PER_POINT = 20


def to_drawing_unit(px: float) -> int:
    """Convert pixels to English Metric Units, used for drawing extents."""
    return int(px / REFERENCE_DPI * EMUS_PER_INCH)


def to_page_unit(px: float) -> int:
    """Convert pixels to twips (twentieths of a point), used for page geometry."""
    return int(px / REFERENCE_DPI * POINTS_PER_INCH * TWIPS_PER_POINT)
