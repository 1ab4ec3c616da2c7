"""Tests for pixel to OOXML unit conversion."""

from docx_you_want.units import to_drawing_unit, to_page_unit


class TestToDrawingUnit:
    def test_one_inch(self):
        """96 px is one inch, 914400 EMU."""
        assert to_drawing_unit(96) == 914400

    def test_zero(self):
        assert to_drawing_unit(0) == 0

    def test_truncates_fraction(self):
        """Fractional EMUs are truncated, not rounded."""
        # 0.5 px = 4762.5 EMU
        assert to_drawing_unit(0.5) == 4762

    def test_whole_pixels(self):
        assert to_drawing_unit(720) == 6858000

    def test_deterministic(self):
        assert to_drawing_unit(1018) == to_drawing_unit(1018)


class TestToPageUnit:
    def test_one_inch(self):
        """96 px is one inch, 1440 twips."""
        assert to_page_unit(96) == 1440

    def test_a4_width(self):
        """A4 width as exported at 96 dpi truncates to 11905 twips."""
        assert to_page_unit(793.707) == 11905

    def test_truncates_fraction(self):
        # 1 px = 15 twips, 0.99 px = 14.85 twips
        assert to_page_unit(0.99) == 14

    def test_returns_int(self):
        assert isinstance(to_page_unit(100.5), int)
