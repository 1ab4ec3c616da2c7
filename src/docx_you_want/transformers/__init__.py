"""Transformers that turn source pages into embeddable images."""

from .page_extractor import InkscapeExtractor, PyMuPDFExtractor
from .rasterizer import SvgImage, SvgRasterizer, png_path_for
from .transformer import PageExtractor

__all__ = [
    "InkscapeExtractor",
    "PageExtractor",
    "PyMuPDFExtractor",
    "SvgImage",
    "SvgRasterizer",
    "png_path_for",
]
