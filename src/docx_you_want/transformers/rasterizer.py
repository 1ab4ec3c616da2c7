"""SVG rasterizer producing the PNG fallback for each page.

The intrinsic size of a page is read from the root ``width``/``height`` of the
SVG and resolved to reference pixels at 96 per inch, falling back to the
``viewBox`` when they are absent. PyMuPDF opens the SVG as a one-page
document measured in points, so rendering scales that page to the pixel size.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import fitz  # PyMuPDF
from lxml import etree

from ..exceptions import DocxImageError, DocxIOError
from ..units import POINTS_PER_INCH, REFERENCE_DPI

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# Reference pixels per unit for the absolute CSS units
PIXELS_PER_UNIT = {
    "": 1.0,
    "px": 1.0,
    "pt": REFERENCE_DPI / POINTS_PER_INCH,
    "pc": REFERENCE_DPI / 6,
    "in": float(REFERENCE_DPI),
    "cm": REFERENCE_DPI / 2.54,
    "mm": REFERENCE_DPI / 25.4,
}

LENGTH_PATTERN = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*([a-zA-Z]*)\s*$")


def svg_length(value: str | None) -> float | None:
    """Resolve an SVG length attribute to reference pixels.

    Returns None for missing values, relative units and unparsable text.
    """
    if value is None:
        return None
    match = LENGTH_PATTERN.match(value)
    if match is None:
        return None
    factor = PIXELS_PER_UNIT.get(match.group(2).lower())
    if factor is None:
        return None
    return float(match.group(1)) * factor


def view_box_size(value: str | None) -> tuple[float, float] | None:
    if value is None:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        return float(parts[2]), float(parts[3])
    except ValueError:
        return None


@dataclass
class SvgImage:
    """A parsed SVG page.

    Attributes:
        path: Location the SVG was read from
        data: Raw SVG bytes
        width: Intrinsic width in reference pixels
        height: Intrinsic height in reference pixels
    """

    path: Path
    data: bytes
    width: float
    height: float


def png_path_for(media_dir: Path, svg_path: Path) -> Path:
    """Path of the PNG sibling of *svg_path* inside *media_dir*."""
    return media_dir / svg_path.with_suffix(".png").name


class SvgRasterizer:
    """Read SVG files and render them to PNG at their intrinsic size.

    Attributes:
        alpha: Keep a transparent background instead of filling with white
    """

    def __init__(self, alpha: bool = True) -> None:
        self.alpha = alpha

    def read(self, svg_path: Path) -> SvgImage:
        """Parse an SVG and determine its intrinsic size in reference pixels.

        Raises:
            DocxIOError: If the file cannot be read
            DocxImageError: If the content is not a usable SVG
        """
        try:
            data = svg_path.read_bytes()
        except OSError as e:
            raise DocxIOError(f"Cannot read {svg_path}: {e}") from e

        try:
            root = etree.fromstring(data, parser=etree.XMLParser(resolve_entities=False))
        except etree.XMLSyntaxError as e:
            raise DocxImageError(f"Cannot parse SVG {svg_path}: {e}") from e

        if etree.QName(root).localname != "svg" or etree.QName(root).namespace not in (None, SVG_NS):
            raise DocxImageError(f"{svg_path} is not an SVG document")

        try:
            with fitz.open(stream=data, filetype="svg") as doc:
                rect = doc[0].rect
        except Exception as e:
            raise DocxImageError(f"Cannot parse SVG {svg_path}: {e}") from e

        width = svg_length(root.get("width"))
        height = svg_length(root.get("height"))
        view_box = view_box_size(root.get("viewBox"))
        if width is None:
            width = view_box[0] if view_box else rect.width
        if height is None:
            height = view_box[1] if view_box else rect.height

        if width <= 0 or height <= 0 or rect.is_empty:
            raise DocxImageError(f"SVG {svg_path} has no drawable area")

        return SvgImage(path=svg_path, data=data, width=width, height=height)

    def render(self, image: SvgImage, destination: Path) -> Path:
        """Render *image* to a PNG file at one pixel per reference pixel.

        Raises:
            DocxImageError: If rendering or PNG encoding fails
        """
        try:
            with fitz.open(stream=image.data, filetype="svg") as doc:
                page = doc[0]
                matrix = fitz.Matrix(
                    image.width / page.rect.width,
                    image.height / page.rect.height,
                )
                pix = page.get_pixmap(matrix=matrix, alpha=self.alpha)
                pix.save(str(destination))
        except Exception as e:
            raise DocxImageError(f"Cannot render {image.path} to PNG: {e}") from e

        logger.debug(
            f"Rendered {image.path.name} to {destination.name} "
            f"({pix.width}x{pix.height})"
        )
        return destination

    def convert(self, svg_path: Path, png_path: Path) -> SvgImage:
        """Read *svg_path* and write its PNG rendering to *png_path*."""
        image = self.read(svg_path)
        self.render(image, png_path)
        return image
