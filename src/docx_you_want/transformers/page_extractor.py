"""Page extractors writing single PDF pages as SVG files.

InkscapeExtractor shells out to Inkscape once per page. Inkscape cannot report
the page count, so any diagnostic output on stderr is read as "no such page".
This also swallows genuine Inkscape failures on later pages; use
PyMuPDFExtractor when an exact page count matters.
"""

import logging
import subprocess
from pathlib import Path

import fitz  # PyMuPDF
from lxml import etree

from ..exceptions import DocxImageError, DocxIOError, SourceInvalidError, ToolNotFoundError
from ..units import POINTS_PER_INCH, REFERENCE_DPI
from .transformer import PageExtractor

logger = logging.getLogger(__name__)

DEFAULT_INKSCAPE_BINARY = "inkscape"


class InkscapeExtractor(PageExtractor):
    """Extract pages by running the Inkscape command line.

    The subprocess runs without a timeout; a hanging Inkscape hangs the
    conversion.

    Attributes:
        binary: Inkscape executable name or path
        import_args: Extra arguments controlling PDF import
    """

    def __init__(
        self,
        binary: str = DEFAULT_INKSCAPE_BINARY,
        import_args: tuple[str, ...] = ("--pdf-poppler",),
    ):
        self.binary = binary
        self.import_args = import_args

    def command(self, source: Path, page_number: int, destination: Path) -> list[str]:
        return [
            self.binary,
            *self.import_args,
            f"--pdf-page={page_number}",
            "--export-type=svg",
            "--export-plain-svg",
            f"--export-filename={destination}",
            str(source),
        ]

    def extract(self, source: Path, page_number: int, destination: Path) -> bool:
        cmd = self.command(source, page_number, destination)
        logger.debug(f"Running {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, check=False)
        except FileNotFoundError as e:
            raise ToolNotFoundError(f"{self.binary} not found", tool=self.binary) from e
        except OSError as e:
            raise DocxIOError(f"Failed to run {self.binary}: {e}") from e

        if result.stderr:
            logger.debug(
                f"{self.binary} reported on page {page_number}: "
                f"{result.stderr.decode(errors='replace').strip()}"
            )
            return False

        if result.returncode != 0 or not destination.is_file():
            logger.debug(
                f"{self.binary} produced no output for page {page_number} "
                f"(exit status {result.returncode})"
            )
            return False

        return True


class PyMuPDFExtractor(PageExtractor):
    """Extract pages in-process with PyMuPDF.

    SVGs are scaled from PDF points to reference pixels so that the intrinsic
    size of the SVG matches what Inkscape would produce. The source document
    stays open between pages until close() is called or another source is
    requested.
    """

    def __init__(self, text_as_path: bool = True):
        self.text_as_path = text_as_path
        self._doc: fitz.Document | None = None
        self._source: Path | None = None

    def _open(self, source: Path) -> fitz.Document:
        try:
            return fitz.open(str(source))
        except Exception as e:
            raise SourceInvalidError(f"Cannot open {source}: {e}") from e

    def _document(self, source: Path) -> fitz.Document:
        if self._doc is None or self._source != source:
            self.close()
            self._doc = self._open(source)
            self._source = source
        return self._doc

    def page_count(self, source: Path) -> int:
        return self._document(source).page_count

    def extract(self, source: Path, page_number: int, destination: Path) -> bool:
        doc = self._document(source)
        if page_number < 1 or page_number > doc.page_count:
            return False

        page = doc[page_number - 1]
        scale = REFERENCE_DPI / POINTS_PER_INCH
        try:
            svg = page.get_svg_image(
                matrix=fitz.Matrix(scale, scale),
                text_as_path=self.text_as_path,
            )
            root = etree.fromstring(svg.encode("utf-8"))
        except Exception as e:
            raise DocxImageError(f"Cannot render page {page_number} of {source}: {e}") from e

        # MuPDF labels the root size in points; pin it to reference pixels
        root.set("width", f"{page.rect.width * scale:g}")
        root.set("height", f"{page.rect.height * scale:g}")

        try:
            destination.write_bytes(
                etree.tostring(root, xml_declaration=True, encoding="UTF-8")
            )
        except OSError as e:
            raise DocxIOError(f"Cannot write {destination}: {e}") from e

        logger.debug(f"Extracted page {page_number} of {source.name} to {destination}")
        return True

    def close(self) -> None:
        if self._doc is not None:
            self._doc.close()
        self._doc = None
        self._source = None
