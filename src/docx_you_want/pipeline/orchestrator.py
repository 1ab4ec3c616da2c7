"""Pipeline orchestrator for end-to-end PDF -> DOCX conversion.

Extracts pages one at a time, registers each with a PackageWorkspace, then
finalizes and seals the workspace into the destination file.
"""

import logging
from collections.abc import Callable
from itertools import count
from pathlib import Path

from schemas.conversion import ConversionResult
from schemas.page import PackageSize

from ..compilers.packager import Packager
from ..exceptions import DocxIOError, SourceInvalidError
from ..transformers.page_extractor import InkscapeExtractor
from ..transformers.rasterizer import SvgRasterizer
from ..transformers.transformer import PageExtractor
from ..workspace import PackageWorkspace

logger = logging.getLogger(__name__)


class Orchestrator:
    """End-to-end conversion driver.

    Pages are processed sequentially in source order. The first page's
    intrinsic size becomes the page geometry of the whole document, even if
    later pages differ.

    When the extractor cannot report a page count, extraction continues
    until it reports a missing page; that page number minus one is taken
    as the page count.

    Attributes:
        extractor: PageExtractor writing each page as SVG
        skeleton: Optional skeleton override passed to the workspace
        rasterizer: SvgRasterizer for PNG fallbacks
        packager: Packager writing the final archive
        on_page: Optional callback invoked with each registered page number
    """

    def __init__(
        self,
        extractor: PageExtractor | None = None,
        skeleton: Path | None = None,
        rasterizer: SvgRasterizer | None = None,
        packager: Packager | None = None,
        on_page: Callable[[int], None] | None = None,
    ):
        self.extractor = extractor or InkscapeExtractor()
        self.skeleton = skeleton
        self.rasterizer = rasterizer
        self.packager = packager
        self.on_page = on_page

    def convert(self, source: Path, destination: Path) -> ConversionResult:
        """Convert *source* PDF into a DOCX at *destination*.

        Args:
            source: Path to the source PDF
            destination: Path of the DOCX to write

        Returns:
            ConversionResult describing the written document

        Raises:
            SourceInvalidError: If the source is missing or yields no pages
            ToolNotFoundError: If the page extraction tool is not installed
            DocxImageError: If a page cannot be parsed or rendered
            DocxIOError: On filesystem or subprocess failures
        """
        if not source.is_file():
            raise SourceInvalidError(f"Source not found: {source}")

        logger.info(f"Converting {source} to {destination}")

        with PackageWorkspace(
            skeleton=self.skeleton,
            rasterizer=self.rasterizer,
            packager=self.packager,
        ) as workspace:
            try:
                page_size = self._collect_pages(source, workspace)
            finally:
                self.extractor.close()
            workspace.finalize(page_size)
            workspace.seal(destination)

            result = ConversionResult(
                source=source,
                destination=destination,
                page_count=len(workspace.content),
                page_size=page_size,
                relationships=list(workspace.relationships.entries),
            )

        logger.info(f"Wrote {result.page_count} pages to {destination}")
        return result

    def _collect_pages(self, source: Path, workspace: PackageWorkspace) -> PackageSize:
        """Extract and register every page, returning the first page's size."""
        limit = self.extractor.page_count(source)
        if limit is not None:
            logger.debug(f"{source.name} reports {limit} pages")

        page_size = None
        for page_number in count(1):
            if limit is not None and page_number > limit:
                break

            svg_path = workspace.media_dir / f"{page_number}.svg"
            if not self.extractor.extract(source, page_number, svg_path):
                self._discard(svg_path)
                logger.debug(f"No page {page_number} in {source.name}, stopping")
                break

            asset = workspace.register_page(svg_path)
            if page_size is None:
                page_size = asset.size
            if self.on_page is not None:
                self.on_page(page_number)

        if page_size is None:
            raise SourceInvalidError(f"No pages could be extracted from {source}")
        return page_size

    def _discard(self, svg_path: Path) -> None:
        """Remove partial output left by an extractor for a missing page."""
        try:
            svg_path.unlink(missing_ok=True)
        except OSError as e:
            raise DocxIOError(f"Cannot remove partial page {svg_path}: {e}") from e
