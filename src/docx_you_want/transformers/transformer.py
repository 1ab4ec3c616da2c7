"""Base class for page extractors.

A page extractor writes one page of a source document as a standalone SVG
file. Extraction is requested page by page, so documents of any length are
processed without holding more than one page at a time.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class PageExtractor(ABC):
    """Abstract base class for PDF page to SVG extractors."""

    @abstractmethod
    def extract(self, source: Path, page_number: int, destination: Path) -> bool:
        """Write a single page of *source* to *destination* as SVG.

        Args:
            source: Path to the source PDF
            page_number: 1-based page number
            destination: Path of the SVG file to write

        Returns:
            True if the page was written, False if the source has no such page
        """
        pass

    def page_count(self, source: Path) -> int | None:
        """Number of pages in *source*, or None if it cannot be known up front."""
        return None

    def close(self) -> None:
        """Release anything held open between pages."""
        pass
