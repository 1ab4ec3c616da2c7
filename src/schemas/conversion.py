"""Conversion result schema."""

from pathlib import Path

from pydantic import BaseModel

from .page import PackageSize
from .relationship import RelationshipEntry


class ConversionResult(BaseModel):
    """Summary of a finished PDF to DOCX conversion.

    Attributes:
        source: Path of the input PDF
        destination: Path of the written DOCX
        page_count: Number of pages embedded in the document
        page_size: Page geometry applied to every page
        relationships: Relationship entries in manifest order
    """

    source: Path
    destination: Path
    page_count: int
    page_size: PackageSize
    relationships: list[RelationshipEntry] = []
