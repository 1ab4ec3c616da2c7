"""Relationship schemas.

A relationship ties a numeric identifier to a part stored in the package.
The main document refers to embedded images only through these identifiers,
so the relationship manifest (``word/_rels/document.xml.rels``) and the
document body must agree on every id.
"""

from enum import Enum

from pydantic import BaseModel, Field


class MediaKind(str, Enum):
    """Representation of an embedded page image."""

    VECTOR = "svg"
    RASTER = "png"

    @property
    def content_type(self) -> str:
        return "image/svg+xml" if self is MediaKind.VECTOR else "image/png"


class RelationshipEntry(BaseModel):
    """A single entry of the document relationship manifest.

    Attributes:
        id: Identifier allocated for the asset (unique per build session)
        target: Path of the asset relative to the ``word/`` part
        media_kind: Whether the target is the vector or raster representation
    """

    id: int = Field(ge=0)
    target: str
    media_kind: MediaKind

    model_config = {"frozen": True}

    @property
    def rid(self) -> str:
        """Reference id as written in the XML (e.g. ``rId3``)."""
        return f"rId{self.id}"
