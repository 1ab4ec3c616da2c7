"""Schema definitions for docx-you-want."""

from .conversion import ConversionResult
from .page import PackageSize, PageAsset, PageBlock
from .relationship import MediaKind, RelationshipEntry

__all__ = [
    "ConversionResult",
    "MediaKind",
    "PackageSize",
    "PageAsset",
    "PageBlock",
    "RelationshipEntry",
]
