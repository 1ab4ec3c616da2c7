"""Relationship index for ``word/_rels/document.xml.rels``."""

import logging
from collections.abc import Iterator

from lxml import etree

from schemas.relationship import MediaKind, RelationshipEntry

from .compiler import FragmentCompiler

logger = logging.getLogger(__name__)

IMAGE_RELATIONSHIP_TYPE = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/image"
)
MEDIA_DIR_NAME = "media"


class RelationshipIndex(FragmentCompiler):
    """Ordered, append-only list of image relationships.

    Entries are emitted without a namespace; the skeleton's
    ``Relationships`` root supplies the default package namespace.
    Identifier uniqueness is guaranteed by the IdAllocator, not checked here.
    """

    def __init__(self) -> None:
        self._entries: list[RelationshipEntry] = []

    def register(self, identifier: int, filename: str, media_kind: MediaKind) -> RelationshipEntry:
        """Append a relationship for a file stored in the media directory.

        Args:
            identifier: Id allocated for the asset
            filename: Bare file name inside ``word/media``
            media_kind: Vector or raster representation

        Returns:
            The appended RelationshipEntry
        """
        entry = RelationshipEntry(
            id=identifier,
            target=f"{MEDIA_DIR_NAME}/{filename}",
            media_kind=media_kind,
        )
        self._entries.append(entry)
        logger.debug(f"Registered relationship {entry.rid} -> {entry.target}")
        return entry

    @property
    def entries(self) -> tuple[RelationshipEntry, ...]:
        return tuple(self._entries)

    def ids(self) -> list[int]:
        return [entry.id for entry in self._entries]

    def serialize(self) -> str:
        return "".join(
            etree.tostring(self._build_relationship(entry), encoding="unicode")
            for entry in self._entries
        )

    def _build_relationship(self, entry: RelationshipEntry) -> etree._Element:
        el = etree.Element("Relationship")
        el.set("Id", entry.rid)
        el.set("Type", IMAGE_RELATIONSHIP_TYPE)
        el.set("Target", entry.target)
        return el

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RelationshipEntry]:
        return iter(self._entries)
