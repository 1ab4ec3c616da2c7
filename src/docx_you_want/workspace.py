"""Package workspace: the scratch directory a DOCX is assembled in.

The workspace is seeded from a fixed skeleton (content types, package
relationships, a main document with placeholder tokens). Pages are registered
one at a time; each contributes an SVG, its PNG fallback, two relationships
and one body paragraph. ``finalize`` splices the accumulated XML into the
skeleton and ``seal`` zips the tree into the final document.

Lifecycle:
    EMPTY -> MATERIALIZED (skeleton copied) -> FINALIZED (placeholders filled)

The directory is removed when the workspace is closed, which the context
manager does on every exit path.
"""

import logging
import shutil
import tempfile
import weakref
import zipfile
from enum import Enum
from pathlib import Path

from schemas.page import PackageSize, PageAsset
from schemas.relationship import MediaKind

from .compilers.content import ContentBuilder
from .compilers.packager import Packager
from .compilers.relationships import RelationshipIndex
from .exceptions import DocxIOError, SkeletonIntegrityError
from .ids import IdAllocator
from .transformers.rasterizer import SvgRasterizer, png_path_for
from .units import to_page_unit

logger = logging.getLogger(__name__)

DEFAULT_SKELETON_DIR = Path(__file__).parent / "resources" / "skeleton"

DOCUMENT_PART = Path("word") / "document.xml"
RELATIONSHIPS_PART = Path("word") / "_rels" / "document.xml.rels"
MEDIA_DIR = Path("word") / "media"

DOCUMENT_BODY_TOKEN = "{{DOCUMENT_BODY}}"
RELATIONSHIPS_TOKEN = "{{RELATIONSHIPS}}"
PAGE_WIDTH_TOKEN = "{{PAGE_WIDTH}}"
PAGE_HEIGHT_TOKEN = "{{PAGE_HEIGHT}}"


class WorkspaceState(Enum):
    EMPTY = "empty"
    MATERIALIZED = "materialized"
    FINALIZED = "finalized"


def splice(text: str, token: str, value: str, source: Path | str) -> str:
    """Replace the single occurrence of *token* in *text* with *value*.

    Raises:
        SkeletonIntegrityError: If *token* does not occur exactly once
    """
    count = text.count(token)
    if count != 1:
        raise SkeletonIntegrityError(source, token, count)
    return text.replace(token, value)


def _remove_tree(path: Path) -> None:
    try:
        shutil.rmtree(path)
        logger.debug(f"Removed workspace {path}")
    except OSError as e:
        logger.warning(f"Could not remove workspace {path}: {e}")


class PackageWorkspace:
    """Scratch directory tree holding one DOCX while it is being built.

    Each workspace owns its own IdAllocator, RelationshipIndex and
    ContentBuilder, so identifiers are unique per build and never shared.

    Example:
        with PackageWorkspace() as workspace:
            asset = workspace.register_page(Path("1.svg"))
            workspace.finalize(asset.size)
            workspace.seal(Path("out.docx"))

    Attributes:
        skeleton: Skeleton directory or zip archive the workspace is seeded from
        path: Root of the temporary directory
        state: Current WorkspaceState
    """

    def __init__(
        self,
        skeleton: Path | None = None,
        rasterizer: SvgRasterizer | None = None,
        packager: Packager | None = None,
    ):
        """Create the temporary directory and copy the skeleton into it.

        Args:
            skeleton: Skeleton directory or zip archive (default: bundled skeleton)
            rasterizer: SvgRasterizer used for the PNG fallbacks
            packager: Packager used by seal()

        Raises:
            DocxIOError: If the directory cannot be created or the skeleton copied
        """
        self.skeleton = skeleton or DEFAULT_SKELETON_DIR
        self.rasterizer = rasterizer or SvgRasterizer()
        self.packager = packager or Packager()

        self.ids = IdAllocator()
        self.relationships = RelationshipIndex()
        self.content = ContentBuilder()
        self.state = WorkspaceState.EMPTY

        try:
            self.path = Path(tempfile.mkdtemp(prefix="docx-you-want-"))
        except OSError as e:
            raise DocxIOError(f"Cannot create workspace directory: {e}") from e
        self._finalizer = weakref.finalize(self, _remove_tree, self.path)

        try:
            self._materialize()
        except DocxIOError:
            self.close()
            raise

    @property
    def document_path(self) -> Path:
        return self.path / DOCUMENT_PART

    @property
    def relationships_path(self) -> Path:
        return self.path / RELATIONSHIPS_PART

    @property
    def media_dir(self) -> Path:
        return self.path / MEDIA_DIR

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def _materialize(self) -> None:
        """Copy or extract the skeleton into the workspace directory."""
        try:
            if self.skeleton.is_dir():
                shutil.copytree(self.skeleton, self.path, dirs_exist_ok=True)
            else:
                with zipfile.ZipFile(self.skeleton) as archive:
                    archive.extractall(self.path)
            self.media_dir.mkdir(parents=True, exist_ok=True)
        except (OSError, zipfile.BadZipFile) as e:
            raise DocxIOError(f"Cannot materialize skeleton {self.skeleton}: {e}") from e

        self.state = WorkspaceState.MATERIALIZED
        logger.debug(f"Materialized skeleton {self.skeleton} into {self.path}")

    def _require(self, state: WorkspaceState, action: str) -> None:
        if self.closed:
            raise RuntimeError(f"Cannot {action}: workspace is closed")
        if self.state is not state:
            raise RuntimeError(
                f"Cannot {action}: workspace is {self.state.value}, expected {state.value}"
            )

    def register_page(self, vector_path: Path) -> PageAsset:
        """Add one page to the package.

        Renders the PNG fallback next to the SVG in the media directory,
        copies the SVG there if it is not already in place, allocates two
        identifiers (SVG first), and records two relationships and one page
        block.

        Args:
            vector_path: Path of the page's SVG

        Returns:
            PageAsset describing the registered page

        Raises:
            DocxImageError: If the SVG cannot be parsed or rendered
            DocxIOError: If the SVG cannot be read or copied
        """
        self._require(WorkspaceState.MATERIALIZED, "register page")

        image = self.rasterizer.read(vector_path)
        raster_path = png_path_for(self.media_dir, vector_path)
        self.rasterizer.render(image, raster_path)

        media_vector_path = self.media_dir / vector_path.name
        try:
            if vector_path.resolve() != media_vector_path.resolve():
                shutil.copyfile(vector_path, media_vector_path)
        except OSError as e:
            raise DocxIOError(f"Cannot copy {vector_path} into workspace: {e}") from e

        vector_id = self.ids.next()
        raster_id = self.ids.next()
        self.relationships.register(vector_id, media_vector_path.name, MediaKind.VECTOR)
        self.relationships.register(raster_id, raster_path.name, MediaKind.RASTER)
        self.content.append_page(vector_id, raster_id, image.width, image.height)

        logger.info(
            f"Registered page {len(self.content)}: {media_vector_path.name} "
            f"({image.width:g}x{image.height:g} px)"
        )
        return PageAsset(
            vector_path=media_vector_path,
            raster_path=raster_path,
            width=image.width,
            height=image.height,
            vector_id=vector_id,
            raster_id=raster_id,
        )

    def finalize(self, page_size: PackageSize) -> None:
        """Fill the skeleton placeholders.

        Writes the page geometry into ``word/document.xml``, then the page
        paragraphs into the document body and the relationship entries into
        ``word/_rels/document.xml.rels``.

        Args:
            page_size: Page geometry applied to the whole document

        Raises:
            SkeletonIntegrityError: If a placeholder is missing or duplicated
            DocxIOError: If a skeleton part cannot be read or written
        """
        self._require(WorkspaceState.MATERIALIZED, "finalize")

        try:
            document = self.document_path.read_text(encoding="utf-8")
            rels = self.relationships_path.read_text(encoding="utf-8")
        except OSError as e:
            raise DocxIOError(f"Cannot read skeleton parts: {e}") from e

        document = splice(
            document, PAGE_WIDTH_TOKEN, str(to_page_unit(page_size.width)), DOCUMENT_PART
        )
        document = splice(
            document, PAGE_HEIGHT_TOKEN, str(to_page_unit(page_size.height)), DOCUMENT_PART
        )
        document = splice(
            document, DOCUMENT_BODY_TOKEN, self.content.serialize(), DOCUMENT_PART
        )
        rels = splice(
            rels, RELATIONSHIPS_TOKEN, self.relationships.serialize(), RELATIONSHIPS_PART
        )

        try:
            self.document_path.write_text(document, encoding="utf-8")
            self.relationships_path.write_text(rels, encoding="utf-8")
        except OSError as e:
            raise DocxIOError(f"Cannot write skeleton parts: {e}") from e

        self.state = WorkspaceState.FINALIZED
        logger.info(
            f"Finalized workspace with {len(self.content)} pages and "
            f"{len(self.relationships)} relationships"
        )

    def seal(self, destination: Path) -> Path:
        """Write the finalized workspace as a DOCX archive.

        Raises:
            DocxIOError: If the archive cannot be written
        """
        self._require(WorkspaceState.FINALIZED, "seal")
        return self.packager.seal(self.path, destination)

    def close(self) -> None:
        """Remove the workspace directory. Safe to call more than once."""
        self._finalizer()

    def __enter__(self) -> "PackageWorkspace":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
