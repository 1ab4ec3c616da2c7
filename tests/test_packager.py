"""Tests for the packager."""

import zipfile
from unittest.mock import patch
from pathlib import Path

import pytest

from docx_you_want.compilers.packager import Packager
from docx_you_want.exceptions import DocxIOError


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "tree"
    (root / "_rels").mkdir(parents=True)
    (root / "word" / "media").mkdir(parents=True)
    (root / "[Content_Types].xml").write_text("<Types/>")
    (root / "_rels" / ".rels").write_text("<Relationships/>")
    (root / "word" / "document.xml").write_text("<w:document/>")
    return root


class TestPackagerSeal:
    def test_writes_archive(self, tree, tmp_path):
        destination = Packager().seal(tree, tmp_path / "out.docx")
        assert destination.exists()
        assert zipfile.is_zipfile(destination)

    def test_mirrors_tree(self, tree, tmp_path):
        destination = Packager().seal(tree, tmp_path / "out.docx")
        with zipfile.ZipFile(destination) as archive:
            names = archive.namelist()

        assert "[Content_Types].xml" in names
        assert "_rels/.rels" in names
        assert "word/document.xml" in names
        assert archive_bytes(destination, "word/document.xml") == b"<w:document/>"

    def test_keeps_empty_directories(self, tree, tmp_path):
        destination = Packager().seal(tree, tmp_path / "out.docx")
        with zipfile.ZipFile(destination) as archive:
            names = archive.namelist()
        assert "word/media/" in names

    def test_content_types_first(self, tree, tmp_path):
        destination = Packager().seal(tree, tmp_path / "out.docx")
        with zipfile.ZipFile(destination) as archive:
            assert archive.namelist()[0] == "[Content_Types].xml"

    def test_compressed(self, tree, tmp_path):
        destination = Packager().seal(tree, tmp_path / "out.docx")
        with zipfile.ZipFile(destination) as archive:
            info = archive.getinfo("word/document.xml")
        assert info.compress_type == zipfile.ZIP_DEFLATED

    def test_creates_parent_directory(self, tree, tmp_path):
        destination = Packager().seal(tree, tmp_path / "nested" / "out.docx")
        assert destination.exists()

    def test_unwritable_destination_raises_io_error(self, tree, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(DocxIOError):
            Packager().seal(tree, blocker / "out.docx")

    def test_failed_seal_keeps_existing_destination(self, tree, tmp_path):
        destination = tmp_path / "out.docx"
        destination.write_bytes(b"previous document")

        with patch.object(zipfile.ZipFile, "write", side_effect=OSError("disk full")):
            with pytest.raises(DocxIOError):
                Packager().seal(tree, destination)

        assert destination.read_bytes() == b"previous document"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out.docx", "tree"]

    def test_replaces_existing_destination(self, tree, tmp_path):
        destination = tmp_path / "out.docx"
        destination.write_bytes(b"previous document")

        Packager().seal(tree, destination)

        assert zipfile.is_zipfile(destination)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out.docx", "tree"]


def archive_bytes(path: Path, name: str) -> bytes:
    with zipfile.ZipFile(path) as archive:
        return archive.read(name)
