"""Pytest fixtures for docx-you-want tests."""

import zipfile
from pathlib import Path

import fitz  # PyMuPDF
import pytest
from lxml import etree

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
ASVG_NS = "http://schemas.microsoft.com/office/drawing/2016/SVG/main"
PKG_REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"


def svg_markup(width: float = 720, height: float = 1018) -> str:
    """A small SVG with an explicit intrinsic size."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
        f'<rect x="10" y="10" width="{width / 2}" height="{height / 2}" fill="#336699"/>'
        f"</svg>"
    )


def write_svg(path: Path, width: float = 720, height: float = 1018) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg_markup(width, height), encoding="utf-8")
    return path


def make_pdf(path: Path, pages: int = 1) -> Path:
    """Write a minimal PDF with *pages* A4 pages to *path*."""
    doc = fitz.open()
    for i in range(pages):
        page = doc.new_page(width=595, height=842)
        page.insert_text((50, 100), f"Page {i + 1} content")
    doc.save(str(path))
    doc.close()
    return path


def read_docx(path: Path) -> tuple[etree._Element, etree._Element]:
    """Parse word/document.xml and its relationships from a DOCX."""
    with zipfile.ZipFile(path) as archive:
        document = etree.fromstring(archive.read("word/document.xml"))
        rels = etree.fromstring(archive.read("word/_rels/document.xml.rels"))
    return document, rels


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    """A 720x1018 px SVG outside any workspace."""
    return write_svg(tmp_path / "pages" / "1.svg")


@pytest.fixture
def two_page_pdf(tmp_path: Path) -> Path:
    return make_pdf(tmp_path / "source.pdf", pages=2)


@pytest.fixture
def isolated_tempdir(tmp_path: Path, monkeypatch) -> Path:
    """Redirect tempfile so workspace directories can be inspected."""
    import tempfile

    temp_root = tmp_path / "tmp"
    temp_root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(temp_root))
    return temp_root
