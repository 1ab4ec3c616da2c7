"""Tests for the CLI module."""

import zipfile
from unittest.mock import patch

import fitz  # PyMuPDF
import pytest

from conftest import make_pdf
from docx_you_want.cli import main
from docx_you_want.exceptions import DocxImageError, DocxIOError


class TestCLIArguments:
    def test_requires_two_arguments(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["only-one.pdf"])
        assert excinfo.value.code != 0
        assert "usage" in capsys.readouterr().err

    def test_rejects_extra_arguments(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["a.pdf", "b.docx", "c"])
        assert excinfo.value.code != 0

    def test_rejects_unknown_extractor(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--extractor", "magic", "a.pdf", "b.docx"])


class TestCLIConvert:
    def test_success_with_pymupdf(self, tmp_path, capsys):
        source = make_pdf(tmp_path / "in.pdf", pages=2)
        destination = tmp_path / "out.docx"

        result = main(["--extractor", "pymupdf", str(source), str(destination)])

        assert result == 0
        assert zipfile.is_zipfile(destination)
        out = capsys.readouterr().out
        assert "Converting page 1 ... Done" in out
        assert "Converting page 2 ... Done" in out
        assert "Generating the final result ... Done." in out

    def test_invalid_pdf_message(self, tmp_path, caplog):
        result = main([str(tmp_path / "missing.pdf"), str(tmp_path / "out.docx")])

        assert result == 1
        assert "Invalid PDF." in caplog.text

    def test_inkscape_missing_message(self, tmp_path, caplog):
        source = make_pdf(tmp_path / "in.pdf")
        with patch(
            "docx_you_want.transformers.page_extractor.subprocess.run",
            side_effect=FileNotFoundError("inkscape"),
        ):
            result = main([str(source), str(tmp_path / "out.docx")])

        assert result == 1
        assert "Inkscape not found. Consider installing inkscape?" in caplog.text

    def test_page_render_failure_message(self, tmp_path, caplog):
        source = make_pdf(tmp_path / "in.pdf")
        with patch.object(fitz.Page, "get_svg_image", side_effect=RuntimeError("render failed")):
            result = main(["--extractor", "pymupdf", str(source), str(tmp_path / "out.docx")])

        assert result == 1
        assert "Something went wrong while processing the images." in caplog.text
        assert not (tmp_path / "out.docx").exists()

    @patch("docx_you_want.cli.Orchestrator")
    def test_image_error_message(self, mock_orchestrator_class, tmp_path, caplog):
        mock_orchestrator_class.return_value.convert.side_effect = DocxImageError("bad svg")

        result = main([str(tmp_path / "in.pdf"), str(tmp_path / "out.docx")])

        assert result == 1
        assert "Something went wrong while processing the images." in caplog.text

    @patch("docx_you_want.cli.Orchestrator")
    def test_io_error_message(self, mock_orchestrator_class, tmp_path, caplog):
        mock_orchestrator_class.return_value.convert.side_effect = DocxIOError("disk full")

        result = main([str(tmp_path / "in.pdf"), str(tmp_path / "out.docx")])

        assert result == 1
        assert "An error occurred during I/O." in caplog.text

    @patch("docx_you_want.cli.Orchestrator")
    def test_custom_inkscape_binary(self, mock_orchestrator_class, tmp_path):
        main(["--inkscape", "/opt/bin/inkscape", str(tmp_path / "in.pdf"), str(tmp_path / "out.docx")])

        extractor = mock_orchestrator_class.call_args.kwargs["extractor"]
        assert extractor.binary == "/opt/bin/inkscape"
