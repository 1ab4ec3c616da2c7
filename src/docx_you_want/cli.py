"""Command-line interface for docx-you-want."""

import argparse
import logging
import sys
from pathlib import Path

from docx_you_want.exceptions import DocxError
from docx_you_want.pipeline.orchestrator import Orchestrator
from docx_you_want.transformers.page_extractor import (
    DEFAULT_INKSCAPE_BINARY,
    InkscapeExtractor,
    PyMuPDFExtractor,
)
from docx_you_want.transformers.transformer import PageExtractor

EXTRACTORS = ("inkscape", "pymupdf")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_extractor(args: argparse.Namespace) -> PageExtractor:
    if args.extractor == "pymupdf":
        return PyMuPDFExtractor()
    return InkscapeExtractor(binary=args.inkscape)


def print_page_done(page_number: int) -> None:
    print(f"Converting page {page_number} ... Done")


def convert(args: argparse.Namespace) -> int:
    """Execute the conversion.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    orchestrator = Orchestrator(
        extractor=build_extractor(args),
        on_page=print_page_done,
    )

    try:
        result = orchestrator.convert(args.source, args.destination)
    except DocxError as e:
        logger.debug(f"Conversion failed: {e.message}")
        logger.error(e.user_message)
        return 1

    print(f"Generating the final result ... Done. Wrote {result.page_count} pages to {result.destination}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="docx-you-want",
        description="Convert a PDF into a DOCX with one SVG image per page",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--extractor",
        choices=EXTRACTORS,
        default="inkscape",
        help="Page extraction backend (default: inkscape)",
    )
    parser.add_argument(
        "--inkscape",
        type=str,
        default=DEFAULT_INKSCAPE_BINARY,
        help=f"Inkscape executable (default: {DEFAULT_INKSCAPE_BINARY})",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to the PDF to convert",
    )
    parser.add_argument(
        "destination",
        type=Path,
        help="Path of the DOCX file to write",
    )

    args = parser.parse_args(argv)
    return convert(args)


if __name__ == "__main__":
    sys.exit(main())
