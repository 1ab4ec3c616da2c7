"""docx-you-want: convert PDF documents into DOCX files, one SVG image per page."""

__version__ = "0.1.0"
