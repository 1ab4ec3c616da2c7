"""Custom exceptions for the DOCX conversion pipeline."""


class DocxError(Exception):
    """Base exception for all conversion errors.

    Every subclass carries a fixed ``user_message`` that the CLI prints
    verbatim; ``message`` holds the technical detail for the log.
    """

    user_message = "Conversion failed."

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DocxIOError(DocxError):
    """Raised when a filesystem or subprocess operation fails."""

    user_message = "An error occurred during I/O."


class DocxImageError(DocxError):
    """Raised when an SVG page cannot be parsed or rendered."""

    user_message = "Something went wrong while processing the images."


class ToolNotFoundError(DocxError):
    """Raised when the external page extraction tool is not installed."""

    user_message = "Inkscape not found. Consider installing inkscape?"

    def __init__(self, message: str = "Page extraction tool not found", tool: str | None = None):
        self.tool = tool
        super().__init__(message)


class SourceInvalidError(DocxError):
    """Raised when no usable page could be extracted from the source."""

    user_message = "Invalid PDF."


class SkeletonIntegrityError(RuntimeError):
    """Raised when a skeleton placeholder is missing or duplicated.

    This signals a broken bundled template, not a user error, so it is
    not part of the DocxError hierarchy.
    """

    def __init__(self, path, token: str, count: int):
        self.path = path
        self.token = token
        self.count = count
        super().__init__(
            f"Placeholder {token!r} occurs {count} times in {path}, expected exactly once"
        )
