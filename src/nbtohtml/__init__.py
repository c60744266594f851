"""nbtohtml - Convert Jupyter notebooks to safe, embeddable HTML fragments.

The notebook is treated as untrusted input: author-supplied HTML and SVG are
sanitized, everything else is escaped or produced by a trusted renderer.
"""

__version__ = "0.1.0"


class NbToHtmlError(Exception):
    """Base exception for all nbtohtml errors."""

    pass


class NotebookReadError(NbToHtmlError):
    """Raised when a notebook file cannot be read."""

    pass


class NotebookNotFoundError(NotebookReadError):
    """Raised when a notebook file does not exist."""

    pass


class NotebookParseError(NbToHtmlError):
    """Raised when notebook parsing fails."""

    pass


class VersionUnsupportedError(NotebookParseError):
    """Raised when the notebook format version is older than supported."""

    def __init__(self, version: int, minimum: int):
        self.version = version
        self.minimum = minimum
        super().__init__(
            f"Unsupported notebook format version {version} (minimum is {minimum})"
        )


class RenderError(NbToHtmlError):
    """Raised when a content renderer fails on a single cell or output."""

    pass


class HighlightError(RenderError):
    """Raised when syntax highlighting of a code cell fails."""

    pass


class ConfigurationError(NbToHtmlError):
    """Raised when configuration is invalid or missing."""

    pass


from nbtohtml.conversion.converter import convert_file, convert_string  # noqa: E402

__all__ = [
    "__version__",
    "NbToHtmlError",
    "NotebookReadError",
    "NotebookNotFoundError",
    "NotebookParseError",
    "VersionUnsupportedError",
    "RenderError",
    "HighlightError",
    "ConfigurationError",
    "convert_file",
    "convert_string",
]
