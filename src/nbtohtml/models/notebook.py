"""Data models for the notebook document.

The models mirror the nbformat v4 JSON schema closely enough to be validated
straight from a decoded document. Fields the schema marks optional default to
empty values, and unknown fields are ignored.
"""

from enum import Enum
from typing import Annotated, Any, Iterator, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_fragments(value: Any) -> Any:
    """Normalize an nbformat multiline string to a tuple of fragments."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(value)
    return value


def _none_as_empty(value: Any) -> Any:
    """Treat an explicit JSON null as an empty string."""
    return "" if value is None else value


def _as_blob(value: Any) -> Any:
    """Join a base64 blob that was split across lines."""
    if isinstance(value, (list, tuple)):
        return "".join(value)
    return value


Fragments = Annotated[tuple[str, ...], BeforeValidator(_as_fragments)]
Blob = Annotated[str, BeforeValidator(_as_blob)]
Text = Annotated[str, BeforeValidator(_none_as_empty)]


class CellType(str, Enum):
    """Cell kinds the converter knows how to render."""

    MARKDOWN = "markdown"
    CODE = "code"
    RAW = "raw"


class OutputType(str, Enum):
    """Output kinds the converter knows how to render."""

    STREAM = "stream"
    ERROR = "error"
    DISPLAY_DATA = "display_data"
    EXECUTE_RESULT = "execute_result"


class MimeType(str, Enum):
    """Content types of a display/result payload."""

    HTML = "text/html"
    PDF = "application/pdf"
    LATEX = "text/latex"
    SVG = "image/svg+xml"
    PNG = "image/png"
    JPEG = "image/jpeg"
    MARKDOWN = "text/markdown"
    PLAIN = "text/plain"


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class OutputData(_Model):
    """Multi-representation payload of a display_data or execute_result output.

    Attributes:
        html: HTML fragment (untrusted)
        pdf: Base64-encoded PDF document
        latex: LaTeX source
        svg: SVG document (untrusted)
        png: Base64-encoded PNG image
        jpeg: Base64-encoded JPEG image
        markdown: Markdown source
        plain: Plain text
    """

    html: Optional[Fragments] = Field(default=None, alias=MimeType.HTML.value)
    pdf: Optional[Blob] = Field(default=None, alias=MimeType.PDF.value)
    latex: Optional[Fragments] = Field(default=None, alias=MimeType.LATEX.value)
    svg: Optional[Fragments] = Field(default=None, alias=MimeType.SVG.value)
    png: Optional[Blob] = Field(default=None, alias=MimeType.PNG.value)
    jpeg: Optional[Blob] = Field(default=None, alias=MimeType.JPEG.value)
    markdown: Optional[Fragments] = Field(default=None, alias=MimeType.MARKDOWN.value)
    plain: Optional[Fragments] = Field(default=None, alias=MimeType.PLAIN.value)

    def get(self, mime_type: MimeType) -> Any:
        """Return the representation stored under a content type, or None."""
        return getattr(self, _FIELD_BY_MIME[mime_type])

    def representations(self) -> Iterator[tuple[MimeType, Any]]:
        """Yield the (content type, value) pairs that are present."""
        for mime_type in MimeType:
            value = self.get(mime_type)
            if value is not None:
                yield mime_type, value


_FIELD_BY_MIME = {
    MimeType.HTML: "html",
    MimeType.PDF: "pdf",
    MimeType.LATEX: "latex",
    MimeType.SVG: "svg",
    MimeType.PNG: "png",
    MimeType.JPEG: "jpeg",
    MimeType.MARKDOWN: "markdown",
    MimeType.PLAIN: "plain",
}


class Output(_Model):
    """Represents a single output of a code cell.

    Attributes:
        output_type: Output kind as written in the document
        execution_count: Execution number (execute_result only)
        name: Stream name (stdout or stderr)
        text: Stream text fragments
        data: Multi-representation payload
        ename: Exception class name (error only)
        evalue: Exception message (error only)
        traceback: Traceback lines, possibly containing ANSI escapes
    """

    output_type: str = ""
    execution_count: Optional[int] = None
    name: Optional[str] = None
    text: Optional[Fragments] = None
    data: Optional[OutputData] = None
    ename: Optional[str] = None
    evalue: Optional[str] = None
    traceback: Optional[tuple[str, ...]] = None

    @property
    def kind(self) -> Optional[OutputType]:
        """The recognized output kind, or None for an unknown one."""
        try:
            return OutputType(self.output_type)
        except ValueError:
            return None

    @property
    def text_content(self) -> Optional[str]:
        """Stream text joined without separators, or None when absent."""
        if self.text is None:
            return None
        return "".join(self.text)


class Cell(_Model):
    """Represents a single notebook cell.

    Attributes:
        cell_type: Cell kind as written in the document
        execution_count: Execution number (code cells)
        source: Source text fragments, each keeping its own line terminator
        outputs: Outputs of the cell, in order
    """

    cell_type: str = ""
    execution_count: Optional[int] = None
    source: Fragments = ()
    outputs: tuple[Output, ...] = ()

    @property
    def kind(self) -> Optional[CellType]:
        """The recognized cell kind, or None for an unknown one."""
        try:
            return CellType(self.cell_type)
        except ValueError:
            return None

    @property
    def source_text(self) -> str:
        """Source fragments joined without separators."""
        return "".join(self.source)


class KernelSpec(_Model):
    """Kernel information stored in the notebook metadata."""

    name: Text = ""
    language: Text = ""
    display_name: Text = ""


class LanguageInfo(_Model):
    """Language information reported by the kernel."""

    name: Text = ""
    file_extension: Text = ""
    pygments_lexer: Text = ""


class NotebookMetadata(_Model):
    """Top-level notebook metadata."""

    kernelspec: Optional[KernelSpec] = None
    language_info: Optional[LanguageInfo] = None


class Notebook(_Model):
    """Complete parsed notebook structure.

    Attributes:
        cells: Cells in document order
        metadata: Kernel and language metadata
        nbformat: Major format version
        nbformat_minor: Minor format version
    """

    cells: tuple[Cell, ...] = ()
    metadata: NotebookMetadata = Field(default_factory=NotebookMetadata)
    nbformat: int = 1
    nbformat_minor: int = 0

    @property
    def language_id(self) -> str:
        """Language hint for syntax highlighting.

        Prefers the kernel's file extension, then its language name, then the
        kernelspec language and name. Empty when none are declared.
        """
        language_info = self.metadata.language_info or LanguageInfo()
        kernelspec = self.metadata.kernelspec or KernelSpec()
        candidates = (
            language_info.file_extension.lstrip("."),
            language_info.name,
            kernelspec.language,
            kernelspec.name,
        )
        for candidate in candidates:
            if candidate:
                return candidate
        return ""
