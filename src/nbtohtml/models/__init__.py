"""Data models for nbtohtml."""

from nbtohtml.models.notebook import (
    Cell,
    CellType,
    KernelSpec,
    LanguageInfo,
    MimeType,
    Notebook,
    NotebookMetadata,
    Output,
    OutputData,
    OutputType,
)
from nbtohtml.models.result import ConversionResult, Diagnostic

__all__ = [
    "Cell",
    "CellType",
    "KernelSpec",
    "LanguageInfo",
    "MimeType",
    "Notebook",
    "NotebookMetadata",
    "Output",
    "OutputData",
    "OutputType",
    "ConversionResult",
    "Diagnostic",
]
