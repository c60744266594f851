"""Data models for conversion results."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Diagnostic(BaseModel):
    """A recoverable problem encountered while converting one item.

    Attributes:
        code: Short machine-readable identifier (e.g. unsupported-mime-type)
        message: Human-readable description
        cell_index: Index of the affected cell, if any
        output_index: Index of the affected output within its cell, if any
    """

    code: str
    message: str
    cell_index: Optional[int] = None
    output_index: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def location(self) -> str:
        """Human-readable location such as 'cell 2, output 0'."""
        parts = []
        if self.cell_index is not None:
            parts.append(f"cell {self.cell_index}")
        if self.output_index is not None:
            parts.append(f"output {self.output_index}")
        return ", ".join(parts)

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class ConversionResult(BaseModel):
    """HTML fragment together with the diagnostics collected while building it.

    Attributes:
        html: The assembled HTML fragment
        diagnostics: Recoverable problems, in document order
    """

    html: str
    diagnostics: list[Diagnostic] = Field(default_factory=list)
