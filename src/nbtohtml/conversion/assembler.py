"""Assembly of rendered cells and outputs into the notebook fragment."""

import re
from dataclasses import dataclass, field
from typing import Optional

_CLASS_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]")


def css_token(value: str) -> str:
    """Reduce a document-supplied string to a safe CSS class token."""
    return _CLASS_UNSAFE_RE.sub("", value)


def prompt(execution_count: Optional[int]) -> str:
    """Execution count prompt, e.g. "[3]:", or an empty string."""
    if execution_count is None:
        return ""
    return f"[{execution_count}]:"


@dataclass(frozen=True)
class RenderedOutput:
    """An output reduced to its HTML fragment."""

    output_type: str
    html: str
    execution_count: Optional[int] = None
    stream_name: Optional[str] = None

    @property
    def css_classes(self) -> str:
        classes = ["output", f"output-{css_token(self.output_type)}"]
        if self.stream_name:
            classes.append(f"output-stream-{css_token(self.stream_name)}")
        return " ".join(classes)


@dataclass(frozen=True)
class RenderedCell:
    """A cell reduced to its input fragment and rendered outputs."""

    cell_type: str
    input_html: str
    execution_count: Optional[int] = None
    outputs: tuple[RenderedOutput, ...] = field(default_factory=tuple)

    @property
    def css_classes(self) -> str:
        return f"cell cell-{css_token(self.cell_type)}"


class NotebookAssembler:
    """Wrap rendered cells and outputs in the notebook container markup.

    Prompt containers are always emitted so that the layout stays stable
    whether or not an execution count is present.
    """

    def assemble(self, cells: list[RenderedCell]) -> str:
        """Build the notebook fragment.

        Args:
            cells: Rendered cells in document order

        Returns:
            str: HTML fragment rooted at <div class="notebook">
        """
        lines = ['<div class="notebook">']
        for cell in cells:
            lines.extend(self.assemble_cell(cell))
        lines.append("</div>")
        return "\n".join(lines)

    def assemble_cell(self, cell: RenderedCell) -> list[str]:
        lines = [
            f'<div class="{cell.css_classes}">',
            '<div class="input-wrapper">',
            f'<div class="input-prompt">{prompt(cell.execution_count)}</div>',
            f'<div class="input">{cell.input_html}</div>',
            "</div>",
        ]
        for output in cell.outputs:
            lines.extend(self.assemble_output(output))
        lines.append("</div>")
        return lines

    def assemble_output(self, output: RenderedOutput) -> list[str]:
        return [
            '<div class="output-wrapper">',
            f'<div class="output-prompt">{prompt(output.execution_count)}</div>',
            f'<div class="{output.css_classes}">{output.html}</div>',
            "</div>",
        ]
