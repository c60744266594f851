"""Notebook to HTML conversion pipeline."""

import logging
from pathlib import Path
from typing import Optional

from nbtohtml import NotebookParseError
from nbtohtml.conversion.assembler import NotebookAssembler, RenderedCell, RenderedOutput
from nbtohtml.conversion.cells import CellRenderer
from nbtohtml.conversion.diagnostics import DiagnosticCollector
from nbtohtml.conversion.outputs import OutputRenderer
from nbtohtml.models import Cell, ConversionResult, Notebook
from nbtohtml.parsing import NotebookParser
from nbtohtml.rendering.code_highlighter import DEFAULT_CSS_CLASS

logger = logging.getLogger(__name__)


class NotebookConverter:
    """Convert notebooks to HTML fragments.

    Cells and outputs are rendered one after another and independently. A
    problem with one item is recorded as a diagnostic and degrades only that
    item; only parse and version errors abort the conversion.
    """

    def __init__(
        self,
        parser: Optional[NotebookParser] = None,
        output_renderer: Optional[OutputRenderer] = None,
        assembler: Optional[NotebookAssembler] = None,
        css_class: str = DEFAULT_CSS_CLASS,
        strict: bool = False,
    ):
        """Initialize converter.

        Args:
            parser: Notebook parser (creates default if None)
            output_renderer: Output renderer (creates default if None)
            assembler: Notebook assembler (creates default if None)
            css_class: CSS class for highlighted code blocks
            strict: Treat unrecognized cell and output types as fatal
        """
        self.parser = parser or NotebookParser()
        self.output_renderer = output_renderer or OutputRenderer(css_class=css_class)
        self.assembler = assembler or NotebookAssembler()
        self.css_class = css_class
        self.strict = strict

    def convert(self, notebook: Notebook) -> ConversionResult:
        """Convert a parsed notebook.

        Args:
            notebook: Notebook to convert

        Returns:
            ConversionResult: HTML fragment and collected diagnostics

        Raises:
            NotebookParseError: In strict mode, for unrecognized cell or output types
        """
        collector = DiagnosticCollector()
        cell_renderer = CellRenderer(notebook.language_id, css_class=self.css_class)

        rendered = [
            self._render_cell(cell, cell_index, cell_renderer, collector)
            for cell_index, cell in enumerate(notebook.cells)
        ]

        html = self.assembler.assemble(rendered)
        logger.info(
            "Converted %d cells with %d diagnostics",
            len(rendered),
            len(collector.diagnostics),
        )
        return ConversionResult(html=html, diagnostics=collector.diagnostics)

    def convert_string(self, content: str) -> ConversionResult:
        """Parse and convert notebook JSON text."""
        return self.convert(self.parser.parse_string(content))

    def convert_file(self, filepath: Path | str) -> ConversionResult:
        """Read, parse and convert a notebook file."""
        return self.convert(self.parser.parse_file(filepath))

    def _render_cell(
        self,
        cell: Cell,
        cell_index: int,
        cell_renderer: CellRenderer,
        collector: DiagnosticCollector,
    ) -> RenderedCell:
        if self.strict and cell.kind is None:
            raise NotebookParseError(
                f"Unrecognized cell type {cell.cell_type!r} in cell {cell_index}"
            )

        input_html = cell_renderer.render(cell, collector.reporter(cell_index))

        outputs = []
        for output_index, output in enumerate(cell.outputs):
            if self.strict and output.kind is None:
                raise NotebookParseError(
                    f"Unrecognized output type {output.output_type!r} "
                    f"in cell {cell_index}, output {output_index}"
                )
            html = self.output_renderer.render(
                output, collector.reporter(cell_index, output_index)
            )
            outputs.append(
                RenderedOutput(
                    output_type=output.output_type,
                    html=html,
                    execution_count=output.execution_count,
                    stream_name=output.name if output.output_type == "stream" else None,
                )
            )

        return RenderedCell(
            cell_type=cell.cell_type,
            input_html=input_html,
            execution_count=cell.execution_count,
            outputs=tuple(outputs),
        )


def convert_string(content: str, strict: bool = False) -> str:
    """Convert notebook JSON text to an HTML fragment.

    Diagnostics are logged; use NotebookConverter to collect them.

    Raises:
        NotebookParseError: If the notebook cannot be parsed or is too old
    """
    return NotebookConverter(strict=strict).convert_string(content).html


def convert_file(filepath: Path | str, strict: bool = False) -> str:
    """Convert a notebook file to an HTML fragment.

    Raises:
        NotebookReadError: If the file cannot be read
        NotebookParseError: If the notebook cannot be parsed or is too old
    """
    return NotebookConverter(strict=strict).convert_file(filepath).html
