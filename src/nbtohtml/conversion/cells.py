"""Rendering of cell inputs."""

from typing import Callable

from nbtohtml import HighlightError, RenderError
from nbtohtml.conversion.diagnostics import Reporter, log_only
from nbtohtml.conversion.outputs import preformatted
from nbtohtml.models import Cell, CellType
from nbtohtml.rendering import highlight_code, render_markdown
from nbtohtml.rendering.code_highlighter import DEFAULT_CSS_CLASS


class CellRenderer:
    """Render the visible input of a cell to an HTML fragment.

    Markdown cells go through the Markdown renderer, code cells through the
    syntax highlighter and raw cells are shown literally.
    """

    def __init__(self, language_id: str = "", css_class: str = DEFAULT_CSS_CLASS):
        """Initialize cell renderer.

        Args:
            language_id: Language hint of the notebook (see Notebook.language_id)
            css_class: CSS class for highlighted code blocks
        """
        self.language_id = language_id
        self.css_class = css_class
        self._by_kind: dict[CellType, Callable[[Cell, Reporter], str]] = {
            CellType.MARKDOWN: self.render_markdown,
            CellType.CODE: self.render_code,
            CellType.RAW: self.render_raw,
        }

    def render(self, cell: Cell, report: Reporter = log_only) -> str:
        """Render a cell input.

        Args:
            cell: Cell to render
            report: Receives diagnostics for this cell

        Returns:
            str: HTML fragment, empty for unknown cell types
        """
        kind = cell.kind
        if kind is None:
            report("unknown-cell-type", f"Skipping cell (unrecognized cell type {cell.cell_type!r})")
            return ""

        try:
            return self._by_kind[kind](cell, report)
        except RenderError as e:
            report("render-failed", f"Could not render {kind.value} cell: {e}")
            return preformatted(cell.source_text)

    def render_markdown(self, cell: Cell, report: Reporter) -> str:
        return render_markdown(cell.source_text, css_class=self.css_class)

    def render_code(self, cell: Cell, report: Reporter) -> str:
        source = cell.source_text
        try:
            return highlight_code(source, self.language_id, css_class=self.css_class)
        except HighlightError as e:
            report("highlight-failed", f"Skipping syntax highlighting: {e}")
            return preformatted(source)

    def render_raw(self, cell: Cell, report: Reporter) -> str:
        return preformatted(cell.source_text)
