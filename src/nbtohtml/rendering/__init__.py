"""Content renderers used by the conversion pipeline."""

from nbtohtml.rendering.code_highlighter import highlight_code
from nbtohtml.rendering.markdown_renderer import render_markdown
from nbtohtml.rendering.sanitizer import escape_html, sanitize_html
from nbtohtml.rendering.terminal_renderer import render_terminal_line, render_traceback

__all__ = [
    "escape_html",
    "highlight_code",
    "render_markdown",
    "render_terminal_line",
    "render_traceback",
    "sanitize_html",
]
