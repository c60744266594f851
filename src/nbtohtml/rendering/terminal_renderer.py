"""Terminal output (ANSI escape codes) to HTML."""

from typing import Iterable

from nbconvert.filters.ansi import ansi2html

from nbtohtml import RenderError


def render_terminal_line(line: str) -> str:
    """Convert one line of terminal output to escaped HTML.

    Colors become spans with ansi-* CSS classes.
    """
    try:
        return str(ansi2html(line))
    except Exception as e:
        raise RenderError(f"Failed to convert terminal output: {e}") from e


def render_traceback(lines: Iterable[str]) -> str:
    """Render traceback lines inside a single <pre> block.

    Lines are converted independently because each conversion starts from
    the default color state.
    """
    return "<pre>{}</pre>".format("\n".join(render_terminal_line(line) for line in lines))
