"""Stylesheets for embedding converted notebooks.

The fragment only carries CSS class hooks. These helpers produce matching
styles for pages that do not bring their own.
"""

from pygments.formatters import HtmlFormatter
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound

from nbtohtml import ConfigurationError
from nbtohtml.rendering.code_highlighter import DEFAULT_CSS_CLASS

NOTEBOOK_CSS = """\
.notebook { display: flex; flex-direction: column; gap: 1em; }
.notebook .input-wrapper, .notebook .output-wrapper { display: flex; align-items: flex-start; }
.notebook .input-prompt, .notebook .output-prompt {
  flex: 0 0 5em; padding-right: 0.5em; text-align: right;
  font-family: monospace; color: #888; user-select: none;
}
.notebook .input, .notebook .output { flex: 1 1 auto; min-width: 0; overflow-x: auto; }
.notebook .cell-code .input pre { padding: 0.5em; border-radius: 3px; }
.notebook .output pre { margin: 0.25em 0; white-space: pre-wrap; }
.notebook .output-error pre, .notebook .output-stream-stderr pre { color: #b22222; }
.notebook .output img { max-width: 100%; }
.notebook .ansi-black-fg { color: #3e424d; }
.notebook .ansi-red-fg { color: #e75c58; }
.notebook .ansi-green-fg { color: #00a250; }
.notebook .ansi-yellow-fg { color: #ddb62b; }
.notebook .ansi-blue-fg { color: #208ffb; }
.notebook .ansi-magenta-fg { color: #d160c4; }
.notebook .ansi-cyan-fg { color: #60c6c8; }
.notebook .ansi-white-fg { color: #c5c1b4; }
.notebook .ansi-bold { font-weight: bold; }
.notebook .ansi-underline { text-decoration: underline; }
"""


def available_styles() -> list[str]:
    """Names of the installed Pygments styles, sorted."""
    return sorted(get_all_styles())


def _style_defs(style: str, css_class: str) -> str:
    try:
        formatter = HtmlFormatter(style=style, cssclass=css_class)
    except ClassNotFound as e:
        raise ConfigurationError(f"Unknown Pygments style {style!r}") from e
    return formatter.get_style_defs(f".{css_class}")


def code_css(
    light_style: str = "default",
    dark_style: str = "monokai",
    css_class: str = DEFAULT_CSS_CLASS,
) -> str:
    """Syntax highlighting CSS with a dark variant.

    Args:
        light_style: Pygments style for light mode
        dark_style: Pygments style used when the page prefers a dark scheme
        css_class: CSS class of highlighted blocks

    Returns:
        str: CSS text

    Raises:
        ConfigurationError: If a style is not installed
    """
    light = _style_defs(light_style, css_class)
    dark = _style_defs(dark_style, css_class)
    return f"{light}\n@media (prefers-color-scheme: dark) {{\n{dark}\n}}\n"


def notebook_css() -> str:
    """CSS for the notebook container class hooks."""
    return NOTEBOOK_CSS


def render_styles(
    include_code_css: bool = True,
    include_notebook_css: bool = True,
    light_style: str = "default",
    dark_style: str = "monokai",
    css_class: str = DEFAULT_CSS_CLASS,
) -> str:
    """Requested stylesheets wrapped in a <style> element, or "" if none."""
    parts = []
    if include_notebook_css:
        parts.append(notebook_css())
    if include_code_css:
        parts.append(code_css(light_style, dark_style, css_class))
    if not parts:
        return ""
    return "<style>\n{}</style>".format("".join(parts))
