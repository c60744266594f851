"""Syntax highlighting of code cells with Pygments."""

import logging
from functools import lru_cache

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename, guess_lexer
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from nbtohtml import HighlightError

logger = logging.getLogger(__name__)

DEFAULT_CSS_CLASS = "highlight"


def find_lexer(source: str, language_hint: str = "") -> Lexer:
    """Pick a lexer for a piece of source code.

    The hint is tried as a lexer alias, then as a file extension. Without a
    usable hint the lexer is guessed from the content, falling back to plain
    text.

    Args:
        source: Source code to highlight
        language_hint: Lexer alias or file extension (e.g. "py"), may be empty

    Returns:
        Lexer: A Pygments lexer instance
    """
    if language_hint:
        try:
            return get_lexer_by_name(language_hint)
        except ClassNotFound:
            pass
        try:
            return get_lexer_for_filename(f"cell.{language_hint}", code=source)
        except ClassNotFound:
            logger.debug("No lexer for language hint %r", language_hint)

    try:
        return guess_lexer(source)
    except ClassNotFound:
        return TextLexer()


@lru_cache(maxsize=None)
def get_formatter(css_class: str = DEFAULT_CSS_CLASS) -> HtmlFormatter:
    """Class-based HTML formatter, shared per CSS class."""
    return HtmlFormatter(cssclass=css_class)


def highlight_code(
    source: str, language_hint: str = "", css_class: str = DEFAULT_CSS_CLASS
) -> str:
    """Highlight source code as an HTML fragment.

    Pygments escapes the source, so the fragment is trusted. Styling is done
    with CSS classes (see nbtohtml.styles.code_css).

    Args:
        source: Source code
        language_hint: Lexer alias or file extension
        css_class: CSS class of the wrapping div

    Returns:
        str: Highlighted HTML

    Raises:
        HighlightError: If tokenizing or formatting fails
    """
    try:
        lexer = find_lexer(source, language_hint)
        return highlight(source, lexer, get_formatter(css_class))
    except Exception as e:
        raise HighlightError(f"Could not highlight source code: {e}") from e
