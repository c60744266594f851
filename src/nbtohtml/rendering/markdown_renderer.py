"""Markdown rendering.

Markdown cells and text/markdown outputs are rendered with Python-Markdown.
Raw HTML is disabled and links or images with unsafe URL schemes lose their
target, so the rendered HTML does not need sanitizing.
"""

from types import MappingProxyType
from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from nbtohtml import RenderError
from nbtohtml.rendering.code_highlighter import DEFAULT_CSS_CLASS
from nbtohtml.rendering.sanitizer import is_safe_url


class UnsafeUrlTreeprocessor(Treeprocessor):
    """Drop href/src attributes that point to unsafe URL schemes."""

    def run(self, root: Element) -> None:
        for elem in root.iter():
            href = elem.get("href")
            if href is not None and not is_safe_url(href):
                del elem.attrib["href"]

            src = elem.get("src")
            if src is not None and not is_safe_url(src, allow_data_images=elem.tag == "img"):
                del elem.attrib["src"]


class NoRawHtmlExtension(Extension):
    """Disable raw HTML passthrough and filter unsafe URLs.

    Raw HTML blocks and inline tags are left to the regular text handling,
    which escapes them.
    """

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
        # Runs after the inline treeprocessor has created links and images
        md.treeprocessors.register(UnsafeUrlTreeprocessor(md), "unsafe_url", priority=5)

MARKDOWN_EXTENSIONS = ("fenced_code", "tables", "sane_lists", "codehilite")
MARKDOWN_EXTENSION_CONFIGS = MappingProxyType(
    {
        "codehilite": MappingProxyType({"guess_lang": False}),
    }
)


def create_markdown(css_class: str = DEFAULT_CSS_CLASS) -> markdown.Markdown:
    """Create a Markdown instance with the shared, read-only configuration.

    Markdown instances keep per-document state, so one is created per render.

    Args:
        css_class: CSS class of highlighted fenced code blocks
    """
    extension_configs = {
        name: dict(config) for name, config in MARKDOWN_EXTENSION_CONFIGS.items()
    }
    extension_configs["codehilite"]["css_class"] = css_class
    return markdown.Markdown(
        extensions=[*MARKDOWN_EXTENSIONS, NoRawHtmlExtension()],
        extension_configs=extension_configs,
        output_format="html",
    )


def render_markdown(text: str, css_class: str = DEFAULT_CSS_CLASS) -> str:
    """Render Markdown text to a trusted HTML fragment.

    Args:
        text: Markdown source
        css_class: CSS class of highlighted fenced code blocks

    Returns:
        str: HTML fragment

    Raises:
        RenderError: If Python-Markdown fails on the input
    """
    try:
        return create_markdown(css_class).convert(text)
    except Exception as e:
        raise RenderError(f"Failed to render Markdown: {e}") from e
