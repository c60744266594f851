"""Rendering of cell outputs.

Outputs are dispatched on their kind. Display data and execute results carry
several representations of one value; REPRESENTATIONS lists them in priority
order and the first one present is rendered.
"""

from dataclasses import dataclass
from typing import Any, Callable

from nbtohtml import RenderError
from nbtohtml.conversion.diagnostics import Reporter, log_only
from nbtohtml.models import MimeType, Output, OutputData, OutputType
from nbtohtml.rendering import escape_html, render_markdown, render_traceback, sanitize_html
from nbtohtml.rendering.code_highlighter import DEFAULT_CSS_CLASS

UNKNOWN_ERROR_HTML = "<pre>An unknown error occurred</pre>"


def preformatted(text: str) -> str:
    """Escape text and wrap it in a <pre> block."""
    return f"<pre>{escape_html(text)}</pre>"


def image_tag(mime_type: MimeType, blob: str) -> str:
    """Inline image element for a base64-encoded blob."""
    payload = "".join(blob.split())
    return f'<img src="data:{mime_type.value};base64,{escape_html(payload)}">'


@dataclass(frozen=True)
class Representation:
    """One entry of the representation priority list.

    Attributes:
        mime_type: Content type the entry handles
        render: Turns the stored value and the code CSS class into an HTML fragment
        supported: False for content types rendered as a placeholder
    """

    mime_type: MimeType
    render: Callable[[Any, str], str]
    supported: bool = True

    def matches(self, data: OutputData) -> bool:
        return data.get(self.mime_type) is not None


def _placeholder(label: str) -> Callable[[Any, str], str]:
    return lambda value, css_class: f"<pre>{label}</pre>"


REPRESENTATIONS: tuple[Representation, ...] = (
    Representation(MimeType.HTML, lambda value, css_class: sanitize_html("".join(value))),
    Representation(MimeType.PDF, _placeholder("PDF output"), supported=False),
    Representation(MimeType.LATEX, _placeholder("LaTeX output"), supported=False),
    Representation(MimeType.SVG, lambda value, css_class: sanitize_html("".join(value))),
    Representation(MimeType.PNG, lambda value, css_class: image_tag(MimeType.PNG, value)),
    Representation(MimeType.JPEG, lambda value, css_class: image_tag(MimeType.JPEG, value)),
    Representation(
        MimeType.MARKDOWN,
        lambda value, css_class: render_markdown("".join(value), css_class=css_class),
    ),
    Representation(MimeType.PLAIN, lambda value, css_class: preformatted("".join(value))),
)


def select_representation(data: OutputData) -> Representation | None:
    """Return the highest-priority representation present in the payload."""
    for representation in REPRESENTATIONS:
        if representation.matches(data):
            return representation
    return None


class OutputRenderer:
    """Render a single output to an HTML fragment.

    Problems are reported through the given reporter and never raised: the
    output degrades to a placeholder or an empty fragment.
    """

    def __init__(self, css_class: str = DEFAULT_CSS_CLASS):
        """Initialize output renderer.

        Args:
            css_class: CSS class for code highlighted inside Markdown outputs
        """
        self.css_class = css_class
        self._by_kind: dict[OutputType, Callable[[Output, Reporter], str]] = {
            OutputType.STREAM: self.render_stream,
            OutputType.ERROR: self.render_error,
            OutputType.DISPLAY_DATA: self.render_data,
            OutputType.EXECUTE_RESULT: self.render_data,
        }

    def render(self, output: Output, report: Reporter = log_only) -> str:
        """Render an output.

        Args:
            output: Output to render
            report: Receives diagnostics for this output

        Returns:
            str: HTML fragment, possibly empty
        """
        kind = output.kind
        if kind is None:
            report(
                "unknown-output-type",
                f"Missing conversion logic for output type {output.output_type!r}",
            )
            return ""

        try:
            return self._by_kind[kind](output, report)
        except RenderError as e:
            report("render-failed", f"Could not render {kind.value} output: {e}")
            return ""

    def render_stream(self, output: Output, report: Reporter) -> str:
        text = output.text_content
        if text is None:
            report("missing-text", "Missing 'text' key in output of type 'stream'")
            return ""
        return preformatted(text)

    def render_error(self, output: Output, report: Reporter) -> str:
        if output.traceback is None:
            report("missing-traceback", "Missing 'traceback' key in output of type 'error'")
            return UNKNOWN_ERROR_HTML
        return render_traceback(output.traceback)

    def render_data(self, output: Output, report: Reporter) -> str:
        representation = select_representation(output.data or OutputData())
        if representation is None:
            report(
                "missing-data",
                f"No supported data type in output of type {output.output_type!r}",
            )
            return ""

        if not representation.supported:
            report(
                "unsupported-mime-type",
                f"Missing conversion logic for {representation.mime_type.value!r} data",
            )
        return representation.render(
            output.data.get(representation.mime_type), self.css_class
        )
