"""Allow-list sanitization of untrusted HTML.

Author-supplied text/html and image/svg+xml outputs go through
UGC_POLICY before they are embedded. Plain text is escaped instead.
"""

import html
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

import nh3

from nbtohtml import RenderError

SAFE_URL_SCHEMES = frozenset({"http", "https", "mailto", "ftp"})
SAFE_DATA_IMAGE_TYPES = frozenset({"image/png", "image/jpeg", "image/gif", "image/webp"})

_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
_IGNORED_URL_CHARS_RE = re.compile(r"[\x00-\x20]")
_DATA_URI_RE = re.compile(r"^data:([a-z]+/[a-z0-9.+\-]+)[;,]", re.IGNORECASE)


def is_safe_url(url: str, allow_data_images: bool = False) -> bool:
    """Check whether a link or image URL may be emitted.

    Relative URLs are always allowed. Absolute URLs must use one of
    SAFE_URL_SCHEMES, or be a raster image data URI when allow_data_images
    is set.
    """
    # Browsers ignore control characters and whitespace inside the scheme
    normalized = _IGNORED_URL_CHARS_RE.sub("", url)
    match = _SCHEME_RE.match(normalized)
    if match is None:
        return True

    scheme = match.group(1).lower()
    if scheme in SAFE_URL_SCHEMES:
        return True
    if scheme == "data" and allow_data_images:
        data_match = _DATA_URI_RE.match(normalized)
        return bool(data_match) and data_match.group(1).lower() in SAFE_DATA_IMAGE_TYPES
    return False


def escape_html(text: str) -> str:
    """Escape &, <, >, and quotes so text renders literally."""
    return html.escape(text, quote=True)


# Elements and attributes of user-generated content
UGC_TAGS = frozenset({
    "a", "abbr", "acronym", "b", "bdi", "bdo", "blockquote", "br", "caption",
    "cite", "code", "col", "colgroup", "dd", "del", "details", "dfn", "div",
    "dl", "dt", "em", "figcaption", "figure", "h1", "h2", "h3", "h4", "h5",
    "h6", "hr", "i", "img", "ins", "kbd", "li", "mark", "ol", "p", "pre", "q",
    "rp", "rt", "ruby", "s", "samp", "small", "span", "strike", "strong",
    "sub", "summary", "sup", "table", "tbody", "td", "tfoot", "th", "thead",
    "time", "tr", "tt", "u", "ul", "var", "wbr",
})

# Static SVG drawing elements, names as the HTML parser case-folds them
SVG_TAGS = frozenset({
    "svg", "g", "defs", "path", "circle", "ellipse", "line", "polygon",
    "polyline", "rect", "text", "tspan", "linearGradient", "radialGradient",
    "stop", "clipPath",
})

_GENERIC_ATTRIBUTES = frozenset({"class", "dir", "lang", "title"})

_SVG_ATTRIBUTES = frozenset({
    "clip-path", "cx", "cy", "d", "dx", "dy", "fill", "fill-opacity",
    "fill-rule", "font-family", "font-size", "font-weight", "gradientTransform",
    "gradientUnits", "height", "offset", "opacity", "points",
    "preserveAspectRatio", "r", "rx", "ry", "stop-color", "stop-opacity",
    "stroke", "stroke-dasharray", "stroke-linecap", "stroke-linejoin",
    "stroke-opacity", "stroke-width", "text-anchor", "transform", "viewBox",
    "width", "x", "x1", "x2", "xmlns", "y", "y1", "y2",
})

UGC_ATTRIBUTES: Mapping[str, frozenset[str]] = MappingProxyType({
    "*": _GENERIC_ATTRIBUTES,
    "a": frozenset({"href", "hreflang", "name"}),
    "blockquote": frozenset({"cite"}),
    "col": frozenset({"span", "width"}),
    "colgroup": frozenset({"span", "width"}),
    "del": frozenset({"cite", "datetime"}),
    "details": frozenset({"open"}),
    "img": frozenset({"alt", "height", "src", "width"}),
    "ins": frozenset({"cite", "datetime"}),
    "li": frozenset({"value"}),
    "ol": frozenset({"reversed", "start", "type"}),
    "q": frozenset({"cite"}),
    "table": frozenset({"align", "border", "summary", "width"}),
    "td": frozenset({"align", "colspan", "headers", "rowspan", "valign"}),
    "th": frozenset({"align", "colspan", "headers", "rowspan", "scope", "valign"}),
    "time": frozenset({"datetime"}),
    "tr": frozenset({"align", "valign"}),
    **{tag: _SVG_ATTRIBUTES for tag in SVG_TAGS},
})

_URL_ATTRIBUTES = frozenset({"href", "src", "cite"})


def _filter_attribute(element: str, attribute: str, value: str) -> Optional[str]:
    """Keep data URIs only as raster image sources."""
    if attribute not in _URL_ATTRIBUTES:
        return value
    allow_data_images = element == "img" and attribute == "src"
    if is_safe_url(value, allow_data_images=allow_data_images):
        return value
    return None


@dataclass(frozen=True)
class SanitizerPolicy:
    """Immutable allow-list policy applied with nh3.

    Attributes:
        tags: Elements that are kept
        attributes: Allowed attributes per element, "*" applies to all
        url_schemes: Schemes allowed in URL attributes
        link_rel: rel value forced onto links
    """

    tags: frozenset[str]
    attributes: Mapping[str, frozenset[str]]
    url_schemes: frozenset[str]
    link_rel: Optional[str] = "noopener noreferrer"

    def sanitize(self, fragment: str) -> str:
        """Strip everything the policy does not allow from an HTML fragment.

        Raises:
            RenderError: If nh3 rejects the input or the policy
        """
        try:
            return nh3.clean(
                fragment,
                tags=set(self.tags),
                attributes={tag: set(attrs) for tag, attrs in self.attributes.items()},
                attribute_filter=_filter_attribute,
                url_schemes=set(self.url_schemes),
                link_rel=self.link_rel,
            )
        except Exception as e:
            raise RenderError(f"Failed to sanitize HTML: {e}") from e


# User-generated-content profile extended with data URI images and static SVG
UGC_POLICY = SanitizerPolicy(
    tags=UGC_TAGS | SVG_TAGS,
    attributes=UGC_ATTRIBUTES,
    url_schemes=SAFE_URL_SCHEMES | {"data"},
)


def sanitize_html(fragment: str) -> str:
    """Sanitize an untrusted HTML or SVG fragment with UGC_POLICY."""
    return UGC_POLICY.sanitize(fragment)
