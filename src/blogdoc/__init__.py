"""blogdoc: store blog posts as document trees and render them."""

from blogdoc.excerpt import flatten, make_excerpt
from blogdoc.exceptions import BlogdocError, ConfigError, ParseError
from blogdoc.formatting import TextFormat, apply_format, decode_format, encode_format
from blogdoc.html_renderer import HtmlRenderer, render_document, render_html
from blogdoc.legacy_markup import convert_markup_to_html
from blogdoc.markdown import convert_to_markdown, render_markdown
from blogdoc.preview import PreviewRenderer, render_preview
from blogdoc.rendering import RenderMode, RenderOptions, render_content
from blogdoc.schemas import Document, RenderResult, RenderTheme, get_theme
from blogdoc.serializer import deserialize, load_document, parse_document, serialize

__all__ = [
    "BlogdocError",
    "ConfigError",
    "Document",
    "HtmlRenderer",
    "ParseError",
    "PreviewRenderer",
    "RenderMode",
    "RenderOptions",
    "RenderResult",
    "RenderTheme",
    "TextFormat",
    "apply_format",
    "convert_markup_to_html",
    "convert_to_markdown",
    "decode_format",
    "deserialize",
    "encode_format",
    "flatten",
    "get_theme",
    "load_document",
    "make_excerpt",
    "parse_document",
    "render_content",
    "render_document",
    "render_html",
    "render_markdown",
    "render_preview",
    "serialize",
]
