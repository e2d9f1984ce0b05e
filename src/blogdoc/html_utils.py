"""Shared HTML utilities for the document renderers."""

from __future__ import annotations

import re
from typing import Iterable

from blogdoc.config import BLOGDOC_ALLOWED_URL_SCHEMES, BLOGDOC_FALLBACK_MESSAGE
from blogdoc.formatting import TextFormat, apply_format, flag_name
from blogdoc.schemas.nodes import CodeNode, TextNode
from blogdoc.schemas.theme import RenderTheme

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc


_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
_IGNORED_URL_CHARS_RE = re.compile(r"[\x00-\x20\x7f]")
UNSAFE_URL_REPLACEMENT = "about:blank"


def new_soup() -> BeautifulSoup:
    """Empty soup used only as a tag factory."""
    return BeautifulSoup("", "lxml")


def make_tag(
    soup: BeautifulSoup,
    name: str,
    css_class: str | None = None,
    **attrs: str,
) -> Tag:
    attributes = {key: value for key, value in attrs.items() if value is not None}
    if css_class:
        attributes["class"] = css_class
    return soup.new_tag(name, attrs=attributes)


def append_all(parent: Tag, elements: Iterable[PageElement]) -> Tag:
    for element in elements:
        parent.append(element)
    return parent


def sanitize_url(url: str) -> str:
    """Replace URLs with a disallowed scheme (``javascript:``, ``data:``...).

    Relative URLs and fragments pass through unchanged.
    """
    candidate = url.strip()
    match = _SCHEME_RE.match(_IGNORED_URL_CHARS_RE.sub("", candidate))
    if match and match.group(1).lower() not in BLOGDOC_ALLOWED_URL_SCHEMES:
        return UNSAFE_URL_REPLACEMENT
    return candidate


def format_text(
    soup: BeautifulSoup, text: str, mask: int, theme: RenderTheme
) -> list[PageElement]:
    """Wrap ``text`` in one tag per format flag, in codec order."""
    if not text:
        return []

    def wrap(flag: TextFormat, inner: list[PageElement]) -> list[PageElement]:
        tag = make_tag(soup, theme.format_tag(flag), theme.class_for(flag_name(flag)))
        return [append_all(tag, inner)]

    return apply_format([NavigableString(text)], mask, wrap)


def render_text_node(
    soup: BeautifulSoup, node: TextNode, theme: RenderTheme
) -> list[PageElement]:
    return format_text(soup, node.text, node.format, theme)


def code_attributes(node: CodeNode) -> tuple[dict[str, str], str | None]:
    """``pre`` attributes and ``code`` class for a code block."""
    if not node.language:
        return {}, None
    return {"data-language": node.language}, f"language-{node.language}"


def render_fallback(theme: RenderTheme, message: str | None = None) -> str:
    """The fixed block shown when content cannot be parsed."""
    soup = new_soup()
    block = make_tag(soup, "div", theme.fallback_class)
    block.append(NavigableString(message or BLOGDOC_FALLBACK_MESSAGE))
    return str(block)
