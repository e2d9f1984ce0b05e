"""Lightweight HTML preview of a document.

The preview is built for a glance, not for fidelity. It only walks the root's
direct children and handles headings, lists, quotes and code blocks; every
other kind renders like a paragraph.

Truncation rules:

* Headings, quotes, code blocks and each list item show only their first
  child, and only when that child is a text node.
* A text node placed directly in a list becomes a whole item. Any other
  non-item child of a list is summarized like an item and always counts as
  truncated.
* Paragraph-like blocks show their direct text children and drop everything
  else (links, nested blocks).

Any element that lost content this way carries ``data-truncated="true"``.
Text formatting and heading levels follow the full renderer exactly.
"""

from __future__ import annotations

from blogdoc.exceptions import ParseError
from blogdoc.html_utils import (
    append_all,
    code_attributes,
    make_tag,
    new_soup,
    render_fallback,
    render_text_node,
)
from blogdoc.schemas.nodes import (
    CodeNode,
    Document,
    HeadingNode,
    ListItemNode,
    ListNode,
    Node,
    QuoteNode,
    TextNode,
)
from blogdoc.schemas.theme import DEFAULT_THEME, RenderTheme
from blogdoc.serializer import deserialize
from blogdoc.tree import child_nodes
from blogdoc.utils.logging_config import get_logger

try:
    from bs4.element import NavigableString, PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc

logger = get_logger(__name__)

TRUNCATED_ATTR = "data-truncated"


class PreviewRenderer:
    def __init__(self, theme: RenderTheme | None = None) -> None:
        self.theme = theme or DEFAULT_THEME
        self._soup = new_soup()

    def render(self, document: Document) -> str:
        container = make_tag(self._soup, "div", self.theme.preview_class)
        for node in document.root.children:
            container.append(self.render_block(node))
        return str(container)

    def render_block(self, node: Node) -> Tag:
        if isinstance(node, HeadingNode):
            return self._summary_tag(node.tag, node.tag, node)

        if isinstance(node, ListNode):
            name = "ol" if node.ordered else "ul"
            tag = make_tag(self._soup, name, self.theme.class_for(name))
            for item in child_nodes(node):
                tag.append(self._render_list_item(item))
            return tag

        if isinstance(node, QuoteNode):
            return self._summary_tag("blockquote", "quote", node)

        if isinstance(node, CodeNode):
            return self._render_code(node)

        return self._render_paragraph(node)

    def _summary(self, node: Node) -> tuple[list[PageElement], bool]:
        """First child of ``node`` if it is text, plus whether anything was dropped."""
        children = child_nodes(node)
        if not children:
            return [], False
        first = children[0]
        truncated = len(children) > 1 or not isinstance(first, TextNode)
        if not isinstance(first, TextNode):
            return [], truncated
        return render_text_node(self._soup, first, self.theme), truncated

    def _summary_tag(self, name: str, element: str, node: Node) -> Tag:
        elements, truncated = self._summary(node)
        tag = make_tag(self._soup, name, self.theme.class_for(element))
        _mark_truncated(tag, truncated)
        return append_all(tag, elements)

    def _render_list_item(self, item: Node) -> Tag:
        if isinstance(item, ListItemNode):
            return self._summary_tag("li", "listitem", item)

        tag = make_tag(self._soup, "li", self.theme.class_for("listitem"))
        if isinstance(item, TextNode):
            return append_all(tag, render_text_node(self._soup, item, self.theme))
        # Anything else loses at least its own element.
        elements, _ = self._summary(item)
        _mark_truncated(tag, True)
        return append_all(tag, elements)

    def _render_code(self, node: CodeNode) -> Tag:
        pre_attrs, code_class = code_attributes(node)
        pre = make_tag(self._soup, "pre", self.theme.class_for("code"), **pre_attrs)
        code = make_tag(self._soup, "code", code_class)
        if node.children:
            elements, truncated = self._summary(node)
            _mark_truncated(pre, truncated)
            append_all(code, elements)
        elif node.text:
            code.append(NavigableString(node.text))
        pre.append(code)
        return pre

    def _render_paragraph(self, node: Node) -> Tag:
        tag = make_tag(self._soup, "p", self.theme.class_for("paragraph"))
        truncated = False
        for child in child_nodes(node):
            if isinstance(child, TextNode):
                append_all(tag, render_text_node(self._soup, child, self.theme))
            else:
                truncated = True
        _mark_truncated(tag, truncated)
        return tag


def _mark_truncated(tag: Tag, truncated: bool) -> None:
    if truncated:
        tag[TRUNCATED_ATTR] = "true"


def render_preview_document(document: Document, *, theme: RenderTheme | None = None) -> str:
    return PreviewRenderer(theme).render(document)


def render_preview(content: str, *, theme: RenderTheme | None = None) -> str:
    """Parse persisted content and render the preview.

    Unparseable content renders as the same fixed fallback block as the full
    renderer.
    """
    result = deserialize(content)
    if isinstance(result, ParseError):
        logger.warning("Showing preview fallback for unparseable document: %s", result)
        return render_fallback(theme or DEFAULT_THEME)
    return render_preview_document(result, theme=theme)
