"""Render a document tree to HTML for the article detail view.

Every node kind is covered. Nodes of an unknown kind, and a root node found
below the top of the tree, render as the concatenation of their children (or
nothing when they have none), so content written by a newer editor still
shows its text.
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
    sanitize_url,
)
from blogdoc.schemas.nodes import (
    CodeNode,
    Document,
    HeadingNode,
    LineBreakNode,
    LinkNode,
    ListItemNode,
    ListNode,
    Node,
    ParagraphNode,
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


class HtmlRenderer:
    """Full-fidelity HTML renderer.

    The renderer keeps no per-document state, so one instance can serve any
    number of documents.
    """

    def __init__(self, theme: RenderTheme | None = None) -> None:
        self.theme = theme or DEFAULT_THEME
        self._soup = new_soup()

    def render(self, document: Document) -> str:
        container = make_tag(self._soup, "div", self.theme.root_class)
        for node in document.root.children:
            append_all(container, self.render_node(node))
        return str(container)

    def render_node(self, node: Node) -> list[PageElement]:
        if isinstance(node, TextNode):
            return render_text_node(self._soup, node, self.theme)

        if isinstance(node, ParagraphNode):
            return [self._block("p", "paragraph", node)]

        if isinstance(node, HeadingNode):
            return [self._block(node.tag, node.tag, node)]

        if isinstance(node, ListNode):
            name = "ol" if node.ordered else "ul"
            attrs = {"start": str(node.start)} if node.ordered and node.start != 1 else {}
            return [self._block(name, name, node, **attrs)]

        if isinstance(node, ListItemNode):
            return [self._block("li", "listitem", node)]

        if isinstance(node, QuoteNode):
            return [self._block("blockquote", "quote", node)]

        if isinstance(node, CodeNode):
            return [self._render_code(node)]

        if isinstance(node, LinkNode):
            attrs = {
                "href": sanitize_url(node.url),
                "target": node.target,
                "rel": node.rel,
                "title": node.title,
            }
            return [self._block("a", "link", node, **attrs)]

        if isinstance(node, LineBreakNode):
            return [make_tag(self._soup, "br")]

        # Unknown kinds and nested roots.
        logger.debug("Flattening node of kind %r", node.type)
        return self._render_children(node)

    def _render_children(self, node: Node) -> list[PageElement]:
        elements: list[PageElement] = []
        for child in child_nodes(node):
            elements.extend(self.render_node(child))
        return elements

    def _block(self, name: str, element: str, node: Node, **attrs: str | None) -> Tag:
        tag = make_tag(self._soup, name, self.theme.class_for(element), **attrs)
        return append_all(tag, self._render_children(node))

    def _render_code(self, node: CodeNode) -> Tag:
        pre_attrs, code_class = code_attributes(node)
        pre = make_tag(self._soup, "pre", self.theme.class_for("code"), **pre_attrs)
        code = make_tag(self._soup, "code", code_class)
        if node.children:
            append_all(code, self._render_children(node))
        elif node.text:
            code.append(NavigableString(node.text))
        pre.append(code)
        return pre


def render_document(document: Document, *, theme: RenderTheme | None = None) -> str:
    """Render a parsed document to HTML."""
    return HtmlRenderer(theme).render(document)


def render_html(content: str, *, theme: RenderTheme | None = None) -> str:
    """Parse persisted content and render it to HTML.

    Content that cannot be parsed renders as the fixed "content unavailable"
    block; this function does not raise for any string input.
    """
    result = deserialize(content)
    if isinstance(result, ParseError):
        logger.warning("Showing fallback for unparseable document: %s", result)
        return render_fallback(theme or DEFAULT_THEME)
    return render_document(result, theme=theme)
