"""Convert a document tree to Markdown with a custom serializer."""

from __future__ import annotations

import re

from blogdoc.exceptions import ParseError
from blogdoc.formatting import TextFormat, apply_format
from blogdoc.html_utils import sanitize_url
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
from blogdoc.serializer import deserialize
from blogdoc.tree import child_nodes

# Opening and closing marker per flag; the same markers the legacy free-text
# converter understands.
_FORMAT_MARKERS = {
    TextFormat.BOLD: ("**", "**"),
    TextFormat.ITALIC: ("*", "*"),
    TextFormat.UNDERLINE: ("<u>", "</u>"),
    TextFormat.STRIKETHROUGH: ("~~", "~~"),
}


def render_markdown(document: Document) -> str:
    """Serialize a parsed document into Markdown blocks separated by blank lines."""
    blocks = _serialize_children(document.root)
    return "\n\n".join(block for block in blocks if block).strip()


def convert_to_markdown(content: str) -> str:
    """Parse persisted content and convert it; plain text input is returned as is."""
    result = deserialize(content)
    if isinstance(result, ParseError):
        return content
    return render_markdown(result)


def _serialize_children(node: Node) -> list[str]:
    blocks: list[str] = []
    for child in child_nodes(node):
        blocks.extend(_serialize_block(child))
    return blocks


def _serialize_block(node: Node) -> list[str]:
    if isinstance(node, HeadingNode):
        heading = _cleanup_inline_text(_serialize_children_inline(node))
        if not heading:
            return []
        return [f"{'#' * node.level} {heading}"]

    if isinstance(node, ParagraphNode):
        paragraph = _cleanup_inline_text(_serialize_children_inline(node))
        return [paragraph] if paragraph else []

    if isinstance(node, ListNode):
        lines = _serialize_list(node)
        return ["\n".join(lines)] if lines else []

    if isinstance(node, QuoteNode):
        content = _cleanup_inline_text(_serialize_children_inline(node))
        if not content:
            return []
        return ["\n".join("> " + line for line in content.split("\n"))]

    if isinstance(node, CodeNode):
        return [_serialize_code(node)]

    if isinstance(node, (TextNode, LinkNode, LineBreakNode, ListItemNode)):
        inline = _cleanup_inline_text(_serialize_inline(node))
        return [inline] if inline else []

    # Unknown kinds and nested roots.
    return _serialize_children(node)


def _serialize_inline(node: Node) -> str:
    if isinstance(node, TextNode):
        if not node.text:
            return ""
        return apply_format(node.text, node.format, _wrap_marker)

    if isinstance(node, LineBreakNode):
        return "\n"

    if isinstance(node, LinkNode):
        text = _serialize_children_inline(node).strip()
        href = sanitize_url(node.url)
        if href:
            return f"[{text or href}]({href})"
        return text

    return _serialize_children_inline(node)


def _serialize_children_inline(node: Node) -> str:
    return "".join(_serialize_inline(child) for child in child_nodes(node))


def _wrap_marker(flag: TextFormat, inner: str) -> str:
    opening, closing = _FORMAT_MARKERS[flag]
    return f"{opening}{inner}{closing}"


def _cleanup_inline_text(text: str) -> str:
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    return text.strip()


def _serialize_list(list_node: ListNode, indent: int = 0) -> list[str]:
    lines: list[str] = []
    number = list_node.start
    for item in child_nodes(list_node):
        item_text_parts: list[str] = []
        nested_lists: list[ListNode] = []
        parts = child_nodes(item) if isinstance(item, ListItemNode) else [item]
        for child in parts:
            if isinstance(child, ListNode):
                nested_lists.append(child)
            else:
                item_text_parts.append(_serialize_inline(child))
        item_text = _cleanup_inline_text("".join(item_text_parts)).replace("\n", " ")
        marker = f"{number}. " if list_node.ordered else "- "
        prefix = "  " * indent + marker
        # A list item holding only a nested list is how the editor indents.
        if item_text or not nested_lists:
            lines.append(prefix + item_text if item_text else prefix.rstrip())
            number += 1
        for nested in nested_lists:
            lines.extend(_serialize_list(nested, indent + 1))
    return lines


def _serialize_code(node: CodeNode) -> str:
    if node.children:
        body = "".join(_code_text(child) for child in node.children)
    else:
        body = node.text or ""
    fence = "```"
    while fence in body:
        fence += "`"
    return f"{fence}{node.language or ''}\n{body}\n{fence}"


def _code_text(node: Node) -> str:
    if isinstance(node, TextNode):
        return node.text
    if isinstance(node, LineBreakNode):
        return "\n"
    return "".join(_code_text(child) for child in child_nodes(node))
