"""Tree walking helpers and node builders."""

from __future__ import annotations

from typing import Iterator

from blogdoc.formatting import TextFormat, encode_format
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
    RootNode,
    TextNode,
    UnknownNode,
    normalize_heading_tag,
)


def child_nodes(node: Node | RootNode) -> list[Node]:
    """Children of ``node``, or an empty list for leaves."""
    return list(getattr(node, "children", None) or [])


def iter_nodes(node: Node | RootNode) -> Iterator[Node]:
    """Yield ``node`` and its descendants, depth-first, in document order."""
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(child_nodes(current)))


def is_heading(node: object) -> bool:
    return isinstance(node, HeadingNode)


def is_text(node: object) -> bool:
    return isinstance(node, TextNode)


def is_unknown(node: object) -> bool:
    return isinstance(node, UnknownNode)


def is_container(node: object) -> bool:
    """True when the node carries a children sequence (possibly empty)."""
    return getattr(node, "children", None) is not None


def heading_level(node: HeadingNode) -> int:
    return node.level


def count_nodes(document: Document) -> int:
    """Number of nodes below the root."""
    return sum(1 for _ in iter_nodes(document.root)) - 1


def text(value: str, *flags: TextFormat) -> TextNode:
    return TextNode(text=value, format=encode_format(*flags))


def paragraph(*children: Node) -> ParagraphNode:
    return ParagraphNode(children=list(children))


def heading(level: int | str, *children: Node) -> HeadingNode:
    return HeadingNode(tag=normalize_heading_tag(level), children=list(children))


def list_item(*children: Node) -> ListItemNode:
    return ListItemNode(children=list(children))


def bullet_list(*items: Node) -> ListNode:
    return ListNode(list_type="bullet", children=list(items))


def numbered_list(*items: Node, start: int = 1) -> ListNode:
    return ListNode(list_type="number", start=start, children=list(items))


def quote(*children: Node) -> QuoteNode:
    return QuoteNode(children=list(children))


def code_block(*children: Node, language: str | None = None) -> CodeNode:
    return CodeNode(language=language, children=list(children))


def link(url: str, *children: Node) -> LinkNode:
    return LinkNode(url=url, children=list(children))


def line_break() -> LineBreakNode:
    return LineBreakNode()


def document(*blocks: Node) -> Document:
    return Document(root=RootNode(children=list(blocks)))
