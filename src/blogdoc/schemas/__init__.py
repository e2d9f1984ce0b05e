"""Shared schemas for blogdoc."""

from blogdoc.schemas.nodes import (
    CodeNode,
    Document,
    HeadingNode,
    LineBreakNode,
    LinkNode,
    ListItemNode,
    ListNode,
    Node,
    NodeKind,
    ParagraphNode,
    QuoteNode,
    RootNode,
    TextNode,
    UnknownNode,
)
from blogdoc.schemas.rendering import RenderResult
from blogdoc.schemas.theme import DEFAULT_THEME, TAILWIND_THEME, RenderTheme, get_theme

__all__ = [
    "CodeNode",
    "DEFAULT_THEME",
    "Document",
    "HeadingNode",
    "LineBreakNode",
    "LinkNode",
    "ListItemNode",
    "ListNode",
    "Node",
    "NodeKind",
    "ParagraphNode",
    "QuoteNode",
    "RenderResult",
    "RenderTheme",
    "RootNode",
    "TAILWIND_THEME",
    "TextNode",
    "UnknownNode",
    "get_theme",
]
