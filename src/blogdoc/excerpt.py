"""Plain-text excerpts for post lists and cards."""

from __future__ import annotations

from typing import Iterator

from blogdoc.config import BLOGDOC_EXCERPT_MAX_LENGTH
from blogdoc.exceptions import ParseError
from blogdoc.schemas.nodes import Document, Node, RootNode, TextNode
from blogdoc.serializer import deserialize
from blogdoc.tree import iter_nodes
from blogdoc.utils.logging_config import get_logger

logger = get_logger(__name__)

ELLIPSIS = "…"


def iter_text(node: Node | RootNode) -> Iterator[str]:
    """Literal content of every text node under ``node``, in document order."""
    for current in iter_nodes(node):
        if isinstance(current, TextNode):
            yield current.text


def flatten_document(document: Document, *, separator: str = " ") -> str:
    return separator.join(fragment for fragment in iter_text(document.root) if fragment)


def flatten(content: str | None, *, separator: str = " ") -> str:
    """Collapse persisted content to plain text.

    Formatting and block structure are dropped. Input that is not a document
    is returned unchanged: excerpts stored before the editor existed are plain
    text.
    """
    if not content:
        return ""
    result = deserialize(content)
    if isinstance(result, ParseError):
        logger.debug("Treating excerpt as plain text: %s", result)
        return content
    return flatten_document(result, separator=separator)


def make_excerpt(content: str | None, max_length: int | None = None) -> str:
    """Flatten ``content`` and cut it at a word boundary.

    ``max_length`` defaults to ``BLOGDOC_EXCERPT_MAX_LENGTH``; zero or a
    negative value disables truncation.
    """
    return truncate_text(flatten(content), max_length)


def truncate_text(text: str, max_length: int | None = None) -> str:
    """Collapse whitespace in ``text`` and cut it at a word boundary."""
    limit = BLOGDOC_EXCERPT_MAX_LENGTH if max_length is None else max_length
    text = " ".join(text.split())
    if limit <= 0 or len(text) <= limit:
        return text

    cut = text.rfind(" ", 0, limit + 1)
    if cut <= 0:
        cut = limit
    return text[:cut].rstrip() + ELLIPSIS
