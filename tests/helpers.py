"""Assertion helpers for rendered HTML."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def nesting_chain(element: Tag) -> list[str]:
    """Tag names from ``element`` down through single-child descendants."""
    chain: list[str] = []
    current = element
    while isinstance(current, Tag):
        chain.append(current.name)
        children = list(current.children)
        current = children[0] if len(children) == 1 else None
    return chain
