"""Tests for the node schema and tree helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from blogdoc.formatting import TextFormat
from blogdoc.schemas.nodes import (
    CodeNode,
    Document,
    HeadingNode,
    LineBreakNode,
    LinkNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    RootNode,
    TextNode,
    UnknownNode,
    normalize_heading_tag,
)
from blogdoc.tree import (
    bullet_list,
    child_nodes,
    count_nodes,
    document,
    heading,
    is_container,
    is_heading,
    is_text,
    iter_nodes,
    list_item,
    numbered_list,
    paragraph,
    text,
)


def _root(*children: dict) -> Document:
    return Document.model_validate({"root": {"children": list(children)}})


class TestNodeDispatch:
    """Tests for resolving wire ``type`` values to node models."""

    @pytest.mark.parametrize(
        ("wire", "model"),
        [
            ({"type": "paragraph"}, ParagraphNode),
            ({"type": "heading", "tag": "h2"}, HeadingNode),
            ({"type": "list", "listType": "bullet"}, ListNode),
            ({"type": "listitem"}, ListItemNode),
            ({"type": "code"}, CodeNode),
            ({"type": "link", "url": "https://example.com"}, LinkNode),
            ({"type": "autolink", "url": "https://example.com"}, LinkNode),
            ({"type": "text", "text": "x"}, TextNode),
            ({"type": "code-highlight", "text": "x"}, TextNode),
            ({"type": "linebreak"}, LineBreakNode),
            ({"type": "root", "children": []}, RootNode),
        ],
    )
    def test_known_kinds(self, wire: dict, model: type) -> None:
        """Each known wire type validates as its own model."""
        doc = _root(wire)
        assert isinstance(doc.root.children[0], model)

    def test_unknown_kind_is_not_an_error(self) -> None:
        """An unrecognized type becomes UnknownNode, children included."""
        doc = _root(
            {"type": "future_kind", "children": [{"type": "text", "text": "inside"}], "extra": 1}
        )
        node = doc.root.children[0]
        assert isinstance(node, UnknownNode)
        assert node.type == "future_kind"
        assert isinstance(node.children[0], TextNode)

    def test_unknown_kind_without_children(self) -> None:
        """An unknown leaf records that it has no children sequence."""
        node = _root({"type": "image", "src": "a.png"}).root.children[0]
        assert isinstance(node, UnknownNode)
        assert node.children is None
        assert not is_container(node)

    def test_missing_or_non_string_type(self) -> None:
        """Nodes without a usable type are unknown, with an empty type."""
        doc = _root({"children": []}, {"type": 5})
        assert all(isinstance(node, UnknownNode) for node in doc.root.children)
        assert [node.type for node in doc.root.children] == ["", ""]


class TestMissingAttributes:
    """Tests for defaulting missing or malformed attributes."""

    def test_text_without_text_is_empty(self) -> None:
        node = _root({"type": "text", "format": 1}).root.children[0]
        assert node.text == ""
        assert node.format == 1

    @pytest.mark.parametrize("bad", [None, "3", 1.5, True, -1, [1]])
    def test_malformed_format_defaults_to_zero(self, bad: object) -> None:
        node = _root({"type": "text", "text": "x", "format": bad}).root.children[0]
        assert node.format == 0

    def test_non_string_text_defaults_to_empty(self) -> None:
        node = _root({"type": "text", "text": 42}).root.children[0]
        assert node.text == ""

    def test_heading_without_tag_is_level_one(self) -> None:
        node = _root({"type": "heading", "children": []}).root.children[0]
        assert node.tag == "h1"
        assert node.level == 1

    def test_container_without_children(self) -> None:
        node = _root({"type": "paragraph"}).root.children[0]
        assert node.children == []

    def test_children_not_a_list(self) -> None:
        node = _root({"type": "quote", "children": "oops"}).root.children[0]
        assert node.children == []

    def test_non_object_children_are_dropped(self) -> None:
        node = _root(
            {"type": "paragraph", "children": ["loose", 3, None, {"type": "text", "text": "kept"}]}
        ).root.children[0]
        assert len(node.children) == 1
        assert node.children[0].text == "kept"

    def test_link_without_url(self) -> None:
        node = _root({"type": "link", "children": []}).root.children[0]
        assert node.url == ""

    def test_list_start_and_type_defaults(self) -> None:
        node = _root({"type": "list", "listType": None, "start": "x"}).root.children[0]
        assert node.list_type == "bullet"
        assert node.start == 1
        assert not node.ordered


class TestHeadingTags:
    """Tests for heading tag normalization."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("h1", "h1"),
            ("h6", "h6"),
            ("H3", "h3"),
            (" h4 ", "h4"),
            (2, "h2"),
            ("5", "h5"),
            ("h7", "h1"),
            ("title", "h1"),
            (0, "h1"),
            (None, "h1"),
            (True, "h1"),
        ],
    )
    def test_normalize_heading_tag(self, value: object, expected: str) -> None:
        assert normalize_heading_tag(value) == expected

    def test_all_levels_are_distinct(self) -> None:
        levels = [heading(level, text("x")).level for level in range(1, 7)]
        assert levels == [1, 2, 3, 4, 5, 6]


class TestListNode:
    """Tests for the ordered flag."""

    def test_number_list_is_ordered(self) -> None:
        node = _root({"type": "list", "listType": "number"}).root.children[0]
        assert node.ordered

    @pytest.mark.parametrize("list_type", ["bullet", "check", "Number", ""])
    def test_other_list_types_are_unordered(self, list_type: str) -> None:
        node = _root({"type": "list", "listType": list_type}).root.children[0]
        assert not node.ordered


class TestImmutability:
    """Parsed nodes are frozen values."""

    def test_nodes_are_frozen(self) -> None:
        node = text("x")
        with pytest.raises(ValidationError):
            node.text = "y"  # type: ignore[misc]


class TestTreeHelpers:
    """Tests for builders and tree walking."""

    def test_builders_produce_expected_models(self) -> None:
        node = text("Hi", TextFormat.BOLD, TextFormat.UNDERLINE)
        assert node.format == 5
        assert numbered_list(list_item(text("a")), start=3).start == 3
        assert numbered_list().ordered
        assert not bullet_list().ordered

    def test_iter_nodes_is_depth_first_in_order(self) -> None:
        doc = document(
            paragraph(text("a"), text("b")),
            bullet_list(list_item(text("c"))),
        )
        texts = [node.text for node in iter_nodes(doc.root) if is_text(node)]
        assert texts == ["a", "b", "c"]

    def test_count_nodes_excludes_root(self) -> None:
        doc = document(paragraph(text("a")), heading(2, text("b")))
        assert count_nodes(doc) == 4

    def test_child_nodes_of_leaf(self) -> None:
        assert child_nodes(text("x")) == []

    def test_predicates(self) -> None:
        assert is_heading(heading(1))
        assert not is_heading(paragraph())
        assert is_text(text(""))
        assert is_container(paragraph())
        assert not is_container(text("x"))
