"""Document tree models.

Each node kind of the persisted editor JSON gets its own model; the ``Node``
union dispatches on the wire ``type`` field. Any ``type`` outside the known set
validates as ``UnknownNode`` instead of failing, and attribute values that are
missing or of the wrong shape fall back to defaults. Malformed attributes are
therefore handled once, here, and renderers can trust the models they receive.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    SerializerFunctionWrapHandler,
    Tag,
    field_validator,
    model_serializer,
    model_validator,
)


class NodeKind(str, Enum):
    """Wire values of the ``type`` field."""

    ROOT = "root"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    LIST_ITEM = "listitem"
    QUOTE = "quote"
    CODE = "code"
    LINK = "link"
    AUTOLINK = "autolink"
    TEXT = "text"
    CODE_HIGHLIGHT = "code-highlight"
    LINEBREAK = "linebreak"


HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
DEFAULT_HEADING_TAG = "h1"
ORDERED_LIST_TYPE = "number"

_HEADING_TAG_RE = re.compile(r"^h?([1-6])$")

# Wire type -> union tag. Aliases share the model of the kind they extend.
_KIND_TAGS = {
    NodeKind.ROOT.value: "root",
    NodeKind.PARAGRAPH.value: "paragraph",
    NodeKind.HEADING.value: "heading",
    NodeKind.LIST.value: "list",
    NodeKind.LIST_ITEM.value: "listitem",
    NodeKind.QUOTE.value: "quote",
    NodeKind.CODE.value: "code",
    NodeKind.LINK.value: "link",
    NodeKind.AUTOLINK.value: "link",
    NodeKind.TEXT.value: "text",
    NodeKind.CODE_HIGHLIGHT.value: "text",
    NodeKind.LINEBREAK.value: "linebreak",
}
_UNKNOWN_TAG = "unknown"


def normalize_heading_tag(value: Any) -> str:
    """Map ``"h3"``, ``"H3"``, ``3`` or ``"3"`` to ``"h3"``; anything else to ``"h1"``."""
    if isinstance(value, bool):
        return DEFAULT_HEADING_TAG
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        return DEFAULT_HEADING_TAG
    match = _HEADING_TAG_RE.match(value.strip().lower())
    if not match:
        return DEFAULT_HEADING_TAG
    return f"h{match.group(1)}"


def _object_entries(value: Any) -> list[Any]:
    """Keep only object-like entries of a children value."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, (dict, BaseModel))]


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _positive_int(value: Any, default: int | None) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def _node_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if not isinstance(kind, str):
        return _UNKNOWN_TAG
    return _KIND_TAGS.get(kind, _UNKNOWN_TAG)


class _NodeBase(BaseModel):
    # Unlisted wire attributes (direction, indent, version, ...) are kept so
    # a parsed document serializes back to the same JSON.
    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    # Optional attributes left out of the wire form while they are None.
    omit_when_none: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_empty_optionals(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if isinstance(data, dict):
            for key in self.omit_when_none:
                if key in data and data[key] is None:
                    del data[key]
        return data


class _ContainerNode(_NodeBase):
    children: list[Node] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> list[Any]:
        return _object_entries(value)


class RootNode(_ContainerNode):
    """Top of a document. Also valid (and flattened) when nested."""

    type: Literal["root"] = "root"

    @field_validator("type", mode="before")
    @classmethod
    def _force_root(cls, value: Any) -> str:
        return NodeKind.ROOT.value


class ParagraphNode(_ContainerNode):
    type: Literal["paragraph"] = "paragraph"


class HeadingNode(_ContainerNode):
    """Heading block; ``tag`` is always one of ``h1``..``h6``."""

    type: Literal["heading"] = "heading"
    tag: str = DEFAULT_HEADING_TAG

    @field_validator("tag", mode="before")
    @classmethod
    def _normalize_tag(cls, value: Any) -> str:
        return normalize_heading_tag(value)

    @property
    def level(self) -> int:
        return int(self.tag[1])


class ListNode(_ContainerNode):
    """Ordered when ``listType`` is ``"number"``, unordered otherwise.

    Children are expected to be list items but anything is accepted.
    """

    type: Literal["list"] = "list"
    list_type: str = Field(default="bullet", alias="listType")
    start: int = 1

    @field_validator("list_type", mode="before")
    @classmethod
    def _coerce_list_type(cls, value: Any) -> str:
        return value if isinstance(value, str) else "bullet"

    @field_validator("start", mode="before")
    @classmethod
    def _coerce_start(cls, value: Any) -> int:
        return _positive_int(value, 1)

    @property
    def ordered(self) -> bool:
        return self.list_type == ORDERED_LIST_TYPE


class ListItemNode(_ContainerNode):
    type: Literal["listitem"] = "listitem"
    value: int | None = None

    omit_when_none: ClassVar[frozenset[str]] = frozenset({"value"})

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> int | None:
        return _positive_int(value, None)


class QuoteNode(_ContainerNode):
    type: Literal["quote"] = "quote"


class CodeNode(_ContainerNode):
    """Code block. Content is nested text nodes, or ``text`` when childless."""

    type: Literal["code"] = "code"
    language: str | None = None
    text: str | None = None

    omit_when_none: ClassVar[frozenset[str]] = frozenset({"language", "text"})

    @field_validator("language", "text", mode="before")
    @classmethod
    def _coerce_optional_str(cls, value: Any) -> str | None:
        return _optional_str(value)


class LinkNode(_ContainerNode):
    type: Literal["link", "autolink"] = "link"
    url: str = ""
    target: str | None = None
    rel: str | None = None
    title: str | None = None

    omit_when_none: ClassVar[frozenset[str]] = frozenset({"target", "rel", "title"})

    @field_validator("url", mode="before")
    @classmethod
    def _coerce_url(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("target", "rel", "title", mode="before")
    @classmethod
    def _coerce_optional_str(cls, value: Any) -> str | None:
        return _optional_str(value)


class TextNode(_NodeBase):
    """Leaf carrying literal content and a format bitmask."""

    type: Literal["text", "code-highlight"] = "text"
    text: str = ""
    format: int = 0

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("format", mode="before")
    @classmethod
    def _coerce_format(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return 0
        return value


class LineBreakNode(_NodeBase):
    type: Literal["linebreak"] = "linebreak"


class UnknownNode(_NodeBase):
    """Any node whose ``type`` is not recognized.

    ``children`` is ``None`` when the node had no children sequence at all.
    """

    type: str = ""
    children: list[Node] | None = None

    omit_when_none: ClassVar[frozenset[str]] = frozenset({"children"})

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> list[Any] | None:
        if not isinstance(value, list):
            return None
        return _object_entries(value)


Node = Annotated[
    Union[
        Annotated[RootNode, Tag("root")],
        Annotated[ParagraphNode, Tag("paragraph")],
        Annotated[HeadingNode, Tag("heading")],
        Annotated[ListNode, Tag("list")],
        Annotated[ListItemNode, Tag("listitem")],
        Annotated[QuoteNode, Tag("quote")],
        Annotated[CodeNode, Tag("code")],
        Annotated[LinkNode, Tag("link")],
        Annotated[TextNode, Tag("text")],
        Annotated[LineBreakNode, Tag("linebreak")],
        Annotated[UnknownNode, Tag(_UNKNOWN_TAG)],
    ],
    Discriminator(_node_tag),
]


class Document(BaseModel):
    """A persisted document: exactly one root node."""

    model_config = ConfigDict(extra="allow", frozen=True)

    root: RootNode

    @model_validator(mode="before")
    @classmethod
    def _require_root_children(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError("document must be a JSON object")
        root = data.get("root")
        if isinstance(root, RootNode):
            return data
        if not isinstance(root, dict) or not isinstance(root.get("children"), list):
            raise ValueError("document requires a 'root' object with a 'children' list")
        return data


for _model in (
    RootNode,
    ParagraphNode,
    HeadingNode,
    ListNode,
    ListItemNode,
    QuoteNode,
    CodeNode,
    LinkNode,
    UnknownNode,
    Document,
):
    _model.model_rebuild()
