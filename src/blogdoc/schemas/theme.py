"""Render theme: the style table handed to the HTML renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from blogdoc.config import BLOGDOC_DEFAULT_THEME
from blogdoc.exceptions import ConfigError
from blogdoc.formatting import TextFormat, flag_name

DEFAULT_FORMAT_TAGS = {
    "bold": "strong",
    "italic": "em",
    "underline": "u",
    "strikethrough": "s",
}


class RenderTheme(BaseModel):
    """CSS classes and format tags used when emitting HTML.

    Attributes:
        name: Theme identifier, as accepted by ``get_theme``.
        root_class: Class of the wrapper around full renders.
        preview_class: Class of the wrapper around preview renders.
        fallback_class: Class of the block shown for unparseable content.
        classes: Semantic element -> CSS class. Keys are ``paragraph``,
            ``h1``..``h6``, ``ul``, ``ol``, ``listitem``, ``quote``, ``code``,
            ``link`` and the lower-case format flag names.
        format_tags: Lower-case format flag name -> HTML tag.
    """

    model_config = ConfigDict(frozen=True)

    name: str = "default"
    root_class: str = "blog-content"
    preview_class: str = "blog-preview"
    fallback_class: str = "content-unavailable"
    classes: dict[str, str] = Field(default_factory=dict)
    format_tags: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_FORMAT_TAGS))

    def class_for(self, element: str) -> str | None:
        return self.classes.get(element) or None

    def format_tag(self, flag: TextFormat) -> str:
        name = flag_name(flag)
        return self.format_tags.get(name) or DEFAULT_FORMAT_TAGS[name]


DEFAULT_THEME = RenderTheme()

TAILWIND_THEME = RenderTheme(
    name="tailwind",
    root_class="lexical-content",
    classes={
        "paragraph": "mb-4",
        "h1": "text-4xl font-bold mb-4",
        "h2": "text-3xl font-bold mb-3",
        "h3": "text-2xl font-bold mb-2",
        "h4": "text-xl font-bold mb-2",
        "h5": "text-lg font-bold mb-1",
        "h6": "text-base font-bold mb-1",
        "ul": "list-disc list-inside mb-4",
        "ol": "list-decimal list-inside mb-4",
        "listitem": "mb-1",
        "quote": "border-l-4 border-gray-300 pl-4 italic my-4",
        "code": "font-mono bg-gray-100 rounded px-2 py-1",
        "link": "text-blue-600 hover:text-blue-800 underline",
        "bold": "font-bold",
        "italic": "italic",
        "underline": "underline",
        "strikethrough": "line-through",
    },
)

THEMES: dict[str, RenderTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    TAILWIND_THEME.name: TAILWIND_THEME,
}


def get_theme(name: str | None = None) -> RenderTheme:
    """Resolve a theme by name; ``None`` or ``""`` means ``BLOGDOC_DEFAULT_THEME``."""
    name = name or BLOGDOC_DEFAULT_THEME
    try:
        return THEMES[name.strip().lower()]
    except KeyError as exc:
        available = ", ".join(sorted(THEMES))
        raise ConfigError(f"Unknown theme {name!r} (available: {available})") from exc
