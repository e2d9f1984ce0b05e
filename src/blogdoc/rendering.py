"""Render persisted content in any of the supported modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from blogdoc.excerpt import flatten_document, truncate_text
from blogdoc.exceptions import ParseError
from blogdoc.html_renderer import render_document
from blogdoc.html_utils import render_fallback
from blogdoc.markdown import render_markdown
from blogdoc.preview import render_preview_document
from blogdoc.schemas import RenderResult
from blogdoc.schemas.theme import get_theme
from blogdoc.serializer import deserialize
from blogdoc.utils.logging_config import get_logger

logger = get_logger(__name__)


class RenderMode(str, Enum):
    """Output produced by ``render_content``."""

    FULL = "full"
    PREVIEW = "preview"
    EXCERPT = "excerpt"
    MARKDOWN = "markdown"


@dataclass
class RenderOptions:
    """Options for a render call.

    Attributes:
        mode: Which renderer to run.
        theme: Theme name for the HTML modes. ``None`` uses the default theme.
        excerpt_length: Maximum excerpt length. ``None`` uses
            ``BLOGDOC_EXCERPT_MAX_LENGTH``; zero or less returns the whole text.
    """

    mode: RenderMode = RenderMode.FULL
    theme: str | None = None
    excerpt_length: int | None = None


def render_content(content: str, options: RenderOptions | None = None) -> RenderResult:
    """Parse ``content`` once and render it in the requested mode.

    Each mode applies its own policy to unparseable input: the HTML modes show
    the fallback block, the excerpt and Markdown modes pass the raw text
    through.

    Raises:
        ConfigError: If ``options.theme`` names an unknown theme.
    """
    opts = options or RenderOptions()
    mode = RenderMode(opts.mode)
    theme = get_theme(opts.theme)

    document = deserialize(content)
    if isinstance(document, ParseError):
        logger.info("Rendering %s fallback: %s", mode.value, document)
        if mode in (RenderMode.FULL, RenderMode.PREVIEW):
            output = render_fallback(theme)
        elif mode is RenderMode.EXCERPT:
            output = truncate_text(content, opts.excerpt_length)
        else:
            output = content
        return RenderResult(mode=mode.value, output=output, parsed=False)

    if mode is RenderMode.FULL:
        output = render_document(document, theme=theme)
    elif mode is RenderMode.PREVIEW:
        output = render_preview_document(document, theme=theme)
    elif mode is RenderMode.EXCERPT:
        output = truncate_text(flatten_document(document), opts.excerpt_length)
    else:
        output = render_markdown(document)
    return RenderResult(mode=mode.value, output=output, parsed=True)

