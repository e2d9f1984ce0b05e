"""Free-text to HTML conversion for the post form preview.

This path predates the document tree: it turns a small Markdown-like syntax
(``**bold**``, ``# Heading``, ``- item``...) into HTML with regular
expressions. It is lower fidelity than the tree renderers, never reads
documents, and is not used by them.
"""

from __future__ import annotations

import html
import re

from blogdoc.html_utils import sanitize_url

_FENCED_CODE_RE = re.compile(r"```([\s\S]*?)```")
_INLINE_CODE_RE = re.compile(r"`([^`\n]*?)`")
_HEADING_RE = re.compile(r"^(#{1,3}) (.*)$", re.MULTILINE)
_QUOTE_RE = re.compile(r"^&gt; (.*)$", re.MULTILINE)
_BULLET_RUN_RE = re.compile(r"(?:^[*-] .*(?:\n|$))+", re.MULTILINE)
_BULLET_ITEM_RE = re.compile(r"^[*-] (.*)$", re.MULTILINE)
_NUMBERED_RUN_RE = re.compile(r"(?:^\d+\. .*(?:\n|$))+", re.MULTILINE)
_NUMBERED_ITEM_RE = re.compile(r"^\d+\. (.*)$", re.MULTILINE)
_IMAGE_RE = re.compile(r"!\[(.*?)\]\((.*?)\)")
_LINK_RE = re.compile(r"\[(.*?)\]\((.*?)\)")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_UNDERLINE_RE = re.compile(r"&lt;u&gt;(.*?)&lt;/u&gt;")
_STRIKE_RE = re.compile(r"~~(.+?)~~")
_BLOCK_LINE_RE = re.compile(r"^(?:<(?:h[1-6]|blockquote|pre|ul|ol|li|img)\b|\x00B\d+\x00$)")
_TOKEN_RE = re.compile(r"\x00([BI])(\d+)\x00")


def convert_markup_to_html(text: str | None) -> str:
    """Convert free text with lightweight markup to HTML.

    The input is HTML-escaped first, so only the markup listed above produces
    tags. Lines that are not already block elements become paragraphs.
    """
    if not text:
        return ""

    blocks: list[str] = []
    inlines: list[str] = []

    def stash_block(match: re.Match[str]) -> str:
        blocks.append(f"<pre><code>{match.group(1).strip(chr(10))}</code></pre>")
        return f"\n\x00B{len(blocks) - 1}\x00\n"

    def stash_inline(match: re.Match[str]) -> str:
        inlines.append(f"<code>{match.group(1)}</code>")
        return f"\x00I{len(inlines) - 1}\x00"

    # NUL delimits the stash tokens below.
    source = text.replace("\r\n", "\n").replace("\x00", "")
    markup = html.escape(source, quote=True)
    markup = _FENCED_CODE_RE.sub(stash_block, markup)
    markup = _INLINE_CODE_RE.sub(stash_inline, markup)

    markup = _HEADING_RE.sub(_heading, markup)
    markup = _QUOTE_RE.sub(r"<blockquote>\1</blockquote>", markup)
    markup = _BULLET_RUN_RE.sub(lambda match: _list_run(match, "ul", _BULLET_ITEM_RE), markup)
    markup = _NUMBERED_RUN_RE.sub(lambda match: _list_run(match, "ol", _NUMBERED_ITEM_RE), markup)

    markup = _IMAGE_RE.sub(_image, markup)
    markup = _LINK_RE.sub(_link, markup)
    markup = _BOLD_RE.sub(r"<strong>\1</strong>", markup)
    markup = _ITALIC_RE.sub(r"<em>\1</em>", markup)
    markup = _UNDERLINE_RE.sub(r"<u>\1</u>", markup)
    markup = _STRIKE_RE.sub(r"<del>\1</del>", markup)

    lines = [line.strip() for line in markup.split("\n")]
    wrapped = [
        line if _BLOCK_LINE_RE.match(line) else f"<p>{line}</p>"
        for line in lines
        if line
    ]
    result = "\n".join(wrapped)

    def restore(match: re.Match[str]) -> str:
        store = blocks if match.group(1) == "B" else inlines
        return store[int(match.group(2))]

    return _TOKEN_RE.sub(restore, result)


def _heading(match: re.Match[str]) -> str:
    level = len(match.group(1))
    return f"<h{level}>{match.group(2).strip()}</h{level}>"


def _list_run(match: re.Match[str], tag: str, item_re: re.Pattern[str]) -> str:
    run = match.group(0)
    items = "".join(f"<li>{item.strip()}</li>" for item in item_re.findall(run))
    trailing = "\n" if run.endswith("\n") else ""
    return f"<{tag}>{items}</{tag}>{trailing}"


def _image(match: re.Match[str]) -> str:
    alt, src = match.group(1), sanitize_url(html.unescape(match.group(2)))
    return f'<img src="{html.escape(src, quote=True)}" alt="{alt}" />'


def _link(match: re.Match[str]) -> str:
    label, href = match.group(1), sanitize_url(html.unescape(match.group(2)))
    return (
        f'<a href="{html.escape(href, quote=True)}" target="_blank" '
        f'rel="noopener noreferrer">{label}</a>'
    )
