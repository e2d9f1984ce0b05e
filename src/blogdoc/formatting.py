"""Text format bitmask codec shared by every renderer."""

from __future__ import annotations

from enum import IntFlag
from typing import Callable, Final, TypeVar

T = TypeVar("T")


class TextFormat(IntFlag):
    """Combinable styles stored in a text node's ``format`` field."""

    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4
    STRIKETHROUGH = 8


# Application order. Each step wraps the previous output, so the rendered
# nesting from outermost to innermost is strikethrough, underline, italic, bold.
FORMAT_ORDER: Final[tuple[TextFormat, ...]] = (
    TextFormat.BOLD,
    TextFormat.ITALIC,
    TextFormat.UNDERLINE,
    TextFormat.STRIKETHROUGH,
)

KNOWN_FORMAT_MASK: Final[int] = 0b1111


def decode_format(mask: int) -> tuple[TextFormat, ...]:
    """Return the flags set in ``mask`` in application order.

    Bits outside the four known flags are ignored. Non-integer, boolean and
    negative masks decode to no flags.
    """
    if isinstance(mask, bool) or not isinstance(mask, int) or mask <= 0:
        return ()
    return tuple(flag for flag in FORMAT_ORDER if mask & flag)


def encode_format(*flags: TextFormat | int) -> int:
    """OR the given flags into a mask, dropping unknown bits."""
    mask = 0
    for flag in flags:
        mask |= int(flag)
    return mask & KNOWN_FORMAT_MASK


def has_format(mask: int, flag: TextFormat) -> bool:
    return flag in decode_format(mask)


def format_names(mask: int) -> list[str]:
    """Lower-case flag names for ``mask``, e.g. ``["bold", "italic"]``."""
    return [flag_name(flag) for flag in decode_format(mask)]


def flag_name(flag: TextFormat) -> str:
    return (flag.name or "").lower()


def apply_format(content: T, mask: int, wrap: Callable[[TextFormat, T], T]) -> T:
    """Fold ``wrap`` over the flags of ``mask`` in application order.

    ``wrap(flag, inner)`` receives the output of the previous step, so the last
    flag applied ends up outermost. A mask of 0 returns ``content`` unchanged.
    """
    for flag in decode_format(mask):
        content = wrap(flag, content)
    return content
