"""Render output model."""

from __future__ import annotations

from pydantic import BaseModel


class RenderResult(BaseModel):
    """Output of one render call.

    ``parsed`` is False when the input was not a valid document and the
    output is the mode's fallback.
    """

    mode: str
    output: str
    parsed: bool
