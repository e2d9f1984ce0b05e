"""Pydantic models for the render API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from blogdoc.rendering import RenderMode
from server.server_config import MAX_CONTENT_CHARS


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    content : str
        Persisted document text (or legacy plain text).
    mode : RenderMode
        Output to produce.
    theme : str | None
        Theme name for the HTML modes.
    excerpt_length : int | None
        Maximum excerpt length; ``0`` returns the whole text.

    """

    content: str = Field(..., max_length=MAX_CONTENT_CHARS, description="Persisted document text")
    mode: RenderMode = Field(default=RenderMode.FULL, description="Output to produce")
    theme: str | None = Field(default=None, description="Theme name for HTML output")
    excerpt_length: int | None = Field(default=None, ge=0, description="Maximum excerpt length")

    @field_validator("mode", mode="before")
    @classmethod
    def default_empty_mode(cls, v: object) -> object:
        """Treat an empty ``mode`` as the full render."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return RenderMode.FULL
        if isinstance(v, str):
            return v.strip().lower()
        return v


class RenderResponse(BaseModel):
    """Success response model for the /api/render endpoint.

    Attributes
    ----------
    mode : str
        Mode that produced ``output``.
    output : str
        Rendered content.
    parsed : bool
        False when the content was not a valid document and ``output`` is
        the mode's fallback.

    """

    mode: str = Field(..., description="Render mode")
    output: str = Field(..., description="Rendered content")
    parsed: bool = Field(..., description="Whether the content parsed as a document")


class LegacyRequest(BaseModel):
    """Request model for the /api/legacy endpoint."""

    content: str = Field(default="", max_length=MAX_CONTENT_CHARS, description="Free text with lightweight markup")


class LegacyResponse(BaseModel):
    output: str = Field(..., description="Converted HTML")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
