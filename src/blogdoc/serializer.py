"""Convert documents to and from their persisted JSON text."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from blogdoc.exceptions import ParseError
from blogdoc.schemas.nodes import Document
from blogdoc.utils.logging_config import get_logger

logger = get_logger(__name__)


def serialize(document: Document) -> str:
    """Serialize ``document`` to a JSON object with a top-level ``root`` key."""
    return document.model_dump_json(by_alias=True)


def to_wire(document: Document) -> dict[str, Any]:
    """The persisted form as plain Python data."""
    return document.model_dump(mode="json", by_alias=True)


def parse_document(text: str | bytes | bytearray) -> Document:
    """Parse persisted text into a ``Document``.

    Raises:
        ParseError: If ``text`` is not valid JSON, is not a JSON object, or
            lacks a ``root`` object holding a ``children`` list.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise ParseError(f"Expected document text, got {type(text).__name__}")
    try:
        return Document.model_validate_json(text)
    except ValidationError as exc:
        raise ParseError(_describe(exc)) from exc


def deserialize(text: str | bytes | bytearray) -> Document | ParseError:
    """Parse persisted text, returning the ``ParseError`` instead of raising it.

    Callers must check the result with ``isinstance(result, ParseError)``.
    """
    try:
        return parse_document(text)
    except ParseError as exc:
        logger.debug("Document failed to parse: %s", exc)
        return exc


def load_document(value: str | bytes | bytearray | Mapping[str, Any] | Document) -> Document:
    """Parse either persisted text or already-decoded JSON data.

    Raises:
        ParseError: If the value is not a valid document.
    """
    if isinstance(value, Document):
        return value
    if isinstance(value, Mapping):
        try:
            return Document.model_validate(dict(value))
        except ValidationError as exc:
            raise ParseError(_describe(exc)) from exc
    return parse_document(value)


def _describe(exc: ValidationError) -> str:
    errors = exc.errors(include_url=False)
    if not errors:
        return "Invalid document"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "document"
    return f"Invalid document at {location}: {first.get('msg', 'invalid value')}"
