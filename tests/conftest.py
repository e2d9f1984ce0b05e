"""Test setup for blogdoc."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running subprocess tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run the CLI in a subprocess",
    )


@pytest.fixture
def heading_content() -> str:
    """Level-1 heading holding bold+italic text."""
    return (
        '{"root":{"children":[{"type":"heading","tag":"h1",'
        '"children":[{"type":"text","text":"Hello","format":3}]}]}}'
    )


@pytest.fixture
def editor_state() -> dict:
    """A document as the editor emits it, extra attributes included."""
    return {
        "root": {
            "type": "root",
            "direction": "ltr",
            "format": "",
            "indent": 0,
            "version": 1,
            "children": [
                {
                    "type": "heading",
                    "tag": "h2",
                    "direction": "ltr",
                    "version": 1,
                    "children": [
                        {"type": "text", "text": "Release notes", "format": 0, "style": "", "version": 1}
                    ],
                },
                {
                    "type": "paragraph",
                    "children": [
                        {"type": "text", "text": "We shipped ", "format": 0},
                        {"type": "text", "text": "faster", "format": 1},
                        {"type": "text", "text": " builds, see ", "format": 0},
                        {
                            "type": "link",
                            "url": "https://example.com/changelog",
                            "rel": "noreferrer",
                            "children": [{"type": "text", "text": "the changelog", "format": 0}],
                        },
                    ],
                },
                {
                    "type": "list",
                    "listType": "number",
                    "start": 1,
                    "tag": "ol",
                    "children": [
                        {"type": "listitem", "value": 1, "children": [{"type": "text", "text": "First", "format": 0}]},
                        {"type": "listitem", "value": 2, "children": [{"type": "text", "text": "Second", "format": 2}]},
                    ],
                },
                {
                    "type": "quote",
                    "children": [{"type": "text", "text": "Ship it.", "format": 0}],
                },
                {
                    "type": "code",
                    "language": "python",
                    "children": [
                        {"type": "code-highlight", "text": "print", "highlightType": "function"},
                        {"type": "code-highlight", "text": "(1)"},
                    ],
                },
            ],
        }
    }


@pytest.fixture
def editor_content(editor_state: dict) -> str:
    return json.dumps(editor_state)
