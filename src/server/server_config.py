"""Configuration for the HTTP server."""

from __future__ import annotations

import os

MAX_CONTENT_CHARS = int(os.getenv("BLOGDOC_MAX_CONTENT_CHARS", str(2_000_000)))
APP_TITLE = "blogdoc"
APP_DESCRIPTION = "Render persisted blog post documents to HTML, Markdown and plain text."
