"""Local configuration for blogdoc."""

from __future__ import annotations

import os


DEFAULT_FALLBACK_MESSAGE = "Content unavailable"
DEFAULT_EXCERPT_MAX_LENGTH = 160
DEFAULT_THEME_NAME = "default"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ALLOWED_URL_SCHEMES = "http,https,mailto,tel,sms"

# Text shown by the full and preview renderers when a document cannot be parsed.
BLOGDOC_FALLBACK_MESSAGE = os.getenv("BLOGDOC_FALLBACK_MESSAGE", DEFAULT_FALLBACK_MESSAGE)
# Excerpt length in characters; <= 0 disables truncation.
BLOGDOC_EXCERPT_MAX_LENGTH = int(os.getenv("BLOGDOC_EXCERPT_MAX_LENGTH", str(DEFAULT_EXCERPT_MAX_LENGTH)))
BLOGDOC_DEFAULT_THEME = os.getenv("BLOGDOC_DEFAULT_THEME", DEFAULT_THEME_NAME)
BLOGDOC_LOG_LEVEL = os.getenv("BLOGDOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
BLOGDOC_ALLOWED_URL_SCHEMES = frozenset(
    scheme.strip().lower()
    for scheme in os.getenv("BLOGDOC_ALLOWED_URL_SCHEMES", DEFAULT_ALLOWED_URL_SCHEMES).split(",")
    if scheme.strip()
)
