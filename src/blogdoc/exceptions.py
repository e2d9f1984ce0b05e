"""Custom exceptions for blogdoc."""


class BlogdocError(Exception):
    """Base exception for blogdoc operations."""


class ParseError(BlogdocError):
    """Persisted document text is not valid JSON or lacks ``root.children``."""


class ConfigError(BlogdocError):
    """Invalid configuration, such as an unknown theme name."""
