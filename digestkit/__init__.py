"""Hash text or files, check digests, and keep preferences and progress text."""

__version__ = "0.1.0"

__all__ = ["digest_format", "opts", "prefs", "progress", "uri_digest"]