"""Errors raised while loading content."""


class ContentError(Exception):
    """Content configuration is missing or malformed."""
