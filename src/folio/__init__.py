"""Folio - personal portfolio site generator."""

__version__ = "0.1.0"
