"""Output formatting for Folio."""

from folio.output.markdown import save_markdown

__all__ = ["save_markdown"]
