"""Data models for Folio."""

from folio.models.content import BlogPost, Experience, Project, SiteProfile

__all__ = [
    "BlogPost",
    "Experience",
    "Project",
    "SiteProfile",
]
