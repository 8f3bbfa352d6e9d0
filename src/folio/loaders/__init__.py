"""Content loaders for Folio."""

from folio.loaders.config_loader import load_experiences, load_profile, load_projects
from folio.loaders.errors import ContentError
from folio.loaders.posts import load_blog_posts, parse_front_matter

__all__ = [
    "ContentError",
    "load_blog_posts",
    "load_experiences",
    "load_profile",
    "load_projects",
    "parse_front_matter",
]
