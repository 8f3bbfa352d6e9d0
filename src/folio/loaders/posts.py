"""Blog post loading from Markdown files with YAML front-matter."""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from folio.loaders.errors import ContentError
from folio.models.content import BlogPost

logger = logging.getLogger(__name__)

_FRONTMATTER_DELIMITER = "---"

POST_SUFFIXES = (".md", ".mdx")


def parse_front_matter(content: str) -> tuple[dict[str, Any], str]:
    """Split Markdown content into its YAML front-matter and body.

    The file must start with a ``---`` line; the next ``---`` line closes
    the block. Returns ``({}, content)`` when no complete block is found.
    """
    normalized = content.replace("\r\n", "\n")
    lines = normalized.split("\n")
    if not lines or lines[0].strip() != _FRONTMATTER_DELIMITER:
        return {}, content

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == _FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        return {}, content

    yaml_block = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :]).lstrip("\n")

    data = YAML(typ="safe").load(yaml_block) or {}
    if not isinstance(data, dict):
        raise ContentError("Front-matter must be a mapping")
    return dict(data), body


def load_blog_post(path: Path) -> BlogPost:
    """Load a single blog post; the file stem becomes its slug."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"Cannot read {path}: {e}") from e
    try:
        metadata, body = parse_front_matter(text)
    except YAMLError as e:
        raise ContentError(f"Invalid front-matter in {path}: {e}") from e
    except ContentError as e:
        raise ContentError(f"{e}: {path}") from e
    try:
        return BlogPost.model_validate({**metadata, "slug": path.stem, "content": body})
    except ValidationError as e:
        raise ContentError(f"Invalid blog post {path}: {e}") from e


def load_blog_posts(directory: Path) -> list[BlogPost]:
    """Load every ``.md`` and ``.mdx`` post in a directory, ordered by filename.

    A missing directory means the site has no posts yet. Two files with the
    same stem (``foo.md`` and ``foo.mdx``) would render to the same page and
    raise ``ContentError``.
    """
    if not directory.is_dir():
        logger.debug(f"No posts directory at {directory}")
        return []

    paths = sorted(p for p in directory.iterdir() if p.suffix in POST_SUFFIXES and p.is_file())
    posts = []
    seen: dict[str, Path] = {}
    for path in paths:
        post = load_blog_post(path)
        if post.slug in seen:
            raise ContentError(f"Duplicate post slug {post.slug!r}: {seen[post.slug]} and {path}")
        seen[post.slug] = path
        posts.append(post)
    logger.debug(f"Loaded {len(posts)} blog posts from {directory}")
    return posts
