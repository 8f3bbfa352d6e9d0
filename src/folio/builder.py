"""Static site build: load content, render pages, write them out."""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from folio.loaders import load_blog_posts, load_experiences, load_profile, load_projects
from folio.models.content import BlogPost, Experience, Project, SiteProfile
from folio.output.markdown import (
    format_blog_page,
    format_blog_post,
    format_contact_page,
    format_experience_page,
    format_home_page,
    format_projects_page,
    save_markdown,
)
from folio.utils.date_utils import Clock

logger = logging.getLogger(__name__)

# Content layout, relative to the content directory
PROFILE_FILE = Path("site.json")
EXPERIENCES_FILE = Path("experience") / "config.json"
PROJECTS_FILE = Path("projects") / "config.json"
POSTS_DIR = Path("blog") / "posts"


@dataclass(frozen=True)
class SiteContent:
    """Everything loaded from a content directory for one build."""

    profile: SiteProfile
    experiences: list[Experience]
    projects: list[Project]
    posts: list[BlogPost]


def load_site_content(content_dir: Path) -> SiteContent:
    """Load all content from the standard layout under ``content_dir``.

    Raises:
        ContentError: If a required file is missing or malformed.
    """
    return SiteContent(
        profile=load_profile(content_dir / PROFILE_FILE),
        experiences=load_experiences(content_dir / EXPERIENCES_FILE),
        projects=load_projects(content_dir / PROJECTS_FILE),
        posts=load_blog_posts(content_dir / POSTS_DIR),
    )


def render_pages(content: SiteContent, clock: Clock = date.today) -> dict[str, str]:
    """Render every page, keyed by its path relative to the output directory."""
    pages = {
        "index.md": format_home_page(
            content.profile, content.experiences, content.projects, content.posts, clock
        ),
        "experience.md": format_experience_page(content.experiences, clock),
        "projects.md": format_projects_page(content.projects),
        "blog.md": format_blog_page(content.posts),
        "contact.md": format_contact_page(content.profile),
    }
    for post in content.posts:
        pages[f"blog/{post.slug}.md"] = format_blog_post(post, clock)
    return pages


def build_site(content_dir: Path, output_dir: Path, clock: Clock = date.today) -> list[Path]:
    """Build the site from ``content_dir`` into ``output_dir``.

    Content is read fresh on every call. Nothing is written unless every
    page renders, so bad configuration fails the build without leaving a
    partial site.

    Returns:
        Paths of the written pages.

    Raises:
        ContentError: If content files are missing or malformed.
        MalformedRangeError: If an experience duration has no separator.
        InvalidDateError: If a date cannot be parsed for display.
    """
    logger.info(f"Building site from {content_dir}")
    pages = render_pages(load_site_content(content_dir), clock)

    written = []
    for relative_path, page in pages.items():
        path = save_markdown(page, output_dir / relative_path)
        logger.info(f"Wrote {path}")
        written.append(path)
    return written
