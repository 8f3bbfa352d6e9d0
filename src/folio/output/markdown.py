"""Markdown page rendering."""

from collections.abc import Sequence
from datetime import date
from pathlib import Path

from folio.models.content import BlogPost, Experience, Project, SiteProfile
from folio.utils.date_utils import Clock, format_date, format_duration
from folio.utils.sorting import sort_experiences, sort_posts, sort_projects

SEPARATOR = "---"

# Page title and the one-line description shown under it
PAGE_HEADERS = {
    "experience": ("My Experience", "Check out my work experience."),
    "projects": ("My Projects", "Look at my work."),
    "blog": ("My Blogs", "Read my blog."),
    "contact": ("Contact Me", "Set up a meeting or drop me a message."),
}


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def format_experience_list(experiences: Sequence[Experience], clock: Clock = date.today) -> str:
    """Format experiences, most recent first, with their computed length.

    Raises:
        MalformedRangeError: If an experience duration has no separator.
        InvalidDateError: If an experience duration has an unparseable date.
    """
    output = []
    for exp in sort_experiences(experiences):
        output.append(f"### {exp.position} at {exp.company}")
        output.append("")
        output.append(f"{exp.duration} | {exp.location} | {format_duration(exp.duration, clock)}")
        if exp.description:
            output.append("")
            output.append(exp.description)
        output.append("")

    return "\n".join(output).rstrip("\n")


def format_project_list(projects: Sequence[Project]) -> str:
    """Format the compact project list shown on the home page."""
    output = ["## My Projects", ""]
    for project in sort_projects(projects):
        output.append(f"- {format_date(project.date)} [{project.name}]({project.github})")
    output.append("")
    output.append(SEPARATOR)
    return "\n".join(output)


def format_project_posts(projects: Sequence[Project]) -> str:
    """Format the detailed entries of the projects page."""
    output = []
    for project in sort_projects(projects):
        output.append(f"### {project.name}")
        output.append("")
        output.append(f"*{format_date(project.date)}*")
        output.append("")
        if project.summary:
            output.append(project.summary)
            output.append("")
        output.append(f"[GitHub]({project.github})")
        output.append("")

    return "\n".join(output).rstrip("\n")


def format_blog_list(posts: Sequence[BlogPost]) -> str:
    """Format links to every blog post, newest first."""
    output = []
    for post in sort_posts(posts):
        output.append(f"- {format_date(post.published_at)} [{post.title}](blog/{post.slug}.md)")
    return "\n".join(output)


def format_blog_post(post: BlogPost, clock: Clock = date.today) -> str:
    """Format a single blog post page."""
    output = [f"# {post.title}", ""]
    output.append(f"*{format_date(post.published_at, include_relative=True, clock=clock)}*")
    output.append("")
    if post.image:
        output.append(f"![{post.title}]({post.image})")
        output.append("")
    output.append(post.content.strip())
    return "\n".join(output) + "\n"


def format_home_page(
    profile: SiteProfile,
    experiences: Sequence[Experience],
    projects: Sequence[Project],
    posts: Sequence[BlogPost],
    clock: Clock = date.today,
) -> str:
    """Format the home page: intro, experience, projects and blog posts."""
    output = [f"# {profile.title}", ""]
    if profile.bio:
        output.append(profile.bio)
        output.append("")

    output.append("## My Experience")
    output.append("")
    output.append(format_experience_list(experiences, clock))
    output.append("")
    output.append(SEPARATOR)
    output.append("")
    output.append(format_project_list(projects))
    output.append("")
    output.append("## My Blogs")
    output.append("")
    output.append(format_blog_list(posts))
    output.append("")
    output.append(SEPARATOR)
    return "\n".join(output) + "\n"


def format_page_header(page: str) -> str:
    """Format the heading and description of a named page."""
    title, description = PAGE_HEADERS[page]
    return f"# {title}\n\n*{description}*"


def format_experience_page(experiences: Sequence[Experience], clock: Clock = date.today) -> str:
    """Format the experience page."""
    return f"{format_page_header('experience')}\n\n{format_experience_list(experiences, clock)}\n"


def format_projects_page(projects: Sequence[Project]) -> str:
    """Format the projects page."""
    return f"{format_page_header('projects')}\n\n{format_project_posts(projects)}\n"


def format_blog_page(posts: Sequence[BlogPost]) -> str:
    """Format the blog index page."""
    return f"{format_page_header('blog')}\n\n{format_blog_list(posts)}\n"


def format_contact_page(profile: SiteProfile) -> str:
    """Format the contact page with scheduling and email links."""
    output = [format_page_header("contact"), ""]
    output.append(
        "I would love to hear from you. You can either schedule a meeting "
        "or email me directly."
    )
    output.append("")
    if profile.calendly_url:
        output.append(f"[Schedule a Meeting]({profile.calendly_url})")
        output.append("")
    if profile.email:
        output.append(f"Or send me an email at [{profile.email}](mailto:{profile.email})")
        output.append("")
    return "\n".join(output)
