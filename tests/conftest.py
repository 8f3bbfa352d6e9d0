"""Pytest configuration and fixtures."""

from datetime import date
from pathlib import Path

import pytest

from folio.models.content import BlogPost, Experience, Project, SiteProfile
from folio.utils.date_utils import Clock


@pytest.fixture
def sample_content_dir() -> Path:
    """Return path to the bundled sample content."""
    return Path(__file__).parent.parent / "examples" / "content"


@pytest.fixture
def fixed_clock() -> Clock:
    """A clock pinned to June 1, 2024."""
    return lambda: date(2024, 6, 1)


@pytest.fixture
def sample_experiences() -> list[Experience]:
    """Create experiences in non-chronological order."""
    return [
        Experience(
            company="Acme Labs",
            position="Software Engineering Intern",
            duration="May 2022 - Aug 2022",
            location="Remote",
            description="Built internal tooling for release automation.",
        ),
        Experience(
            company="Northwind",
            position="Full-stack Developer",
            duration="Jan 2023 - Present",
            location="Toronto, ON",
            description="Own the customer dashboard.",
        ),
        Experience(
            company="Campus IT",
            position="Teaching Assistant",
            duration="Sep 2021 - Apr 2022",
            location="Vancouver, BC",
        ),
    ]


@pytest.fixture
def sample_projects() -> list[Project]:
    """Create projects in non-chronological order."""
    return [
        Project(
            name="Query Lens",
            date="2023-11-02",
            summary="A retrieval-augmented assistant.",
            github="https://github.com/example/query-lens",
        ),
        Project(
            name="Pantry",
            date="2022-03-15",
            summary="Meal planner.",
            github="https://github.com/example/pantry",
        ),
        Project(
            name="Tiny Shell",
            date="2024-02-20",
            github="https://github.com/example/tiny-shell",
        ),
    ]


@pytest.fixture
def sample_posts() -> list[BlogPost]:
    """Create blog posts in non-chronological order."""
    return [
        BlogPost(
            slug="postman",
            title="Becoming a Postman Student Expert",
            publishedAt="2023-06-10",
            summary="Testing APIs with Postman.",
            content="Collections and environments.",
        ),
        BlogPost(
            slug="rag-agents",
            title="Building RAG Agents",
            publishedAt="2024-01-18",
            image="/images/rag.png",
            content="Deciding when to retrieve is the hard part.\n",
        ),
    ]


@pytest.fixture
def sample_profile() -> SiteProfile:
    """Create a sample SiteProfile."""
    return SiteProfile(
        title="Alex's Corner of the Web",
        bio="I'm a full-stack developer.",
        email="alex@example.com",
        calendly_url="https://calendly.com/alex-example",
    )
