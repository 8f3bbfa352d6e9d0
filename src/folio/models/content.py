"""Portfolio content models."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_to_date_string(v: Any) -> Any:
    """Turn YAML-parsed dates back into ISO strings."""
    if isinstance(v, date):
        return v.isoformat()
    return v


class Experience(BaseModel):
    """Work experience entry."""

    model_config = ConfigDict(frozen=True)

    company: str
    position: str
    duration: str = Field(description='Range like "Jan 2020 - Present"')
    location: str = ""
    description: str = ""


class Project(BaseModel):
    """Project entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    date: str
    summary: str = ""
    github: str

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> Any:
        return _coerce_to_date_string(v)


class BlogPost(BaseModel):
    """Blog post read from a Markdown file with front-matter."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slug: str
    title: str
    published_at: str = Field(alias="publishedAt")
    summary: str = ""
    image: str | None = None
    content: str = ""

    @field_validator("published_at", mode="before")
    @classmethod
    def coerce_published_at(cls, v: Any) -> Any:
        return _coerce_to_date_string(v)


class SiteProfile(BaseModel):
    """Site owner details shown on the home and contact pages."""

    model_config = ConfigDict(frozen=True)

    title: str
    bio: str = ""
    email: str | None = None
    calendly_url: str | None = None
