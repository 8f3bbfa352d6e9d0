"""Most-recent-first ordering for experiences, projects and blog posts."""

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from folio.models.content import BlogPost, Experience, Project
from folio.utils.date_utils import RANGE_SEPARATOR, InvalidDateError, parse_date

logger = logging.getLogger(__name__)

R = TypeVar("R")


def experience_start_token(duration: str) -> str:
    """Return the start token of a duration range.

    A range without a separator is treated as a single date token.
    """
    return duration.split(RANGE_SEPARATOR)[0]


def _sort_key(token: str) -> tuple[int, int]:
    # Undatable tokens rank after every datable one; ties keep input order.
    try:
        parsed = parse_date(token)
    except InvalidDateError:
        logger.warning(f"Unparseable date {token!r}, placing record last")
        return (1, 0)
    return (0, -parsed.toordinal())


def sort_by_date_descending(records: Iterable[R], date_field: Callable[[R], str]) -> list[R]:
    """Return the records ordered by date, most recent first.

    The sort is stable, so records with equal dates keep their input order.
    Records whose date cannot be parsed do not raise; they are placed after
    all datable records.

    Args:
        records: Records to order. Not modified.
        date_field: Extracts the date string from a record.

    Returns:
        A new list holding the same records.
    """
    return sorted(records, key=lambda record: _sort_key(date_field(record)))


def sort_experiences(experiences: Iterable[Experience]) -> list[Experience]:
    """Order experiences by the start of their duration range."""
    return sort_by_date_descending(experiences, lambda exp: experience_start_token(exp.duration))


def sort_projects(projects: Iterable[Project]) -> list[Project]:
    """Order projects by their date."""
    return sort_by_date_descending(projects, lambda project: project.date)


def sort_posts(posts: Iterable[BlogPost]) -> list[BlogPost]:
    """Order blog posts by their publication date."""
    return sort_by_date_descending(posts, lambda post: post.published_at)

