"""Date parsing and duration formatting for portfolio content."""

from collections.abc import Callable
from datetime import date, datetime

from dateutil import parser as dtparse

# Zero-argument callable returning "today"
Clock = Callable[[], date]

# Separator between the start and end of a duration range
RANGE_SEPARATOR = " - "

# End token meaning the range is ongoing
PRESENT_TOKEN = "present"

# Fills in fields a token leaves out ("Jan 2020" -> 2020-01-01)
_PARSE_DEFAULT = datetime(1970, 1, 1)


class MalformedRangeError(ValueError):
    """A duration range is missing its `` - `` separator."""


class InvalidDateError(ValueError):
    """A date token could not be parsed into a calendar date."""


def parse_date(token: str) -> date:
    """Parse a free-text date token into a calendar date.

    Accepts the forms found in portfolio content: "Jan 2020",
    "January 2020", "2020", "2023-05-12". Missing day or month default to 1.

    Raises:
        InvalidDateError: If the token is not a recognizable date.
    """
    text = token.strip()
    if not text:
        raise InvalidDateError(f"Empty date token: {token!r}")
    try:
        return dtparse.parse(text, default=_PARSE_DEFAULT).date()
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(f"Unparseable date: {token!r}") from e


def split_duration(duration: str) -> tuple[str, str]:
    """Split a duration range into its start and end tokens.

    Examples:
        >>> split_duration("Jan 2020 - present")
        ('Jan 2020', 'present')

    Raises:
        MalformedRangeError: If the range has no separator.
    """
    if RANGE_SEPARATOR not in duration:
        raise MalformedRangeError(f"Missing {RANGE_SEPARATOR!r} in duration: {duration!r}")
    start, _, end = duration.partition(RANGE_SEPARATOR)
    return start, end


def is_present(token: str) -> bool:
    """Check whether an end token marks an ongoing range."""
    return token.strip().lower() == PRESENT_TOKEN


def resolve_end_date(token: str, clock: Clock = date.today) -> date:
    """Resolve an end token, reading the clock on every call for "present"."""
    if is_present(token):
        return clock()
    return parse_date(token)


def months_in_range(duration: str, clock: Clock = date.today) -> int:
    """Count the calendar months covered by a duration range.

    The starting month is included, so "Jan 2020 - Jan 2020" is 1 month.
    An end before the start yields a negative count.
    """
    start_token, end_token = split_duration(duration)
    start = parse_date(start_token)
    end = resolve_end_date(end_token, clock)
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


def pluralize(value: int, unit: str) -> str:
    """Render ``value`` with ``unit``, singular only when value is exactly 1."""
    return f"{value} {unit if value == 1 else unit + 's'}"


def format_duration(duration: str, clock: Clock = date.today) -> str:
    """Format a duration range as a human-readable length.

    Args:
        duration: Range like "Jan 2020 - Mar 2021" or "Jan 2020 - Present".
        clock: Source of the current date for "present" ranges.

    Returns:
        A string like "5 months", "1 year" or "2 years 3 months".

    Raises:
        MalformedRangeError: If the range has no separator.
        InvalidDateError: If either date token cannot be parsed.

    Examples:
        >>> format_duration("Jan 2020 - Mar 2021")
        '1 year 3 months'
        >>> format_duration("Jan 2020 - Jan 2020")
        '1 month'
    """
    months = months_in_range(duration, clock)

    if months < 12:
        return pluralize(months, "month")

    years, remainder = divmod(months, 12)
    if remainder == 0:
        return pluralize(years, "year")
    return f"{pluralize(years, 'year')} {pluralize(remainder, 'month')}"


def format_date(value: str, include_relative: bool = False, clock: Clock = date.today) -> str:
    """Format a date string for display, e.g. "January 5, 2024".

    With ``include_relative`` the distance from today is appended, judged by
    the first of year, month and day that differs: "(2y ago)", "(3mo ago)",
    "(4d ago)" or "(Today)".

    Raises:
        InvalidDateError: If the value cannot be parsed.
    """
    target = parse_date(value)
    full_date = f"{target:%B} {target.day}, {target.year}"
    if not include_relative:
        return full_date

    today = clock()
    years_ago = today.year - target.year
    months_ago = today.month - target.month
    days_ago = today.day - target.day

    if years_ago > 0:
        relative = f"{years_ago}y ago"
    elif months_ago > 0:
        relative = f"{months_ago}mo ago"
    elif days_ago > 0:
        relative = f"{days_ago}d ago"
    else:
        relative = "Today"

    return f"{full_date} ({relative})"
