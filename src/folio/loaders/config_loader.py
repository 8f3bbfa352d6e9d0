"""Load experiences, projects and the site profile from JSON config files."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from folio.loaders.errors import ContentError
from folio.models.content import Experience, Project, SiteProfile

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def read_json(path: Path) -> Any:
    """Read and decode a JSON file.

    Raises:
        ContentError: If the file is missing, unreadable or is not valid JSON.
    """
    if not path.exists():
        raise ContentError(f"File not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"Cannot read {path}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def _load_list(path: Path, key: str, model: type[M]) -> list[M]:
    data = read_json(path)
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise ContentError(f"Expected a top-level {key!r} array in {path}")
    try:
        records = [model.model_validate(item) for item in data[key]]
    except ValidationError as e:
        raise ContentError(f"Invalid {key} entry in {path}: {e}") from e
    logger.debug(f"Loaded {len(records)} {key} from {path}")
    return records


def load_experiences(path: Path) -> list[Experience]:
    """Load work experiences from a ``{"experiences": [...]}`` file."""
    return _load_list(path, "experiences", Experience)


def load_projects(path: Path) -> list[Project]:
    """Load projects from a ``{"projects": [...]}`` file."""
    return _load_list(path, "projects", Project)


def load_profile(path: Path) -> SiteProfile:
    """Load the site profile from a JSON object."""
    data = read_json(path)
    try:
        profile = SiteProfile.model_validate(data)
    except ValidationError as e:
        raise ContentError(f"Invalid site profile in {path}: {e}") from e
    logger.debug(f"Loaded site profile from {path}")
    return profile
