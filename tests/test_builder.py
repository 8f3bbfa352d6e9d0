"""Tests for the site builder."""

import json
import shutil
from pathlib import Path

import pytest

from folio.builder import build_site, load_site_content, render_pages
from folio.loaders import ContentError
from folio.utils.date_utils import Clock, MalformedRangeError


@pytest.fixture
def content_copy(sample_content_dir: Path, tmp_path: Path) -> Path:
    """Copy the sample content so tests can break it."""
    target = tmp_path / "content"
    shutil.copytree(sample_content_dir, target)
    return target


class TestLoadSiteContent:
    """Tests for load_site_content function."""

    def test_loads_everything(self, sample_content_dir: Path) -> None:
        content = load_site_content(sample_content_dir)

        assert content.profile.title == "Alex's Corner of the Web"
        assert len(content.experiences) == 3
        assert len(content.projects) == 3
        assert len(content.posts) == 2

    def test_missing_profile_raises(self, content_copy: Path) -> None:
        (content_copy / "site.json").unlink()
        with pytest.raises(ContentError, match="site.json"):
            load_site_content(content_copy)


class TestRenderPages:
    """Tests for render_pages function."""

    def test_page_keys(self, sample_content_dir: Path, fixed_clock: Clock) -> None:
        pages = render_pages(load_site_content(sample_content_dir), fixed_clock)

        assert set(pages) == {
            "index.md",
            "experience.md",
            "projects.md",
            "blog.md",
            "contact.md",
            "blog/postman-student-expert.md",
            "blog/rag-agents.md",
        }


class TestBuildSite:
    """Tests for build_site function."""

    def test_writes_all_pages(
        self, sample_content_dir: Path, tmp_path: Path, fixed_clock: Clock
    ) -> None:
        output_dir = tmp_path / "site"

        written = build_site(sample_content_dir, output_dir, fixed_clock)

        assert len(written) == 7
        assert all(path.exists() for path in written)
        assert (output_dir / "blog" / "rag-agents.md").exists()

    def test_home_page_content(
        self, sample_content_dir: Path, tmp_path: Path, fixed_clock: Clock
    ) -> None:
        build_site(sample_content_dir, tmp_path, fixed_clock)

        index = (tmp_path / "index.md").read_text(encoding="utf-8")
        assert "Jan 2023 - Present | Toronto, ON | 1 year 6 months" in index
        assert index.index("Northwind") < index.index("Acme Labs")
        assert "- January 18, 2024 [Building RAG Agents](blog/rag-agents.md)" in index

    def test_unquoted_front_matter_date(
        self, sample_content_dir: Path, tmp_path: Path, fixed_clock: Clock
    ) -> None:
        build_site(sample_content_dir, tmp_path, fixed_clock)

        post = (tmp_path / "blog" / "rag-agents.md").read_text(encoding="utf-8")
        assert "*January 18, 2024 (5mo ago)*" in post

    def test_malformed_duration_fails_build(
        self, content_copy: Path, tmp_path: Path, fixed_clock: Clock
    ) -> None:
        config = content_copy / "experience" / "config.json"
        data = json.loads(config.read_text(encoding="utf-8"))
        data["experiences"][0]["duration"] = "May 2022 until Aug 2022"
        config.write_text(json.dumps(data), encoding="utf-8")
        output_dir = tmp_path / "site"

        with pytest.raises(MalformedRangeError):
            build_site(content_copy, output_dir, fixed_clock)

        assert not output_dir.exists()

    def test_rebuild_reads_fresh_content(
        self, content_copy: Path, tmp_path: Path, fixed_clock: Clock
    ) -> None:
        output_dir = tmp_path / "site"
        build_site(content_copy, output_dir, fixed_clock)

        profile = content_copy / "site.json"
        profile.write_text(json.dumps({"title": "Renamed"}), encoding="utf-8")
        build_site(content_copy, output_dir, fixed_clock)

        assert (output_dir / "index.md").read_text(encoding="utf-8").startswith("# Renamed")
