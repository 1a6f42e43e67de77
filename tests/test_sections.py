"""Tests for app.services.sections."""

import pytest

from app.models.section import Section
from app.services.sections import extract_sections, replace_section

_DRAFT = "# Title\n\nIntro.\n\n## Setup\nInstall it.\n\n### Details\nFine print.\n\n## Usage\nRun it."


class TestExtractSections:
    def test_one_section_per_heading(self):
        sections = extract_sections(_DRAFT)
        assert [s.title for s in sections] == ["Setup", "Details", "Usage"]
        assert [s.level for s in sections] == [2, 3, 2]
        assert [s.id for s in sections] == ["section-0", "section-1", "section-2"]

    def test_section_spans_to_next_heading(self):
        setup = extract_sections(_DRAFT)[0]
        assert setup.content == "## Setup\nInstall it."
        assert _DRAFT[setup.start_index : setup.end_index].strip() == setup.content

    def test_last_section_runs_to_end(self):
        usage = extract_sections(_DRAFT)[-1]
        assert usage.end_index == len(_DRAFT)
        assert usage.content == "## Usage\nRun it."

    def test_no_headings_single_section(self):
        sections = extract_sections("Just a paragraph.")
        assert len(sections) == 1
        assert sections[0].title == "Content"
        assert sections[0].content == "Just a paragraph."

    def test_blank_text_has_no_sections(self):
        assert extract_sections("  \n ") == []

    def test_level_four_is_not_a_boundary(self):
        sections = extract_sections("## Top\n#### Deep\ntext")
        assert len(sections) == 1
        assert "#### Deep" in sections[0].content


class TestReplaceSection:
    def test_replaces_only_target_section(self):
        setup = extract_sections(_DRAFT)[0]
        result = replace_section(_DRAFT, setup, "## Setup\nUse pip.\n\n")
        assert "Use pip." in result
        assert "Install it." not in result
        assert result.startswith("# Title\n\nIntro.\n\n")
        assert result.endswith("## Usage\nRun it.")

    def test_out_of_range_section_rejected(self):
        bogus = Section(id="section-9", title="X", level=2, content="", start_index=5, end_index=500)
        with pytest.raises(ValueError):
            replace_section("short", bogus, "new")
