"""Tests for app.services.normalizer."""

from app.models.document import ExtractedDocument
from app.services.normalizer import (
    count_words,
    featured_image_url,
    generate_slug,
    make_frontmatter,
    reading_time_minutes,
)


class TestGenerateSlug:
    def test_basic_title(self):
        assert generate_slug("My First Post") == "my-first-post"

    def test_punctuation_removed(self):
        assert generate_slug("What's New in Python 3.12?") == "whats-new-in-python-312"

    def test_accents_folded_to_ascii(self):
        assert generate_slug("Café Crème") == "cafe-creme"

    def test_repeated_separators_collapse(self):
        assert generate_slug("  spaced -- out__title ") == "spaced-out-title"

    def test_empty_title_falls_back(self):
        assert generate_slug("") == "post"
        assert generate_slug("!!!") == "post"


class TestReadingTime:
    def test_word_count(self):
        assert count_words("one two\nthree\t four") == 4

    def test_minimum_one_minute(self):
        assert reading_time_minutes("") == 1
        assert reading_time_minutes("short text") == 1

    def test_rounds_up(self):
        text = " ".join(["word"] * 201)
        assert reading_time_minutes(text) == 2

    def test_custom_speed(self):
        text = " ".join(["word"] * 300)
        assert reading_time_minutes(text, words_per_minute=100) == 3


class TestFeaturedImageUrl:
    def test_uses_first_three_keywords(self):
        url = featured_image_url("Title", "ai, python, web, extra", "https://img.example/")
        assert url == "https://img.example/?ai,python,web"

    def test_falls_back_to_title(self):
        url = featured_image_url("Hello World", "", "https://img.example/")
        assert url == "https://img.example/?Hello%20World"


class TestMakeFrontmatter:
    def test_structure(self):
        doc = ExtractedDocument(
            title="My Post",
            summary="Short.",
            meta_title="SEO",
            meta_description="Desc",
            tags=("a", "b"),
        )
        fm = make_frontmatter(doc, "my-post")
        assert fm.startswith("---\n")
        assert fm.endswith("\n---")
        assert 'title: "My Post"' in fm
        assert 'slug: "my-post"' in fm
        assert 'tags:\n  - "a"\n  - "b"' in fm

    def test_escapes_quotes_and_newlines(self):
        doc = ExtractedDocument(title='Say "hi"', summary="Line one\nLine two")
        fm = make_frontmatter(doc, "say-hi")
        assert 'title: "Say \\"hi\\""' in fm
        assert 'summary: "Line one\\nLine two"' in fm

    def test_no_tags_block_without_tags(self):
        fm = make_frontmatter(ExtractedDocument(title="T"), "t")
        assert "tags:" not in fm
