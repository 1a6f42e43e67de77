"""Tests for document assembly in app.services.extractor."""

import pytest
from pydantic import ValidationError

from app.models.document import ExtractedDocument, SuggestedImage
from app.services.extractor import build_preview, extract_document

_END_TO_END = (
    "# My Post\n"
    "SUMMARY: A short post.\n"
    "META_TITLE: My Post SEO\n"
    "META_KEYWORDS: a, b\n"
    "\n"
    "Body text here.\n"
    "\n"
    "Tags:\n"
    "- a\n"
    "- b\n"
    "\n"
    "![img](image_placeholder_1)\n"
    "https://youtube.com/embed/xyz"
)


class TestExtractDocument:
    def test_end_to_end(self):
        doc = extract_document(_END_TO_END)
        assert doc.title == "My Post"
        assert doc.summary == "A short post."
        assert doc.meta_title == "My Post SEO"
        assert doc.meta_description == "A short post."
        assert doc.meta_keywords == "a, b"
        assert doc.tags == ("a", "b")
        assert doc.suggested_images == (
            SuggestedImage(alt_text="img", placeholder_token="image_placeholder_1"),
        )
        assert doc.video_embeds == ("xyz",)
        assert doc.body == (
            "# My Post\n"
            "\n"
            "Body text here.\n"
            "\n"
            "Tags:\n"
            "- a\n"
            "- b\n"
            "\n"
            "![img](image_placeholder_1)\n"
            "https://youtube.com/embed/xyz"
        )

    def test_extraction_is_repeatable(self):
        assert extract_document(_END_TO_END) == extract_document(_END_TO_END)
        assert (
            extract_document(_END_TO_END).model_dump_json()
            == extract_document(_END_TO_END).model_dump_json()
        )

    def test_meta_title_without_heading(self):
        doc = extract_document("META_TITLE: Foo")
        assert doc.meta_title == "Foo"
        assert doc.title == ""

    def test_meta_title_falls_back_to_heading(self):
        doc = extract_document("# Hello World\n\nSome body.")
        assert doc.meta_title == "Hello World"

    def test_meta_description_falls_back_to_summary(self):
        doc = extract_document("Intro sentence.\n\nSecond paragraph.")
        assert doc.summary == "Intro sentence."
        assert doc.meta_description == "Intro sentence."

    def test_explicit_meta_description_wins(self):
        doc = extract_document("SUMMARY: Long summary.\nMETA_DESCRIPTION: Short.")
        assert doc.summary == "Long summary."
        assert doc.meta_description == "Short."

    def test_unstructured_text_gives_empty_fields(self):
        doc = extract_document("   ")
        assert doc == ExtractedDocument()

    def test_document_is_immutable(self):
        doc = extract_document(_END_TO_END)
        with pytest.raises(ValidationError):
            doc.title = "changed"
        assert doc.title == "My Post"

    def test_serialises_with_camel_case_keys(self):
        data = extract_document(_END_TO_END).model_dump(mode="json", by_alias=True)
        assert data["metaTitle"] == "My Post SEO"
        assert data["suggestedImages"] == [
            {"altText": "img", "placeholderToken": "image_placeholder_1"}
        ]
        assert data["videoEmbeds"] == ["xyz"]


class TestBuildPreview:
    def test_derived_values(self):
        result = build_preview(_END_TO_END)
        assert result.document == extract_document(_END_TO_END)
        assert result.slug == "my-post"
        assert result.word_count == len(result.document.body.split())
        assert result.reading_time_minutes == 1
        assert result.featured_image_url.endswith("?a,b")

    def test_sections_come_from_body(self):
        text = "# Title\nMETA_TITLE: x\n\n## One\nFirst.\n\n## Two\nSecond."
        result = build_preview(text)
        assert [section.title for section in result.sections] == ["One", "Two"]
        assert "META_TITLE" not in result.sections[0].content

    def test_empty_input(self):
        result = build_preview("")
        assert result.slug == "post"
        assert result.word_count == 0
        assert result.reading_time_minutes == 1
        assert result.sections == []
