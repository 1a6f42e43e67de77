from app.config import settings
from app.models.document import ExtractedDocument
from app.models.preview import PreviewResult
from app.services.directives import (
    extract_meta_description,
    extract_meta_keywords,
    extract_meta_title,
    extract_summary,
    extract_title,
)
from app.services.normalizer import (
    count_words,
    featured_image_url,
    generate_slug,
    reading_time_minutes,
)
from app.services.placeholders import extract_suggested_images, extract_video_embeds
from app.services.sanitizer import cleanup_content
from app.services.sections import extract_sections
from app.services.tags import extract_tags


def extract_document(text: str) -> ExtractedDocument:
    """Extract a structured draft from generated *text*.

    Every scanner reads the same untouched *text*; none sees another's
    output.  The SEO title falls back to the heading and the SEO description
    to the summary.
    """
    title = extract_title(text)
    summary = extract_summary(text)

    return ExtractedDocument(
        title=title,
        body=cleanup_content(text),
        summary=summary,
        meta_title=extract_meta_title(text) or title,
        meta_description=extract_meta_description(text) or summary,
        meta_keywords=extract_meta_keywords(text),
        tags=tuple(extract_tags(text)),
        suggested_images=tuple(extract_suggested_images(text)),
        video_embeds=tuple(extract_video_embeds(text)),
    )


def build_preview(text: str) -> PreviewResult:
    """Extract *text* and attach slug, word count, reading time and sections."""
    document = extract_document(text)
    return PreviewResult(
        document=document,
        slug=generate_slug(document.title),
        word_count=count_words(document.body),
        reading_time_minutes=reading_time_minutes(document.body, settings.words_per_minute),
        featured_image_url=featured_image_url(
            document.title, document.meta_keywords, settings.featured_image_base_url
        ),
        sections=extract_sections(document.body),
    )
