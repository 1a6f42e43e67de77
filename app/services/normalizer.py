"""Derived display values: slug, reading time, featured image, frontmatter."""

import math
import re
import unicodedata
from urllib.parse import quote

from app.models.document import ExtractedDocument


def generate_slug(title: str) -> str:
    """Generate a URL slug from a post title.

    The slug is lowercased, ASCII-only, and uses hyphens as separators.
    """
    slug = unicodedata.normalize("NFKD", title)
    slug = slug.encode("ascii", "ignore").decode("ascii").lower()

    # Drop punctuation, then collapse whitespace/underscores into single hyphens
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"-+", "-", slug).strip("-")

    return slug or "post"


def count_words(text: str) -> int:
    return len(text.split())


def reading_time_minutes(text: str, words_per_minute: int = 200) -> int:
    """Whole minutes needed to read *text*; never less than one."""
    return max(1, math.ceil(count_words(text) / words_per_minute))


def featured_image_url(title: str, keywords: str, base_url: str) -> str:
    """Build an image-search URL from the first three keywords, else the title."""
    if keywords:
        terms = ",".join(keyword.strip() for keyword in keywords.split(",")[:3])
    else:
        terms = title
    return f"{base_url}?{quote(terms, safe=',')}"


def make_frontmatter(document: ExtractedDocument, slug: str) -> str:
    """Return a YAML frontmatter block for a reviewed draft."""
    lines = [
        "---",
        f'title: "{_escape_yaml(document.title)}"',
        f'slug: "{slug}"',
        f'summary: "{_escape_yaml(document.summary)}"',
        f'meta_title: "{_escape_yaml(document.meta_title)}"',
        f'meta_description: "{_escape_yaml(document.meta_description)}"',
    ]
    if document.tags:
        lines.append("tags:")
        lines.extend(f'  - "{_escape_yaml(tag)}"' for tag in document.tags)
    lines.append("---")
    return "\n".join(lines)


def _escape_yaml(value: str) -> str:
    """Escape characters that would break inline double-quoted YAML strings."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
