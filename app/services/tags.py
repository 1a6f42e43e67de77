import re
from typing import List

from app.services.directives import extract_meta_keywords

# "Tags:" / "Related topics:" / "Keywords:" header (optionally as a Markdown
# heading) directly followed by one or more "-" / "*" list lines.
# Anchored to line start so "META_KEYWORDS:" is never mistaken for a header.
_TAG_SECTION_RE = re.compile(
    r"^[ \t]*(?:#{1,6}[ \t]+)?(?:tags|related topics|keywords):[ \t]*\r?\n"
    r"(?P<items>(?:[ \t]*[-*][ \t]*\S[^\n]*(?:\n|$))+)",
    re.IGNORECASE | re.MULTILINE,
)

_ITEM_MARKER_RE = re.compile(r"^[ \t]*[-*][ \t]*")


def _tags_from_section(items: str) -> List[str]:
    tags: List[str] = []
    for line in items.splitlines():
        tag = _ITEM_MARKER_RE.sub("", line, count=1).strip()
        if tag:
            tags.append(tag)
    return tags


def extract_tags(text: str) -> List[str]:
    """Return tags from the first tag-list section, else from META_KEYWORDS.

    Order follows the document and repeats are kept; callers that need a set
    must deduplicate themselves.
    """
    match = _TAG_SECTION_RE.search(text)
    if match:
        return _tags_from_section(match.group("items"))

    keywords = extract_meta_keywords(text)
    return [piece.strip() for piece in keywords.split(",") if piece.strip()]
