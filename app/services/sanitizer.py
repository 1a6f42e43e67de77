import re

from app.services.directives import META_LINE_RES, SUMMARY_BLOCK_RE

# A SUMMARY block (directive line plus its wrapped continuation lines),
# together with the newline that ends it
_SUMMARY_REMOVE_RE = re.compile(SUMMARY_BLOCK_RE.pattern + r"\n?", re.MULTILINE)

# META_TITLE / META_DESCRIPTION / META_KEYWORDS lines, including the newline
_META_REMOVE_RES = tuple(
    re.compile(pattern.pattern + r"\n?", re.MULTILINE) for pattern in META_LINE_RES.values()
)


def strip_directives(text: str) -> str:
    """Delete every SUMMARY block and META_* line from *text*.

    Everything else is left byte-for-byte where it was: the tag list, image
    placeholders and embed URLs all have to keep rendering in place.
    """
    text = _SUMMARY_REMOVE_RE.sub("", text)
    for pattern in _META_REMOVE_RES:
        text = pattern.sub("", text)
    return text


def cleanup_content(text: str) -> str:
    """Return the displayable body: *text* without directives, trimmed."""
    return strip_directives(text).strip()
