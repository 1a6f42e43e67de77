"""Scanners for labelled directive lines in generated drafts.

Generators are asked to emit a level-1 heading for the title plus a handful
of ``LABEL: value`` lines (``SUMMARY:``, ``META_TITLE:``,
``META_DESCRIPTION:``, ``META_KEYWORDS:``).  They do not always comply, so
every scanner here is best-effort: a missing or mangled directive yields an
empty string, never an exception.
"""

import re

DIRECTIVE_LABELS = ("SUMMARY", "META_TITLE", "META_DESCRIPTION", "META_KEYWORDS")

# Start of any directive line; a SUMMARY continuation stops here
_DIRECTIVE_START = r"[ \t]*(?:" + "|".join(DIRECTIVE_LABELS) + r"):"
_DIRECTIVE_START_RE = re.compile(_DIRECTIVE_START)

# "# Title" – exactly one hash, so "## Section" never counts as the title
_TITLE_RE = re.compile(r"^#[ \t]+(.*\S)", re.MULTILINE)

# SUMMARY: first line, then every following non-blank, non-directive line
SUMMARY_BLOCK_RE = re.compile(
    r"^[ \t]*SUMMARY:[ \t]*(?P<text>[^\n]*(?:\n(?!" + _DIRECTIVE_START + r")[ \t]*\S[^\n]*)*)",
    re.MULTILINE,
)

# Single-line directives; the value never continues onto the next line
META_LINE_RES = {
    label: re.compile(r"^[ \t]*" + label + r":[ \t]*(?P<text>[^\n]*)", re.MULTILINE)
    for label in ("META_TITLE", "META_DESCRIPTION", "META_KEYWORDS")
}

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def _first_line_value(label: str, text: str) -> str:
    match = META_LINE_RES[label].search(text)
    return match.group("text").strip() if match else ""


def extract_title(text: str) -> str:
    """Return the text of the first level-1 heading, or ``""``."""
    match = _TITLE_RE.search(text)
    return match.group(1).strip() if match else ""


def extract_meta_title(text: str) -> str:
    return _first_line_value("META_TITLE", text)


def extract_meta_description(text: str) -> str:
    return _first_line_value("META_DESCRIPTION", text)


def extract_meta_keywords(text: str) -> str:
    return _first_line_value("META_KEYWORDS", text)


def _first_paragraph(text: str) -> str:
    """Return the first blank-line-delimited paragraph that reads as prose."""
    for block in _PARAGRAPH_SPLIT_RE.split(text):
        paragraph = block.strip()
        if not paragraph or paragraph.startswith("#"):
            continue
        if _DIRECTIVE_START_RE.match(paragraph):
            continue
        return paragraph
    return ""


def extract_summary(text: str) -> str:
    """Return the SUMMARY directive, falling back to the first prose paragraph.

    The directive may wrap onto following lines; it ends at the first blank
    line, the next directive line, or the end of *text*.
    """
    match = SUMMARY_BLOCK_RE.search(text)
    if match:
        summary = match.group("text").strip()
        if summary:
            return summary
    return _first_paragraph(text)
