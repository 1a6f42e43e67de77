"""Split a draft into heading-delimited sections so one can be regenerated."""

import re
from typing import List

from app.models.section import Section

# "## Heading" or "### Heading"; the level-1 title is not a section boundary
_SECTION_HEADING_RE = re.compile(r"^(?P<marks>#{2,3})[ \t]+(?P<title>.+)$", re.MULTILINE)


def extract_sections(text: str) -> List[Section]:
    """Return one :class:`Section` per ``##``/``###`` heading in *text*.

    A section runs from its heading up to the next heading (of either level)
    or the end of *text*.  Text with no such heading but some content comes
    back as a single section titled ``Content``.
    """
    headings = list(_SECTION_HEADING_RE.finditer(text))
    sections: List[Section] = []

    for index, heading in enumerate(headings):
        start = heading.start()
        end = headings[index + 1].start() if index + 1 < len(headings) else len(text)
        sections.append(
            Section(
                id=f"section-{index}",
                title=heading.group("title").strip(),
                level=len(heading.group("marks")),
                content=text[start:end].strip(),
                start_index=start,
                end_index=end,
            )
        )

    if not sections and text.strip():
        sections.append(
            Section(
                id="section-0",
                title="Content",
                level=0,
                content=text,
                start_index=0,
                end_index=len(text),
            )
        )

    return sections


def replace_section(text: str, section: Section, new_content: str) -> str:
    """Splice *new_content* into *text* over the span *section* covers."""
    if not 0 <= section.start_index <= section.end_index <= len(text):
        raise ValueError(
            f"Section {section.id} spans {section.start_index}-{section.end_index}, "
            f"outside content of length {len(text)}."
        )
    return text[: section.start_index] + new_content + text[section.end_index :]
