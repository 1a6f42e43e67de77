from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.config import settings
from app.models.document import ExtractedDocument
from app.models.section import Section


class PreviewRequest(BaseModel):
    content: str = Field(
        max_length=settings.max_content_chars,
        description="Raw generated draft. May be empty; extraction never fails.",
    )


class PreviewResult(BaseModel):
    """An extracted document plus the values the preview screen derives from it."""

    model_config = ConfigDict(frozen=True)

    document: ExtractedDocument
    slug: str
    word_count: int
    reading_time_minutes: int
    featured_image_url: str
    sections: List[Section]


class SectionReplaceRequest(BaseModel):
    content: str = Field(max_length=settings.max_content_chars)
    section_id: str = Field(description="Identifier returned by the preview, e.g. 'section-2'.")
    new_content: str = Field(max_length=settings.max_content_chars)


class SectionReplaceResponse(BaseModel):
    content: str
    sections: List[Section]
