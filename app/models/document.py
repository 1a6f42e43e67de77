from typing import Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SuggestedImage(BaseModel):
    """An image the generator asked for, still carrying its placeholder token."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    alt_text: str
    placeholder_token: str


class ExtractedDocument(BaseModel):
    """Structured draft assembled from one block of generated text.

    Serialises with camelCase keys (``metaTitle``, ``suggestedImages`` ...)
    because that is the shape the post-creation form reads.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    body: str = ""  # raw text minus SUMMARY / META_* directives
    summary: str = ""
    meta_title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""  # comma-joined, as written by the generator
    tags: Tuple[str, ...] = ()
    suggested_images: Tuple[SuggestedImage, ...] = ()
    video_embeds: Tuple[str, ...] = ()
