"""Inline marker scanners: image placeholders and YouTube embed references.

Both scan the whole draft with no section restriction.  Matches are returned
in document order and repeats are kept – the same alt text may legitimately
appear against different placeholder indices, and a video may be embedded
twice.
"""

import re
from typing import List

from app.models.document import SuggestedImage

# ![alt text](image_placeholder_3); the alt text may itself contain "]"
_IMAGE_PLACEHOLDER_RE = re.compile(r"!\[(?P<alt>[^\n]*?)\]\((?P<token>image_placeholder_\d+)\)")

# Bare "youtube.com/embed/<id>" is enough; generators often emit raw URLs
_YOUTUBE_EMBED_RE = re.compile(r"youtube\.com/embed/(?P<video_id>[A-Za-z0-9_-]+)")


def extract_suggested_images(text: str) -> List[SuggestedImage]:
    return [
        SuggestedImage(alt_text=match.group("alt").strip(), placeholder_token=match.group("token"))
        for match in _IMAGE_PLACEHOLDER_RE.finditer(text)
    ]


def extract_video_embeds(text: str) -> List[str]:
    return [match.group("video_id") for match in _YOUTUBE_EMBED_RE.finditer(text)]
