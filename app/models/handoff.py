from pydantic import BaseModel

from app.models.document import ExtractedDocument


class Handoff(BaseModel):
    """What the post-creation form receives: the draft and the redirect flag."""

    document: ExtractedDocument
    redirect_after_save: bool
