from typing import List, Optional

from pydantic import BaseModel, Field

from app.config import settings
from app.models.document import ExtractedDocument
from app.services.review import ReviewPhase, ReviewTab


class Category(BaseModel):
    id: str
    name: str


class ReviewCreateRequest(BaseModel):
    content: str = Field(max_length=settings.max_content_chars)
    page_id: str = Field(
        min_length=1,
        max_length=128,
        description="Identifies the browser page whose outbox receives the hand-off.",
    )
    categories: List[Category] = Field(
        default_factory=list,
        description="Category choices for the editor form; passed through untouched.",
    )


class TabRequest(BaseModel):
    tab: ReviewTab


class ConfirmRequest(BaseModel):
    redirect_after_save: bool = True


class ReviewResponse(BaseModel):
    session_id: str
    page_id: str
    phase: ReviewPhase
    tab: ReviewTab
    document: Optional[ExtractedDocument] = None
    categories: List[Category] = []


class HandoffResponse(BaseModel):
    page_id: str
    redirect_to: str
