"""Editor-side endpoint: collect the draft a review handed off, exactly once."""

import logging

from fastapi import APIRouter, HTTPException, Request

from app.config import settings
from app.models.handoff import Handoff
from app.routers.preview import limiter
from app.routers.review import outboxes
from app.services.outbox import take_handoff

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/handoff", tags=["Hand-off"])


@router.post(
    "/{page_id}/take",
    response_model=Handoff,
    summary="Take the pending draft for a page",
    description=(
        "Reads and clears both hand-off keys for *page_id*.  A second call "
        "returns 404 until another review is confirmed on that page."
    ),
)
@limiter.limit(settings.review_rate_limit)
async def take_pending_draft(request: Request, page_id: str) -> Handoff:
    # Unknown pages are answered without allocating anything for them
    handoff = take_handoff(outboxes.page(page_id))
    if handoff is None:
        raise HTTPException(status_code=404, detail="No draft is waiting for this page.")

    logger.info("Draft collected by editor", extra={"page_id": page_id})
    return handoff
