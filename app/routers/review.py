"""Review endpoints: open a draft, flip tabs, cancel, or hand off to the editor."""

import logging

from fastapi import APIRouter, HTTPException, Request

from app.config import settings
from app.models.review import (
    ConfirmRequest,
    HandoffResponse,
    ReviewCreateRequest,
    ReviewResponse,
    TabRequest,
)
from app.routers.preview import limiter
from app.services.extractor import extract_document
from app.services.outbox import OutboxRegistry
from app.services.review import HandoffError, ReviewStateError, ReviewWorkflow
from app.services.sessions import ReviewSession, ReviewStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["Review"])

# Process-local state; every review and outbox lives on the event loop thread
sessions = ReviewStore(max_sessions=settings.max_open_reviews)
outboxes = OutboxRegistry(quota_bytes=settings.outbox_quota_bytes)


@router.post("", response_model=ReviewResponse, status_code=201, summary="Open a draft for review")
@limiter.limit(settings.review_rate_limit)
async def open_review(request: Request, body: ReviewCreateRequest) -> ReviewResponse:
    logger.info(
        "Review requested",
        extra={"page_id": body.page_id, "content_chars": len(body.content)},
    )
    workflow = ReviewWorkflow(
        outbox=outboxes.page(body.page_id),
        navigate=_announce_navigation,
        editor_path=settings.editor_path,
    )
    workflow.open(extract_document(body.content))
    session = sessions.add(body.page_id, workflow, body.categories)
    return _to_response(session)


@router.get("/{session_id}", response_model=ReviewResponse, summary="Current state of a review")
async def get_review(session_id: str) -> ReviewResponse:
    return _to_response(_get_session(session_id))


@router.post("/{session_id}/tab", response_model=ReviewResponse, summary="Switch the active tab")
async def switch_tab(session_id: str, body: TabRequest) -> ReviewResponse:
    session = _get_session(session_id)
    _apply(session, lambda workflow: workflow.switch_tab(body.tab))
    return _to_response(session)


@router.post("/{session_id}/cancel", response_model=ReviewResponse, summary="Discard the review")
async def cancel_review(session_id: str) -> ReviewResponse:
    session = _get_session(session_id)
    _apply(session, lambda workflow: workflow.cancel())
    sessions.remove(session_id)
    return _to_response(session)


@router.post(
    "/{session_id}/confirm",
    response_model=HandoffResponse,
    summary="Hand the reviewed draft to the post editor",
    description=(
        "Writes the draft and the redirect flag into the page's outbox and "
        "returns the editor location.  The review closes on success; a "
        "second confirm on the same review is rejected with 409.  If the "
        "hand-off fails the review stays open and 503 is returned."
    ),
)
@limiter.limit(settings.review_rate_limit)
async def confirm_review(request: Request, session_id: str, body: ConfirmRequest) -> HandoffResponse:
    session = _get_session(session_id)
    try:
        redirect_to = session.workflow.confirm_and_edit(
            redirect_after_save=body.redirect_after_save
        )
    except ReviewStateError as exc:
        logger.warning("Rejected confirm for review %s: %s", session_id, exc)
        raise HTTPException(status_code=409, detail=str(exc))
    except HandoffError as exc:
        logger.error("Hand-off failed for review %s: %s", session_id, exc)
        raise HTTPException(status_code=503, detail=str(exc))

    sessions.remove(session_id)
    return HandoffResponse(page_id=session.page_id, redirect_to=redirect_to)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _announce_navigation(path: str) -> None:
    # The editor is a separate page; the client follows redirect_to itself
    logger.info("Editor take-over signalled", extra={"editor_path": path})


def _get_session(session_id: str) -> ReviewSession:
    try:
        return sessions.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Review not found or already closed.")


def _apply(session: ReviewSession, event) -> None:
    """Run *event* against the session's workflow, mapping bad transitions to 409."""
    try:
        event(session.workflow)
    except ReviewStateError as exc:
        logger.warning("Rejected event for review %s: %s", session.session_id, exc)
        raise HTTPException(status_code=409, detail=str(exc))


def _to_response(session: ReviewSession) -> ReviewResponse:
    workflow = session.workflow
    return ReviewResponse(
        session_id=session.session_id,
        page_id=session.page_id,
        phase=workflow.phase,
        tab=workflow.tab,
        document=workflow.document,
        categories=session.categories,
    )
