"""In-process registry of open review sessions."""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Dict, List

from app.models.review import Category
from app.services.review import ReviewWorkflow

logger = logging.getLogger(__name__)


@dataclass
class ReviewSession:
    session_id: str
    page_id: str
    workflow: ReviewWorkflow
    # Supplied by the category service for the editor; carried, never read
    categories: List[Category] = field(default_factory=list)


class ReviewStore:
    """Open sessions by id, capped at *max_sessions*.

    Reviews that are never confirmed or cancelled would otherwise pile up,
    so adding past the cap drops the oldest session.
    """

    def __init__(self, max_sessions: int = 1000) -> None:
        self._max_sessions = max_sessions
        self._sessions: Dict[str, ReviewSession] = {}

    def add(self, page_id: str, workflow: ReviewWorkflow, categories: List[Category]) -> ReviewSession:
        while len(self._sessions) >= self._max_sessions:
            stale_id = next(iter(self._sessions))
            del self._sessions[stale_id]
            logger.warning("Dropped stale review session", extra={"session_id": stale_id})

        session = ReviewSession(
            session_id=uuid.uuid4().hex,
            page_id=page_id,
            workflow=workflow,
            categories=list(categories),
        )
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> ReviewSession:
        """Return the session; raises :class:`KeyError` if unknown or closed."""
        return self._sessions[session_id]

    def remove(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)
