"""Review state machine wrapped around one extracted draft.

States
------
``closed``
    No draft under review (initial and terminal).
``open``
    A draft is on screen with the ``content`` or ``metadata`` tab active.
    Switching tabs has no side effects.
``committing``
    The draft is being written to the outbox and the editor signalled.
    Success closes the session for good; failure returns it to ``open``
    with the same draft and tab.

``cancel`` from ``open`` goes straight to ``closed`` without touching the
outbox.  ``confirm_and_edit`` from anything but ``open`` raises
:class:`ReviewStateError`; that is how a second click on an already used
confirm button is refused.
"""

import logging
from enum import Enum
from typing import Callable, NoReturn, Optional

from app.models.document import ExtractedDocument
from app.services.outbox import Outbox, restore_handoff, write_handoff

logger = logging.getLogger(__name__)

Navigator = Callable[[str], None]


class ReviewTab(str, Enum):
    CONTENT = "content"
    METADATA = "metadata"


class ReviewPhase(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    COMMITTING = "committing"


class ReviewStateError(RuntimeError):
    """An event arrived that the current phase does not accept."""


class HandoffError(RuntimeError):
    """The draft could not be handed to the editor; the review is still open."""


class ReviewWorkflow:
    def __init__(self, outbox: Outbox, navigate: Navigator, editor_path: str) -> None:
        self._outbox = outbox
        self._navigate = navigate
        self._editor_path = editor_path
        self._phase = ReviewPhase.CLOSED
        self._tab = ReviewTab.CONTENT
        self._document: Optional[ExtractedDocument] = None

    @property
    def phase(self) -> ReviewPhase:
        return self._phase

    @property
    def tab(self) -> ReviewTab:
        return self._tab

    @property
    def document(self) -> Optional[ExtractedDocument]:
        return self._document

    def _require_open(self, action: str) -> ExtractedDocument:
        if self._phase is not ReviewPhase.OPEN or self._document is None:
            raise ReviewStateError(f"Cannot {action} while the review is {self._phase.value}.")
        return self._document

    def open(self, document: ExtractedDocument) -> None:
        """Show *document*, starting on the content tab.

        Opening again while already open swaps in the new draft and resets
        the tab.
        """
        if self._phase is ReviewPhase.COMMITTING:
            raise ReviewStateError("Cannot open a new draft while a hand-off is in progress.")
        self._document = document
        self._tab = ReviewTab.CONTENT
        self._phase = ReviewPhase.OPEN
        logger.info("Review opened", extra={"title": document.title})

    def switch_tab(self, tab: ReviewTab) -> None:
        self._require_open("switch tabs")
        self._tab = ReviewTab(tab)

    def cancel(self) -> None:
        self._require_open("cancel")
        self._document = None
        self._tab = ReviewTab.CONTENT
        self._phase = ReviewPhase.CLOSED
        logger.info("Review cancelled")

    def confirm_and_edit(self, redirect_after_save: bool = True) -> str:
        """Hand the draft to the editor and close the review.

        Returns the editor path that was navigated to.

        Raises:
            ReviewStateError: if the review is not open.
            HandoffError: if the outbox write or the navigation failed.  The
                review is back in ``open`` with its draft and tab unchanged,
                and the outbox holds whatever it held before the confirm.
        """
        document = self._require_open("confirm")
        self._phase = ReviewPhase.COMMITTING

        try:
            previous = write_handoff(self._outbox, document, redirect_after_save)
        except Exception as exc:
            self._fail(
                exc,
                "The draft could not be saved for the editor. "
                "Free some browser storage or shorten the draft, then try again.",
            )

        try:
            self._navigate(self._editor_path)
        except Exception as exc:
            # Nobody will read this payload; whatever was pending before stays pending
            restore_handoff(self._outbox, previous)
            self._fail(exc, "The editor could not be opened. Try again.")

        self._document = None
        self._tab = ReviewTab.CONTENT
        self._phase = ReviewPhase.CLOSED
        logger.info("Draft handed off to editor", extra={"editor_path": self._editor_path})
        return self._editor_path

    def _fail(self, exc: Exception, message: str) -> NoReturn:
        self._phase = ReviewPhase.OPEN
        logger.error("Hand-off failed, review left open: %s", exc)
        raise HandoffError(message) from exc
