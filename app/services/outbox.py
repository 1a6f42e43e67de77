"""Page-scoped hand-off channel between the review workflow and the editor.

The review screen and the post-creation form never talk directly.  On
confirm, the reviewed draft is dropped into the page's :class:`Outbox` under
two fixed keys; the form later takes both keys out exactly once.  ``put``
overwrites without complaint, so the at-most-once guarantee lives with the
writer (see :mod:`app.services.review`), not here.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from pydantic import ValidationError

from app.models.document import ExtractedDocument
from app.models.handoff import Handoff

logger = logging.getLogger(__name__)

HANDOFF_PAYLOAD_KEY = "ai_generated_blog_data"
HANDOFF_REDIRECT_KEY = "redirect_to_blog_list_after_save"
HANDOFF_KEYS = (HANDOFF_PAYLOAD_KEY, HANDOFF_REDIRECT_KEY)


class OutboxError(RuntimeError):
    """The outbox refused a write (quota exhausted, storage unavailable)."""


class Outbox(ABC):
    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing whatever was there."""

    @abstractmethod
    def take_once(self, key: str) -> Optional[str]:
        """Remove and return the value under *key*, or ``None`` if absent."""

    @abstractmethod
    def __contains__(self, key: object) -> bool: ...


class InMemoryOutbox(Outbox):
    """Dict-backed outbox with a byte quota, like browser session storage."""

    def __init__(self, quota_bytes: int) -> None:
        self._quota_bytes = quota_bytes
        self._slots: Dict[str, str] = {}

    def _used_bytes(self, exclude: str = "") -> int:
        return sum(
            len(key.encode()) + len(value.encode())
            for key, value in self._slots.items()
            if key != exclude
        )

    def put(self, key: str, value: str) -> None:
        needed = self._used_bytes(exclude=key) + len(key.encode()) + len(value.encode())
        if needed > self._quota_bytes:
            raise OutboxError(
                f"Outbox quota exceeded: {needed} bytes needed, {self._quota_bytes} allowed."
            )
        self._slots[key] = value

    def take_once(self, key: str) -> Optional[str]:
        return self._slots.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._slots)


class OutboxRegistry:
    """One :class:`InMemoryOutbox` per page id.

    Storage for a page exists only while it holds keys: :meth:`page` hands out
    a :class:`PageOutbox` view that creates the outbox on the first ``put``
    and drops it again once a ``take_once`` leaves it empty.  Reads never
    create anything.
    """

    def __init__(self, quota_bytes: int) -> None:
        self._quota_bytes = quota_bytes
        self._outboxes: Dict[str, InMemoryOutbox] = {}

    def get(self, page_id: str) -> InMemoryOutbox:
        outbox = self._outboxes.get(page_id)
        if outbox is None:
            outbox = InMemoryOutbox(self._quota_bytes)
            self._outboxes[page_id] = outbox
        return outbox

    def peek(self, page_id: str) -> Optional[InMemoryOutbox]:
        return self._outboxes.get(page_id)

    def page(self, page_id: str) -> "PageOutbox":
        return PageOutbox(self, page_id)

    def discard(self, page_id: str) -> None:
        self._outboxes.pop(page_id, None)

    def clear(self) -> None:
        self._outboxes.clear()

    def __len__(self) -> int:
        return len(self._outboxes)


class PageOutbox(Outbox):
    """A page's slot in an :class:`OutboxRegistry`, resolved on every call."""

    def __init__(self, registry: OutboxRegistry, page_id: str) -> None:
        self._registry = registry
        self._page_id = page_id

    def put(self, key: str, value: str) -> None:
        outbox = self._registry.get(self._page_id)
        try:
            outbox.put(key, value)
        finally:
            self._drop_if_empty(outbox)

    def take_once(self, key: str) -> Optional[str]:
        outbox = self._registry.peek(self._page_id)
        if outbox is None:
            return None
        value = outbox.take_once(key)
        self._drop_if_empty(outbox)
        return value

    def __contains__(self, key: object) -> bool:
        outbox = self._registry.peek(self._page_id)
        return outbox is not None and key in outbox

    def _drop_if_empty(self, outbox: InMemoryOutbox) -> None:
        if len(outbox) == 0:
            self._registry.discard(self._page_id)


def write_handoff(
    outbox: Outbox, document: ExtractedDocument, redirect_after_save: bool
) -> Dict[str, Optional[str]]:
    """Write *document* and the redirect flag into *outbox*.

    Either both keys land or neither does: if a write fails, whatever the
    two keys held before is put back before the error propagates.  Returns
    those previous values so a caller that later abandons the hand-off can
    hand them to :func:`restore_handoff`.
    """
    entries = (
        (HANDOFF_PAYLOAD_KEY, document.model_dump_json(by_alias=True)),
        (HANDOFF_REDIRECT_KEY, "true" if redirect_after_save else "false"),
    )
    previous = {key: outbox.take_once(key) for key in HANDOFF_KEYS}
    try:
        for key, value in entries:
            outbox.put(key, value)
    except Exception:
        restore_handoff(outbox, previous)
        raise
    return previous


def restore_handoff(outbox: Outbox, previous: Dict[str, Optional[str]]) -> None:
    """Put the hand-off keys back to *previous*, as returned by :func:`write_handoff`."""
    for key in HANDOFF_KEYS:
        outbox.take_once(key)
    for key in HANDOFF_KEYS:
        value = previous.get(key)
        if value is not None:
            outbox.put(key, value)


def take_handoff(outbox: Outbox) -> Optional[Handoff]:
    """Read and clear both hand-off keys; ``None`` when nothing usable is pending."""
    raw_payload = outbox.take_once(HANDOFF_PAYLOAD_KEY)
    raw_redirect = outbox.take_once(HANDOFF_REDIRECT_KEY)
    if raw_payload is None:
        return None

    try:
        document = ExtractedDocument.model_validate_json(raw_payload)
    except ValidationError as exc:
        logger.warning("Discarding unreadable hand-off payload: %s", exc)
        return None

    return Handoff(document=document, redirect_after_save=raw_redirect == "true")
