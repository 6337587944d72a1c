"""In-memory implementation of IEventStoreClient.

Reference event store kept in Python dictionaries. It honours the same
contract as the remote store: events are append-only per
``(memory_id, actor_id, session_id)``, listing is cursor-paginated, payloads
are omitted unless requested and deletion is by event id. Suitable for
development, tests and single-process applications.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from ..base.errors import ErrorCode, EventStoreError
from ..base.models import EventPage, StoredEvent, StoredPayload

_Scope = Tuple[str, str, str]

_TOKEN_PREFIX = "offset:"


class InMemoryEventStore:
    """Dictionary-backed event store.

    Event ids come from a per-instance sequence incremented under a lock, so
    ids are unique and increasing for the lifetime of the store. Cursor
    tokens are opaque offsets into the scope's event list.
    """

    def __init__(self) -> None:
        self._events: Dict[_Scope, List[StoredEvent]] = {}
        self._lock = threading.Lock()
        self._sequence = 0

    def _next_event_id(self) -> str:
        # caller holds self._lock
        self._sequence += 1
        return f"evt-{self._sequence:012d}"

    @staticmethod
    def _decode_token(token: Optional[str]) -> int:
        if token is None:
            return 0
        if not token.startswith(_TOKEN_PREFIX) or not token[len(_TOKEN_PREFIX):].isdigit():
            raise EventStoreError(ErrorCode.VALIDATION, f"Invalid next token: {token!r}", operation="list_events")
        return int(token[len(_TOKEN_PREFIX):])

    def list_events(
        self,
        *,
        memory_id: str,
        actor_id: str,
        session_id: str,
        include_payloads: bool,
        max_results: int,
        next_token: Optional[str] = None,
    ) -> EventPage:
        """Return up to ``max_results`` events after the cursor position.

        Raises
        ------
        EventStoreError
            ``VALIDATION`` for a non-positive ``max_results`` or a malformed token.
        """
        if max_results <= 0:
            raise EventStoreError(ErrorCode.VALIDATION, "max_results must be positive", operation="list_events")
        start = self._decode_token(next_token)
        with self._lock:
            scoped = list(self._events.get((memory_id, actor_id, session_id), ()))
        window = scoped[start : start + max_results]
        end = start + len(window)
        if not include_payloads:
            window = [
                StoredEvent(e.memory_id, e.actor_id, e.session_id, e.event_id, e.timestamp)
                for e in window
            ]
        token = f"{_TOKEN_PREFIX}{end}" if end < len(scoped) else None
        return EventPage(events=tuple(window), next_token=token)

    def create_event(
        self,
        *,
        memory_id: str,
        actor_id: str,
        session_id: str,
        payloads: Sequence[StoredPayload],
        event_timestamp: datetime,
    ) -> StoredEvent:
        """Append one event and return it with its assigned id."""
        with self._lock:
            event = StoredEvent(
                memory_id=memory_id,
                actor_id=actor_id,
                session_id=session_id,
                event_id=self._next_event_id(),
                timestamp=event_timestamp or datetime.now(timezone.utc),
                payloads=tuple(payloads),
            )
            self._events.setdefault((memory_id, actor_id, session_id), []).append(event)
        return event

    def delete_event(self, *, memory_id: str, actor_id: str, session_id: str, event_id: str) -> None:
        """Remove one event.

        Raises
        ------
        EventStoreError
            ``NOT_FOUND`` when the scope has no event with ``event_id``.
        """
        scope = (memory_id, actor_id, session_id)
        with self._lock:
            events = self._events.get(scope, [])
            for idx, event in enumerate(events):
                if event.event_id == event_id:
                    del events[idx]
                    if not events:
                        self._events.pop(scope, None)
                    return
        raise EventStoreError(ErrorCode.NOT_FOUND, f"Event not found: {event_id}", operation="delete_event")

    def count_events(self, memory_id: str, actor_id: str, session_id: str) -> int:
        """Return the number of stored events for a scope."""
        with self._lock:
            return len(self._events.get((memory_id, actor_id, session_id), ()))


__all__ = ["InMemoryEventStore"]
