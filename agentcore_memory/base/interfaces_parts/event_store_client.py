"""IEventStoreClient Protocol (single-class module).

Capability the repository depends on instead of a concrete transport. Any
object exposing these three keyword-only operations can back a repository:
the boto3 adapter in ``agentcore_memory.aws``, the in-memory store, or a test
double.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence, runtime_checkable

from ..models_parts.stored_event import EventPage, StoredEvent, StoredPayload


@runtime_checkable
class IEventStoreClient(Protocol):
    """Append-only, actor/session-scoped event store.

    Failure semantics: implementations raise
    :class:`~agentcore_memory.base.errors.EventStoreError` (or an ``OSError``
    such as ``TimeoutError``) when the store cannot serve a request. Timeouts
    and retries, if any, are the implementation's concern.
    """

    def list_events(
        self,
        *,
        memory_id: str,
        actor_id: str,
        session_id: str,
        include_payloads: bool,
        max_results: int,
        next_token: Optional[str] = None,
    ) -> EventPage:  # pragma: no cover - interface
        """Return one page of events for an actor/session.

        Parameters
        ----------
        memory_id:
            Memory resource to read from.
        actor_id, session_id:
            Conversation scope.
        include_payloads:
            When ``False`` the returned events carry no payloads.
        max_results:
            Upper bound on the number of events in the page.
        next_token:
            Cursor returned by the previous page; ``None`` for the first page.

        Returns
        -------
        EventPage
            Events in store order plus the cursor for the next page, if any.
        """
        ...

    def create_event(
        self,
        *,
        memory_id: str,
        actor_id: str,
        session_id: str,
        payloads: Sequence[StoredPayload],
        event_timestamp: datetime,
    ) -> StoredEvent:  # pragma: no cover - interface
        """Append a single event carrying ``payloads`` and return it."""
        ...

    def delete_event(
        self,
        *,
        memory_id: str,
        actor_id: str,
        session_id: str,
        event_id: str,
    ) -> None:  # pragma: no cover - interface
        """Delete one event by id."""
        ...
