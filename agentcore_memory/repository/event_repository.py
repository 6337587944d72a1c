"""Event-store-backed chat memory repository.

Presents an append-only, actor/session-scoped event store as a conversation
message history.

Behavior summary
----------------
- Reads follow ``next_token`` cursors page by page. When
  ``total_events_limit`` is configured, each page requests at most that many
  events and the accumulated events are truncated to exactly the limit, so a
  read never considers more events than the cap.
- A ``save_all`` call becomes exactly one event carrying one payload per
  surviving message. Role mapping completes before the store is contacted, so
  a rejected batch writes nothing.
- Deletion lists a single page (``page_size`` events, no payloads) and deletes
  each listed event. Conversations longer than one page keep their older
  events; callers needing a full sweep call it repeatedly.
- Listing every conversation id is not supported by the store.

Failure semantics
-----------------
Transport failures (``EventStoreError`` or ``OSError``) are wrapped in
:class:`MemoryAccessError` carrying the conversation id and the original
exception as ``__cause__``. Nothing is retried here and no partial read is
returned.

Thread safety
-------------
The repository keeps no per-call state; concurrent use is as safe as the
injected client.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from ..base.dto import RepositoryConfig, build_repository_config
from ..base.errors import EventStoreError, MemoryAccessError, NotSupportedError, classify_exception
from ..base.identity import IdentityCodec, validate_conversation_id
from ..base.interfaces import IEventStoreClient
from ..base.log_support import LogContext
from ..base.logging import get_logger, log_event
from ..base.models import ChatMessage, ConversationIdentity, StoredEvent
from ..base.role_mapper import RoleMapper

# Failures raised by event store clients that are reported as access failures.
_TRANSPORT_ERRORS = (EventStoreError, OSError)


class EventChatMemoryRepository:
    """Chat memory repository over an :class:`IEventStoreClient`.

    Parameters
    ----------
    client:
        Event store capability (boto3 adapter, in-memory store, test double).
    config:
        Validated :class:`RepositoryConfig`. When omitted, ``**options`` are
        validated into one (``memory_id`` is then required).
    **options:
        Individual config options, used only when ``config`` is ``None``.

    Raises
    ------
    InvalidArgumentError
        If the configuration is invalid (e.g. blank ``memory_id``).
    """

    def __init__(self, client: IEventStoreClient, config: Optional[RepositoryConfig] = None, **options) -> None:
        self.config = config if config is not None else build_repository_config(options)
        self.client = client
        self.codec = IdentityCodec(self.config.default_session, self.config.separator)
        self._logger = get_logger("agentcore_memory.repository")
        self.roles = RoleMapper(self.config.ignore_unknown_roles, logger=self._logger)

    @property
    def memory_id(self) -> str:
        return self.config.memory_id

    @property
    def effective_page_size(self) -> int:
        """Page size requested by reads (see :attr:`RepositoryConfig.effective_page_size`)."""
        return self.config.effective_page_size

    # ------------------------------------------------------------------ helpers

    def _resolve(self, conversation_id: Optional[str]) -> Tuple[ConversationIdentity, LogContext]:
        identity = self.codec.parse(conversation_id)
        ctx = LogContext(
            memory_id=self.memory_id,
            conversation_id=conversation_id,
            actor=identity.actor,
            session=identity.session,
        )
        return identity, ctx

    def _access_error(
        self,
        action: str,
        message: str,
        identity: ConversationIdentity,
        ctx: LogContext,
        exc: BaseException,
    ) -> MemoryAccessError:
        code = classify_exception(exc)
        log_event(
            self._logger,
            f"memory.{action}.error",
            ctx,
            level=logging.ERROR,
            error_code=code.value,
            error=str(exc),
        )
        return MemoryAccessError(
            message,
            conversation_id=ctx.conversation_id,
            identity=identity,
            raw=exc,
            code=code,
        )

    def _fetch_events(self, identity: ConversationIdentity, ctx: LogContext) -> List[StoredEvent]:
        """Follow cursors until exhausted or until the total events limit is reached."""
        limit = self.config.total_events_limit
        page_size = self.effective_page_size
        events: List[StoredEvent] = []
        if limit == 0:
            return events
        next_token: Optional[str] = None
        page_no = 0
        while True:
            page = self.client.list_events(
                memory_id=self.memory_id,
                actor_id=identity.actor,
                session_id=identity.session,
                include_payloads=True,
                max_results=page_size,
                next_token=next_token,
            )
            page_no += 1
            events.extend(page.events)
            next_token = page.next_token
            log_event(
                self._logger,
                "memory.page.fetched",
                ctx,
                level=logging.DEBUG,
                page=page_no,
                page_events=len(page.events),
                total_events=len(events),
                has_more=next_token is not None,
            )
            if limit is not None and len(events) >= limit:
                return events[:limit]
            if next_token is None:
                return events

    # --------------------------------------------------------------- operations

    def find_conversation_ids(self) -> List[str]:
        """Always raises: the event store cannot enumerate actors/sessions."""
        raise NotSupportedError("Listing conversation ids is not supported by the event store")

    def find_by_conversation_id(self, conversation_id: str) -> List[ChatMessage]:
        """Return the conversation's messages in event, then payload, order.

        Raises
        ------
        InvalidArgumentError
            Blank ``conversation_id``; raised before any store call.
        UnsupportedRoleError
            A stored payload has an unsupported role and strict mode is on.
        MemoryAccessError
            Any list call failed.
        """
        identity, ctx = self._resolve(conversation_id)
        log_event(self._logger, "memory.find.start", ctx, level=logging.DEBUG, page_size=self.effective_page_size)
        try:
            events = self._fetch_events(identity, ctx)
        except _TRANSPORT_ERRORS as exc:
            raise self._access_error(
                "retrieve",
                f"Failed to retrieve messages for conversation: {conversation_id}",
                identity,
                ctx,
                exc,
            ) from exc

        payloads = [payload for event in events for payload in event.payloads]
        messages = self.roles.to_messages(payloads, ctx)
        log_event(
            self._logger,
            "memory.find.done",
            ctx,
            level=logging.DEBUG,
            events=len(events),
            messages=len(messages),
        )
        return messages

    def save_all(self, conversation_id: str, messages: Optional[Sequence[ChatMessage]]) -> None:
        """Append ``messages`` to the conversation as a single event.

        An empty or ``None`` batch is a no-op. Messages skipped by the role
        mapper are left out of the event.

        Raises
        ------
        InvalidArgumentError
            Blank ``conversation_id``; raised before any store call.
        UnsupportedMessageTypeError
            A message kind cannot be stored and strict mode is on; nothing is
            written.
        MemoryAccessError
            The create call failed.
        """
        validate_conversation_id(conversation_id)
        if not messages:
            log_event(
                self._logger,
                "memory.save.skip",
                LogContext(memory_id=self.memory_id, conversation_id=conversation_id),
                level=logging.DEBUG,
                reason="no_messages",
            )
            return

        identity, ctx = self._resolve(conversation_id)
        payloads = self.roles.to_payloads(messages, ctx)
        log_event(
            self._logger,
            "memory.save.start",
            ctx,
            level=logging.DEBUG,
            messages=len(messages),
            payloads=len(payloads),
        )
        try:
            self.client.create_event(
                memory_id=self.memory_id,
                actor_id=identity.actor,
                session_id=identity.session,
                payloads=payloads,
                event_timestamp=datetime.now(timezone.utc),
            )
        except _TRANSPORT_ERRORS as exc:
            raise self._access_error(
                "save",
                f"Failed to save messages for conversation: {conversation_id}",
                identity,
                ctx,
                exc,
            ) from exc
        log_event(self._logger, "memory.save.done", ctx, level=logging.DEBUG, payloads=len(payloads))

    def save(self, conversation_id: str, message: ChatMessage) -> None:
        """Append a single message (one event with one payload)."""
        self.save_all(conversation_id, [message])

    def delete_by_conversation_id(self, conversation_id: str) -> None:
        """Delete the first page of the conversation's events.

        Issues one list call (``page_size`` events, without payloads) followed
        by one delete call per listed event.

        Raises
        ------
        InvalidArgumentError
            Blank ``conversation_id``; raised before any store call.
        MemoryAccessError
            The list call or any delete call failed.
        """
        identity, ctx = self._resolve(conversation_id)
        log_event(self._logger, "memory.delete.start", ctx, level=logging.DEBUG)
        try:
            page = self.client.list_events(
                memory_id=self.memory_id,
                actor_id=identity.actor,
                session_id=identity.session,
                include_payloads=False,
                max_results=self.config.page_size,
            )
            for event in page.events:
                self.client.delete_event(
                    memory_id=self.memory_id,
                    actor_id=identity.actor,
                    session_id=identity.session,
                    event_id=event.event_id,
                )
        except _TRANSPORT_ERRORS as exc:
            raise self._access_error(
                "delete",
                f"Failed to delete conversation: {conversation_id}",
                identity,
                ctx,
                exc,
            ) from exc
        log_event(
            self._logger,
            "memory.delete.done",
            ctx,
            level=logging.DEBUG,
            deleted=len(page.events),
            has_more=page.next_token is not None,
        )


__all__ = ["EventChatMemoryRepository"]
