"""
Event store records as seen by the repository.

These DTOs mirror the conversational subset of the remote event store:
an event carries one or more role-tagged payloads and is owned by the store.
The repository only creates, lists and deletes whole events; it never edits
them after creation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class PayloadRole(str, Enum):
    """Role value stored on a conversational payload.

    Unrecognized wire values resolve to :attr:`OTHER` so the role mapper can
    apply its strictness policy to them.
    """

    USER = "USER"
    ASSISTANT = "ASSISTANT"
    TOOL = "TOOL"
    OTHER = "OTHER"

    @classmethod
    def _missing_(cls, value: object) -> "PayloadRole":
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return cls.OTHER


@dataclass(frozen=True)
class StoredPayload:
    """One role-tagged text unit inside an event."""

    role: PayloadRole
    text: str


@dataclass(frozen=True)
class StoredEvent:
    """A single write unit in the event store.

    Attributes:
        memory_id: Memory resource the event belongs to.
        actor_id: Actor scope of the event.
        session_id: Session scope of the event.
        event_id: Store-assigned identifier used for deletion.
        timestamp: Event timestamp supplied at creation.
        payloads: Ordered payloads; empty when listed without payloads.
    """

    memory_id: str
    actor_id: str
    session_id: str
    event_id: str
    timestamp: Optional[datetime] = None
    payloads: Tuple[StoredPayload, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EventPage:
    """One page of a ``list_events`` call.

    ``next_token`` is the opaque cursor for the following page, or ``None``
    when the listing is exhausted.
    """

    events: Tuple[StoredEvent, ...] = field(default_factory=tuple)
    next_token: Optional[str] = None


__all__ = [
    "PayloadRole",
    "StoredPayload",
    "StoredEvent",
    "EventPage",
]
