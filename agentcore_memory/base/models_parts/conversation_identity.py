"""
Conversation identity value object.

A conversation is scoped in the event store by an ``(actor, session)`` pair.
The pair is derived from a caller-facing conversation id string by
:class:`agentcore_memory.base.identity.IdentityCodec` and is never stored on
its own.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversationIdentity:
    """Actor/session pair scoping one message history.

    Attributes:
        actor: Actor identifier (never empty).
        session: Session identifier; falls back to the configured default
            session when the conversation id carries none.
    """

    actor: str
    session: str


__all__ = ["ConversationIdentity"]
