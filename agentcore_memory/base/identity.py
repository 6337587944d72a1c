"""Conversation id <-> (actor, session) codec.

A conversation id is ``"<actor><sep><session>"`` or just ``"<actor>"``, in
which case the configured default session applies. The split happens on the
first separator only, so sessions may themselves contain the separator.
Exactly one separator is active per codec; ids using another character are
treated as a bare actor.
"""
from __future__ import annotations

from typing import Optional

from ..config.defaults import DEFAULT_SEPARATOR, DEFAULT_SESSION
from .errors import InvalidArgumentError
from .models import ConversationIdentity

_BLANK_CONVERSATION_ID = "ConversationId cannot be null or empty"


def validate_conversation_id(conversation_id: Optional[str]) -> str:
    """Return ``conversation_id`` unchanged or raise for ``None``/blank values."""
    if conversation_id is None or not str(conversation_id).strip():
        raise InvalidArgumentError(_BLANK_CONVERSATION_ID, conversation_id=conversation_id)
    return conversation_id


class IdentityCodec:
    """Parse and format conversation ids for one separator convention."""

    def __init__(self, default_session: str = DEFAULT_SESSION, separator: str = DEFAULT_SEPARATOR) -> None:
        if len(separator) != 1:
            raise InvalidArgumentError("separator must be a single character")
        self.default_session = default_session
        self.separator = separator

    def parse(self, conversation_id: Optional[str]) -> ConversationIdentity:
        """Resolve a conversation id into its actor/session pair.

        Raises
        ------
        InvalidArgumentError
            If ``conversation_id`` is ``None`` or blank, or if it starts with
            the separator (which would leave the actor empty).
        """
        validate_conversation_id(conversation_id)
        actor, sep, session = conversation_id.partition(self.separator)
        if not sep:
            return ConversationIdentity(actor=conversation_id, session=self.default_session)
        if not actor:
            raise InvalidArgumentError(
                f"ConversationId has an empty actor: {conversation_id!r}",
                conversation_id=conversation_id,
            )
        return ConversationIdentity(actor=actor, session=session or self.default_session)

    def format(self, actor: str, session: Optional[str] = None) -> str:
        """Build the conversation id for ``actor``/``session``.

        ``session`` defaults to the codec's default session. The actor must
        not contain the separator, otherwise the id would not parse back.
        """
        if not actor or self.separator in actor:
            raise InvalidArgumentError(f"Invalid actor for conversation id: {actor!r}")
        return f"{actor}{self.separator}{session or self.default_session}"


__all__ = ["IdentityCodec", "validate_conversation_id"]
