"""
Chat message DTO exchanged with conversation memory consumers.

Defines the `ChatMessage` dataclass and the `MessageRole` enumeration. Only
``user`` and ``assistant`` messages can be persisted to the event store; the
remaining roles exist so callers can hand over mixed histories and let the
role mapper decide whether to skip or reject them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MessageRole(str, Enum):
    """Author role of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    TOOL = "tool"


@dataclass
class ChatMessage:
    """A single role-tagged text message.

    Attributes:
        role: The :class:`MessageRole` of the author.
        text: Plain text content of the message.
    """

    role: MessageRole
    text: str

    @classmethod
    def user(cls, text: str) -> "ChatMessage":
        """Build a ``user`` message."""
        return cls(MessageRole.USER, text)

    @classmethod
    def assistant(cls, text: str) -> "ChatMessage":
        """Build an ``assistant`` message."""
        return cls(MessageRole.ASSISTANT, text)

    @classmethod
    def system(cls, text: str) -> "ChatMessage":
        """Build a ``system`` message."""
        return cls(MessageRole.SYSTEM, text)


__all__ = [
    "ChatMessage",
    "MessageRole",
]
