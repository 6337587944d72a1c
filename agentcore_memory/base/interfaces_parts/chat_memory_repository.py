"""IChatMemoryRepository Protocol (single-class module).

Interface exposed upward to conversation-memory consumers such as a
fixed-window memory that keeps only the most recent N messages. The consumer
decides how many returned messages to retain and batches writes before
calling ``save_all``.
"""

from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from ..models_parts.chat_message import ChatMessage


@runtime_checkable
class IChatMemoryRepository(Protocol):
    """Conversation-scoped message history storage."""

    def find_conversation_ids(self) -> List[str]:  # pragma: no cover - interface
        """Return every known conversation id, when the backend supports it."""
        ...

    def find_by_conversation_id(self, conversation_id: str) -> List[ChatMessage]:  # pragma: no cover - interface
        """Return the ordered message history of a conversation.

        Parameters
        ----------
        conversation_id:
            Caller-facing conversation identifier.

        Returns
        -------
        List[ChatMessage]
            Messages in chronological order; empty for unknown conversations.
        """
        ...

    def save_all(self, conversation_id: str, messages: Sequence[ChatMessage]) -> None:  # pragma: no cover - interface
        """Append ``messages`` to the conversation as one write."""
        ...

    def delete_by_conversation_id(self, conversation_id: str) -> None:  # pragma: no cover - interface
        """Remove the stored history of a conversation."""
        ...
