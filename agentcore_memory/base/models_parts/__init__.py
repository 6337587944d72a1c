"""Domain models split into single-purpose modules."""

from .chat_message import ChatMessage, MessageRole
from .conversation_identity import ConversationIdentity
from .stored_event import EventPage, PayloadRole, StoredEvent, StoredPayload

__all__ = [
    "ChatMessage",
    "MessageRole",
    "ConversationIdentity",
    "EventPage",
    "PayloadRole",
    "StoredEvent",
    "StoredPayload",
]
