"""
Conversation memory domain models (DTOs) public surface.

This module re-exports the implementations under
``agentcore_memory.base.models_parts`` so callers have one stable import path.
"""

from .models_parts.chat_message import ChatMessage, MessageRole
from .models_parts.conversation_identity import ConversationIdentity
from .models_parts.stored_event import EventPage, PayloadRole, StoredEvent, StoredPayload

__all__ = [
    "ChatMessage",
    "MessageRole",
    "ConversationIdentity",
    "EventPage",
    "PayloadRole",
    "StoredEvent",
    "StoredPayload",
]
