"""Chat memory repositories backed by an event store."""

from .event_repository import EventChatMemoryRepository

__all__ = ["EventChatMemoryRepository"]
