"""Local event store implementations."""

from .in_memory_event_store import InMemoryEventStore

__all__ = ["InMemoryEventStore"]
