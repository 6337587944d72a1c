"""Interfaces (Protocols) split into single-class modules.

``agentcore_memory.base.interfaces`` re-exports these for a stable API.
"""

from .chat_memory_repository import IChatMemoryRepository
from .event_store_client import IEventStoreClient

__all__ = [
    "IChatMemoryRepository",
    "IEventStoreClient",
]
