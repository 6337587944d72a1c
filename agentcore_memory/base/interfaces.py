"""
Memory repository interfaces (Protocols) public surface.

Re-exports the single-class modules under
``agentcore_memory.base.interfaces_parts`` while keeping imports stable.
"""

from __future__ import annotations

from .interfaces_parts import IChatMemoryRepository, IEventStoreClient

__all__ = [
    "IChatMemoryRepository",
    "IEventStoreClient",
]
