"""Repository factory.

Purpose
-------
Single entry point wiring configuration, an event store client and the
repository together. The AWS adapter is only built (and boto3 only imported)
when the caller does not inject a client.

Scope
-----
No retries or caching; the factory either returns a ready repository or
raises :class:`~agentcore_memory.base.errors.InvalidArgumentError` for an
invalid configuration.
"""
from __future__ import annotations

from typing import Any, Optional

from .base.dto import RepositoryConfig, build_repository_config
from .base.interfaces import IEventStoreClient
from .config import load_repository_config
from .repository import EventChatMemoryRepository


def create_repository(
    client: Optional[IEventStoreClient] = None,
    *,
    config: Optional[RepositoryConfig] = None,
    region_name: Optional[str] = None,
    **overrides: Any,
) -> EventChatMemoryRepository:
    """Build an :class:`EventChatMemoryRepository`.

    Parameters
    ----------
    client:
        Event store to use. Defaults to a :class:`BedrockAgentCoreEventStore`
        over a lazily created boto3 client.
    config:
        Ready configuration. When omitted it is loaded from defaults, the
        optional config file, the environment and ``overrides``.
    region_name:
        Region for the default AWS client; ignored when ``client`` is given.
    **overrides:
        Option overrides (``memory_id``, ``page_size`` ...) applied last.
        With ``config`` they are merged over it and re-validated.
    """
    if config is None:
        config = load_repository_config(overrides)
    elif overrides:
        config = build_repository_config(config.model_dump(), **overrides)
    if client is None:
        from .aws import BedrockAgentCoreEventStore

        client = BedrockAgentCoreEventStore(region_name=region_name)
    return EventChatMemoryRepository(client, config)


__all__ = ["create_repository"]
