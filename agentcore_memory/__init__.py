"""agentcore_memory package

Conversation message history on top of an append-only, actor/session-scoped
event store (AWS Bedrock AgentCore Memory).

Public API (re-exported):
    - Version: ``__version__``
    - Repository: :class:`EventChatMemoryRepository`, :func:`create_repository`
    - Messages: :class:`ChatMessage`, :class:`MessageRole`
    - Configuration: :class:`RepositoryConfig`, :func:`load_repository_config`
    - Event stores: :class:`InMemoryEventStore`; the AWS adapter lives in
      ``agentcore_memory.aws`` so boto3 stays optional
    - Exceptions: :class:`MemoryRepositoryError` and its subclasses,
      :class:`EventStoreError`, :class:`ErrorCode`
"""

from .base.errors import (
    ErrorCode,
    EventStoreError,
    InvalidArgumentError,
    MemoryAccessError,
    MemoryRepositoryError,
    NotSupportedError,
    UnsupportedMessageTypeError,
    UnsupportedRoleError,
)
from .base.models import ChatMessage, ConversationIdentity, MessageRole
from .base.dto import RepositoryConfig
from .base.identity import IdentityCodec
from .base.interfaces import IChatMemoryRepository, IEventStoreClient
from .config import load_repository_config
from .memory import InMemoryEventStore
from .repository import EventChatMemoryRepository
from .factory import create_repository

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "EventChatMemoryRepository",
    "create_repository",
    "ChatMessage",
    "ConversationIdentity",
    "MessageRole",
    "IdentityCodec",
    "RepositoryConfig",
    "load_repository_config",
    "IChatMemoryRepository",
    "IEventStoreClient",
    "InMemoryEventStore",
    "ErrorCode",
    "EventStoreError",
    "InvalidArgumentError",
    "MemoryAccessError",
    "MemoryRepositoryError",
    "NotSupportedError",
    "UnsupportedMessageTypeError",
    "UnsupportedRoleError",
]
