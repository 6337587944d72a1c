"""
Memory Base Package

Exports the storage-agnostic contracts, DTOs, errors and the two leaf
components (identity codec and role mapper) the event repository is built
from:
- Interfaces: event store capability and the upward repository protocol
- Models (DTOs): chat messages, stored events, conversation identities
- Errors: normalized taxonomy with structured exception types
"""

from .errors import (
    ErrorCode,
    EventStoreError,
    InvalidArgumentError,
    MemoryAccessError,
    MemoryRepositoryError,
    NotSupportedError,
    UnsupportedMessageTypeError,
    UnsupportedRoleError,
    classify_exception,
)
from .models import (
    ChatMessage,
    ConversationIdentity,
    EventPage,
    MessageRole,
    PayloadRole,
    StoredEvent,
    StoredPayload,
)
from .dto import RepositoryConfig, build_repository_config
from .interfaces import IChatMemoryRepository, IEventStoreClient
from .identity import IdentityCodec, validate_conversation_id
from .role_mapper import RoleMapper

__all__ = [
    "ErrorCode",
    "EventStoreError",
    "InvalidArgumentError",
    "MemoryAccessError",
    "MemoryRepositoryError",
    "NotSupportedError",
    "UnsupportedMessageTypeError",
    "UnsupportedRoleError",
    "classify_exception",
    "ChatMessage",
    "ConversationIdentity",
    "EventPage",
    "MessageRole",
    "PayloadRole",
    "StoredEvent",
    "StoredPayload",
    "RepositoryConfig",
    "build_repository_config",
    "IChatMemoryRepository",
    "IEventStoreClient",
    "IdentityCodec",
    "validate_conversation_id",
    "RoleMapper",
]
