"""
Structured memory repository exception types.

`MemoryRepositoryError` carries a normalized :class:`ErrorCode` plus the
conversation the failure relates to. The subclasses map one-to-one onto the
repository's failure categories so callers can catch precisely what they can
handle. `EventStoreError` is the transport-side failure raised by event store
clients and wrapped by the repository into `MemoryAccessError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models_parts.conversation_identity import ConversationIdentity
from .error_code import ErrorCode


@dataclass(eq=False)
class MemoryRepositoryError(Exception):
    """Base structured error raised by the conversation memory repository.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        conversation_id: Conversation id the failure relates to, when known.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    conversation_id: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class InvalidArgumentError(MemoryRepositoryError, ValueError):
    """Raised for blank conversation ids and invalid repository configuration."""

    def __init__(self, message: str, *, conversation_id: Optional[str] = None, raw: Optional[BaseException] = None) -> None:
        super().__init__(ErrorCode.INVALID_ARGUMENT, message, conversation_id, raw)


class UnsupportedMessageTypeError(MemoryRepositoryError):
    """Raised when a message kind cannot be persisted and strict mode is on."""

    def __init__(self, message_type: str, *, conversation_id: Optional[str] = None) -> None:
        super().__init__(
            ErrorCode.UNSUPPORTED_MESSAGE_TYPE,
            f"Unsupported message type: {message_type}",
            conversation_id,
        )
        self.message_type = message_type


class UnsupportedRoleError(MemoryRepositoryError):
    """Raised when a stored payload role cannot be read back and strict mode is on."""

    def __init__(self, role: str, *, conversation_id: Optional[str] = None) -> None:
        super().__init__(ErrorCode.UNSUPPORTED_ROLE, f"Unsupported role: {role}", conversation_id)
        self.role = role


class NotSupportedError(MemoryRepositoryError, NotImplementedError):
    """Raised for operations the event store has no primitive for."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.NOT_SUPPORTED, message)


class MemoryAccessError(MemoryRepositoryError):
    """Raised when the event store fails during list, create or delete.

    The original failure is kept both in ``raw`` and as ``__cause__``;
    ``identity`` is the actor/session pair the conversation id resolved to.
    """

    def __init__(
        self,
        message: str,
        *,
        conversation_id: Optional[str] = None,
        identity: Optional[ConversationIdentity] = None,
        raw: Optional[BaseException] = None,
        code: ErrorCode = ErrorCode.ACCESS_FAILURE,
    ) -> None:
        super().__init__(code, message, conversation_id, raw)
        self.identity = identity


@dataclass(eq=False)
class EventStoreError(Exception):
    """Transport failure reported by an event store client.

    Attributes:
        code: Normalized classification of the failure.
        message: Human-readable error message.
        operation: Store operation that failed (``list_events`` etc.).
        retryable: Hint for callers that implement their own retry policy.
        raw: Optional original SDK exception.
    """

    code: ErrorCode
    message: str
    operation: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.operation or '-'} {self.code.value}: {self.message}"


__all__ = [
    "MemoryRepositoryError",
    "InvalidArgumentError",
    "UnsupportedMessageTypeError",
    "UnsupportedRoleError",
    "NotSupportedError",
    "MemoryAccessError",
    "EventStoreError",
]
