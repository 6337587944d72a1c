"""Translation between chat messages and stored conversational payloads.

Only ``user`` and ``assistant`` messages have a stored counterpart. Everything
else is governed by a single strictness flag shared by both directions:

- strict (default): the enclosing operation fails with
  :class:`UnsupportedMessageTypeError` on write or
  :class:`UnsupportedRoleError` on read;
- lenient: the element is skipped, a ``memory.role.skipped`` warning is
  logged, and the remaining elements keep their relative order.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .errors import UnsupportedMessageTypeError, UnsupportedRoleError
from .log_support import LogContext
from .logging import get_logger, log_event
from .models import ChatMessage, MessageRole, PayloadRole, StoredPayload

_TO_PAYLOAD_ROLE = {
    MessageRole.USER: PayloadRole.USER,
    MessageRole.ASSISTANT: PayloadRole.ASSISTANT,
}

_TO_MESSAGE_ROLE = {
    PayloadRole.USER: MessageRole.USER,
    PayloadRole.ASSISTANT: MessageRole.ASSISTANT,
}


class RoleMapper:
    """Apply the role compliance rule in both directions."""

    def __init__(self, ignore_unknown_roles: bool = False, *, logger: Optional[logging.Logger] = None) -> None:
        self.ignore_unknown_roles = ignore_unknown_roles
        self._logger = logger or get_logger("agentcore_memory.roles")

    def to_payload(self, message: ChatMessage, ctx: Optional[LogContext] = None) -> Optional[StoredPayload]:
        """Map a message to its stored payload, or ``None`` when skipped."""
        role = _TO_PAYLOAD_ROLE.get(message.role)
        if role is not None:
            return StoredPayload(role=role, text=message.text)
        kind = getattr(message.role, "value", str(message.role))
        if not self.ignore_unknown_roles:
            raise UnsupportedMessageTypeError(kind, conversation_id=ctx.conversation_id if ctx else None)
        log_event(self._logger, "memory.role.skipped", ctx, level=logging.WARNING, direction="write", role=kind)
        return None

    def to_message(self, payload: StoredPayload, ctx: Optional[LogContext] = None) -> Optional[ChatMessage]:
        """Map a stored payload back to a message, or ``None`` when skipped."""
        role = _TO_MESSAGE_ROLE.get(payload.role)
        if role is not None:
            return ChatMessage(role=role, text=payload.text)
        kind = getattr(payload.role, "value", str(payload.role))
        if not self.ignore_unknown_roles:
            raise UnsupportedRoleError(kind, conversation_id=ctx.conversation_id if ctx else None)
        log_event(self._logger, "memory.role.skipped", ctx, level=logging.WARNING, direction="read", role=kind)
        return None

    def to_payloads(self, messages: Iterable[ChatMessage], ctx: Optional[LogContext] = None) -> List[StoredPayload]:
        """Map every message, dropping skipped ones and keeping order."""
        return [p for p in (self.to_payload(m, ctx) for m in messages) if p is not None]

    def to_messages(self, payloads: Iterable[StoredPayload], ctx: Optional[LogContext] = None) -> List[ChatMessage]:
        """Map every payload, dropping skipped ones and keeping order."""
        return [m for m in (self.to_message(p, ctx) for p in payloads) if m is not None]


__all__ = ["RoleMapper"]
