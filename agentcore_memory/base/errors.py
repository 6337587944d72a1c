"""Unified memory repository error taxonomy public surface.

This module re-exports the implementations under
``agentcore_memory.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.memory_error import (
    EventStoreError,
    InvalidArgumentError,
    MemoryAccessError,
    MemoryRepositoryError,
    NotSupportedError,
    UnsupportedMessageTypeError,
    UnsupportedRoleError,
)
from .errors_parts.classification import classify_exception, is_retryable

__all__ = [
    "ErrorCode",
    "MemoryRepositoryError",
    "InvalidArgumentError",
    "UnsupportedMessageTypeError",
    "UnsupportedRoleError",
    "NotSupportedError",
    "MemoryAccessError",
    "EventStoreError",
    "classify_exception",
    "is_retryable",
]
