"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `agentcore_memory.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .memory_error import (
    EventStoreError,
    InvalidArgumentError,
    MemoryAccessError,
    MemoryRepositoryError,
    NotSupportedError,
    UnsupportedMessageTypeError,
    UnsupportedRoleError,
)
from .classification import classify_exception, is_retryable

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
