"""
Normalized memory repository error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the repository, the event store
adapters and structured logging. Values are lowercase snake_case and are a
stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    INVALID_ARGUMENT = "invalid_argument"
    UNSUPPORTED_MESSAGE_TYPE = "unsupported_message_type"
    UNSUPPORTED_ROLE = "unsupported_role"
    NOT_SUPPORTED = "not_supported"
    ACCESS_FAILURE = "access_failure"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
