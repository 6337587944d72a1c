"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction (including the botocore ``ClientError``
response shape), status-to-code mapping and a message heuristic fallback so
every event store failure carries a stable code in logs.
"""
from __future__ import annotations

from typing import Dict, Optional

from .error_code import ErrorCode
from .memory_error import EventStoreError, MemoryRepositoryError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an SDK exception.

    Supported shapes (checked in order):
    - ``exc.status_code`` / ``exc.status``
    - ``exc.response["ResponseMetadata"]["HTTPStatusCode"]`` (botocore)
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if isinstance(resp, dict):
        sc = (resp.get("ResponseMetadata") or {}).get("HTTPStatusCode")
    else:
        sc = getattr(resp, "status_code", None)
    if isinstance(sc, int) and 100 <= sc < 600:
        return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

_RETRYABLE = frozenset(
    {
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.TRANSIENT,
        ErrorCode.UNAVAILABLE,
        ErrorCode.SERVER_ERROR,
    }
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without a status code."""
    PATTERN_GROUPS = (
        (ErrorCode.RATE_LIMIT, ("throttl",)),
        (ErrorCode.TIMEOUT, ("timeout",)),
        (ErrorCode.TIMEOUT, ("timed out",)),
        (ErrorCode.AUTH, ("accessdenied",)),
        (ErrorCode.AUTH, ("access denied",)),
        (ErrorCode.AUTH, ("unauthorized",)),
        (ErrorCode.NOT_FOUND, ("resourcenotfound",)),
        (ErrorCode.NOT_FOUND, ("not found",)),
        (ErrorCode.CONFLICT, ("conflict",)),
        (ErrorCode.UNAVAILABLE, ("unavailable",)),
        (ErrorCode.VALIDATION, ("validation",)),
        (ErrorCode.VALIDATION, ("invalid",)),
        (ErrorCode.TRANSIENT, ("connect",)),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. Passthrough for already-classified errors.
        2. Timeout exceptions.
        3. HTTP status mapping.
        4. Substring heuristics.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, (EventStoreError, MemoryRepositoryError)):
        return exc.code
    if isinstance(exc, TimeoutError):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def is_retryable(code: ErrorCode) -> bool:
    """Return True when ``code`` describes a failure worth retrying upstream."""
    return code in _RETRYABLE


__all__ = [
    "classify_exception",
    "is_retryable",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
