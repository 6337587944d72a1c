"""Validated, immutable configuration of the event-backed memory repository.

Purpose
-------
Capture every option the repository recognizes in one Pydantic model so that
invalid settings are rejected once, at construction time, instead of surfacing
mid-request.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_dump()``.

Failure modes
-------------
- ``pydantic.ValidationError`` on invalid input. The repository and the config
  loader translate it into :class:`~agentcore_memory.base.errors.InvalidArgumentError`
  through :func:`build_repository_config`.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...config.defaults import (
    DEFAULT_IGNORE_UNKNOWN_ROLES,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SEPARATOR,
    DEFAULT_SESSION,
)
from ..errors import InvalidArgumentError


class RepositoryConfig(BaseModel):
    """Options of :class:`~agentcore_memory.repository.EventChatMemoryRepository`.

    Attributes
    ----------
    memory_id:
        Memory resource identifier in the event store. Required, non-blank.
    total_events_limit:
        Optional cap on the number of events a read considers across all pages.
    default_session:
        Session label used when a conversation id has no separator.
    page_size:
        Events requested per list call (strictly positive).
    ignore_unknown_roles:
        Skip (and log) messages or payloads with unsupported roles instead of
        failing the operation.
    separator:
        Single character splitting a conversation id into actor and session.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    memory_id: str
    total_events_limit: Optional[int] = Field(default=None, ge=0)
    default_session: str = DEFAULT_SESSION
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    ignore_unknown_roles: bool = DEFAULT_IGNORE_UNKNOWN_ROLES
    separator: str = Field(default=DEFAULT_SEPARATOR, min_length=1, max_length=1)

    @field_validator("memory_id", mode="before")
    @classmethod
    def _require_memory_id(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("MemoryId cannot be null or empty")
        return value

    @field_validator("default_session")
    @classmethod
    def _require_default_session(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_session cannot be blank")
        return value

    @property
    def effective_page_size(self) -> int:
        """Page size actually requested on reads.

        ``min(page_size, total_events_limit)`` when a limit is set, otherwise
        ``page_size``.
        """
        if self.total_events_limit is None:
            return self.page_size
        return min(self.page_size, self.total_events_limit)


def _first_error_message(exc: ValidationError) -> str:
    """Return the message of the first validation error without Pydantic's prefix."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    err = errors[0]
    cause = (err.get("ctx") or {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


def build_repository_config(values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> RepositoryConfig:
    """Validate ``values``/``kwargs`` into a :class:`RepositoryConfig`.

    Keys with ``None`` values fall back to the model defaults, except
    ``memory_id`` whose absence is an error. A ``None`` keyword never
    replaces a value present in ``values``.

    Raises
    ------
    InvalidArgumentError
        When any option is missing or out of range.
    """
    merged = dict(values or {})
    merged.update({k: v for k, v in kwargs.items() if v is not None})
    memory_id = merged.pop("memory_id", None)
    data = {k: v for k, v in merged.items() if v is not None}
    try:
        return RepositoryConfig(memory_id=memory_id, **data)
    except ValidationError as exc:
        raise InvalidArgumentError(_first_error_message(exc), raw=exc) from exc


__all__ = ["RepositoryConfig", "build_repository_config"]
