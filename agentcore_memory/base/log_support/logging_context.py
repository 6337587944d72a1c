"""Structured logging context object for memory repository events.

:class:`LogContext` carries the fields shared by every event a repository
operation emits (memory id, conversation id, actor and session). ``to_dict``
merges the ``extra`` mapping and prunes ``None`` values for clean output.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for memory logging events."""

    memory_id: Optional[str] = None
    conversation_id: Optional[str] = None
    actor: Optional[str] = None
    session: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
