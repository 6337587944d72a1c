"""Pytest configuration for the memory repository test suite.

Provides a scripted, call-recording event store so repository tests can
assert on the exact remote interaction, plus a log capture fixture bound to
the shared ``agentcore_memory`` logger (which does not propagate to root, so
``caplog`` alone does not see its records).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

import pytest

from agentcore_memory.base.logging import BASE_LOGGER_NAME, LOG_LEVEL_ENV, get_logger
from agentcore_memory.base.models import EventPage, PayloadRole, StoredEvent, StoredPayload

MEMORY_ID = "mem-test"


def make_event(event_id: str, *payloads: StoredPayload, actor: str = "alice", session: str = "s1") -> StoredEvent:
    return StoredEvent(MEMORY_ID, actor, session, event_id, payloads=tuple(payloads))


class RecordingEventStore:
    """Event store double returning scripted pages and recording every call.

    ``pages`` are returned in order by successive ``list_events`` calls; an
    exhausted script yields empty pages. ``fail_on`` maps an operation name to
    the exception raised when it is called.
    """

    def __init__(self, pages: Sequence[EventPage] = (), fail_on: Optional[Dict[str, BaseException]] = None) -> None:
        self.pages = list(pages)
        self.fail_on = dict(fail_on or {})
        self.calls: List[tuple] = []

    def _record(self, op: str, params: Dict[str, Any]) -> None:
        self.calls.append((op, params))
        exc = self.fail_on.get(op)
        if exc is not None:
            raise exc

    def ops(self, op: Optional[str] = None) -> List[Dict[str, Any]]:
        return [params for name, params in self.calls if op is None or name == op]

    def list_events(self, **params: Any) -> EventPage:
        self._record("list_events", params)
        return self.pages.pop(0) if self.pages else EventPage()

    def create_event(self, **params: Any) -> StoredEvent:
        self._record("create_event", params)
        return StoredEvent(
            params["memory_id"],
            params["actor_id"],
            params["session_id"],
            f"evt-{len(self.calls)}",
            params["event_timestamp"],
            tuple(params["payloads"]),
        )

    def delete_event(self, **params: Any) -> None:
        self._record("delete_event", params)


@pytest.fixture()
def recording_store():
    """Factory fixture: ``recording_store(pages, fail_on=...)``."""

    def _make(pages: Sequence[EventPage] = (), **kwargs: Any) -> RecordingEventStore:
        return RecordingEventStore(pages, **kwargs)

    return _make


@pytest.fixture()
def event_factory():
    """Build ``StoredEvent`` objects with user/assistant payload shorthand."""

    def _make(event_id: str, *texts: tuple, **kwargs: Any) -> StoredEvent:
        payloads = [StoredPayload(PayloadRole(role), text) for role, text in texts]
        return make_event(event_id, *payloads, **kwargs)

    return _make


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self, name: Optional[str] = None) -> List[Dict[str, Any]]:
        out = []
        for r in self.records:
            try:
                payload = json.loads(r.getMessage())
            except ValueError:
                continue
            if isinstance(payload, dict) and (name is None or payload.get("event") == name):
                payload["_level"] = r.levelname
                out.append(payload)
        return out


@pytest.fixture()
def memory_logs(monkeypatch: pytest.MonkeyPatch) -> Iterator[_ListHandler]:
    """Capture structured events emitted through ``agentcore_memory`` loggers.

    The level is raised through the environment because ``get_logger``
    re-applies it whenever a component asks for a logger.
    """

    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    base = get_logger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    base.addHandler(handler)
    try:
        yield handler
    finally:
        base.removeHandler(handler)
