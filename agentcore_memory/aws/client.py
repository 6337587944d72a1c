"""
Bedrock AgentCore event store adapter.

Wraps a boto3 ``bedrock-agentcore`` client and exposes it as an
:class:`IEventStoreClient`. Only the ``conversational`` payload shape is
translated; other payload kinds (blobs) surface as payloads with role
``OTHER`` and empty text so the role mapper can apply its policy.

boto3 is imported on first use when no client is injected, so the package can
be used with other stores without the AWS SDK installed.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..base.errors import ErrorCode, EventStoreError, classify_exception, is_retryable
from ..base.logging import get_logger
from ..base.models import EventPage, PayloadRole, StoredEvent, StoredPayload
from ..config.defaults import AGENTCORE_SERVICE_NAME

logger = get_logger("agentcore_memory.aws")


def _sdk_errors() -> tuple:
    from botocore.exceptions import BotoCoreError, ClientError

    return (ClientError, BotoCoreError)


def _to_wire_payload(payload: StoredPayload) -> Dict[str, Any]:
    return {
        "conversational": {
            "content": {"text": payload.text},
            "role": payload.role.value,
        }
    }


def _from_wire_payloads(items: Iterable[Dict[str, Any]]) -> List[StoredPayload]:
    out: List[StoredPayload] = []
    for item in items or ():
        conv = item.get("conversational")
        if conv is None:
            out.append(StoredPayload(role=PayloadRole.OTHER, text=""))
            continue
        content = conv.get("content") or {}
        out.append(StoredPayload(role=PayloadRole(conv.get("role", "OTHER")), text=content.get("text", "")))
    return out


def _from_wire_event(raw: Dict[str, Any], memory_id: str, actor_id: str, session_id: str) -> StoredEvent:
    return StoredEvent(
        memory_id=raw.get("memoryId", memory_id),
        actor_id=raw.get("actorId", actor_id),
        session_id=raw.get("sessionId", session_id),
        event_id=raw["eventId"],
        timestamp=raw.get("eventTimestamp"),
        payloads=tuple(_from_wire_payloads(raw.get("payload", ()))),
    )


class BedrockAgentCoreEventStore:
    """:class:`IEventStoreClient` backed by the AgentCore data plane API.

    Parameters
    ----------
    client:
        Pre-built boto3 ``bedrock-agentcore`` client. Built lazily from the
        default credential chain when omitted.
    region_name:
        Region for the lazily built client; ignored when ``client`` is given.
    """

    def __init__(self, client: Any = None, *, region_name: Optional[str] = None) -> None:
        self._client = client
        self._region_name = region_name

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        try:
            import boto3
        except ImportError as exc:
            raise EventStoreError(
                ErrorCode.UNAVAILABLE,
                "boto3 is not installed. Install with: pip install 'agentcore-memory[aws]'",
                operation="connect",
                raw=exc,
            ) from exc
        kwargs: Dict[str, Any] = {}
        if self._region_name:
            kwargs["region_name"] = self._region_name
        self._client = boto3.client(AGENTCORE_SERVICE_NAME, **kwargs)
        logger.info("Created %s client (region=%s)", AGENTCORE_SERVICE_NAME, self._region_name or "default")
        return self._client

    def _call(self, operation: str, **params: Any) -> Dict[str, Any]:
        client = self._get_client()
        try:
            return getattr(client, operation)(**params)
        except _sdk_errors() as exc:
            code = classify_exception(exc)
            raise EventStoreError(
                code,
                str(exc),
                operation=operation,
                retryable=is_retryable(code),
                raw=exc,
            ) from exc

    def list_events(
        self,
        *,
        memory_id: str,
        actor_id: str,
        session_id: str,
        include_payloads: bool,
        max_results: int,
        next_token: Optional[str] = None,
    ) -> EventPage:
        params: Dict[str, Any] = {
            "memoryId": memory_id,
            "actorId": actor_id,
            "sessionId": session_id,
            "includePayloads": include_payloads,
            "maxResults": max_results,
        }
        if next_token is not None:
            params["nextToken"] = next_token
        response = self._call("list_events", **params)
        events = tuple(
            _from_wire_event(raw, memory_id, actor_id, session_id) for raw in response.get("events", ())
        )
        return EventPage(events=events, next_token=response.get("nextToken") or None)

    def create_event(
        self,
        *,
        memory_id: str,
        actor_id: str,
        session_id: str,
        payloads: Sequence[StoredPayload],
        event_timestamp: datetime,
    ) -> StoredEvent:
        response = self._call(
            "create_event",
            memoryId=memory_id,
            actorId=actor_id,
            sessionId=session_id,
            eventTimestamp=event_timestamp,
            payload=[_to_wire_payload(p) for p in payloads],
        )
        return _from_wire_event(response["event"], memory_id, actor_id, session_id)

    def delete_event(self, *, memory_id: str, actor_id: str, session_id: str, event_id: str) -> None:
        self._call(
            "delete_event",
            memoryId=memory_id,
            actorId=actor_id,
            sessionId=session_id,
            eventId=event_id,
        )


__all__ = ["BedrockAgentCoreEventStore"]
