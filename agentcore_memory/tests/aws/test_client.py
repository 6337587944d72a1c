"""Tests for the boto3-backed event store adapter using a mocked client."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError, ConnectTimeoutError, EndpointConnectionError

from agentcore_memory.aws import BedrockAgentCoreEventStore
from agentcore_memory.base.errors import ErrorCode, EventStoreError, MemoryAccessError
from agentcore_memory.base.interfaces import IEventStoreClient
from agentcore_memory.base.models import ChatMessage, PayloadRole, StoredPayload
from agentcore_memory.repository import EventChatMemoryRepository

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)
SCOPE = {"memory_id": "mem", "actor_id": "alice", "session_id": "s1"}


def _wire_event(event_id, *payload):
    return {
        "memoryId": "mem",
        "actorId": "alice",
        "sessionId": "s1",
        "eventId": event_id,
        "eventTimestamp": NOW,
        "payload": list(payload),
    }


def _conv(role, text):
    return {"conversational": {"content": {"text": text}, "role": role}}


def _client_error(code, status, operation):
    return ClientError(
        {"Error": {"Code": code, "Message": code}, "ResponseMetadata": {"HTTPStatusCode": status}},
        operation,
    )


def test_adapter_satisfies_protocol():
    assert isinstance(BedrockAgentCoreEventStore(Mock()), IEventStoreClient)


def test_list_events_translates_request_and_response():
    client = Mock()
    client.list_events.return_value = {
        "events": [_wire_event("e1", _conv("USER", "hi"), _conv("ASSISTANT", "hello"))],
        "nextToken": "tok",
    }
    page = BedrockAgentCoreEventStore(client).list_events(**SCOPE, include_payloads=True, max_results=5)
    client.list_events.assert_called_once_with(
        memoryId="mem", actorId="alice", sessionId="s1", includePayloads=True, maxResults=5
    )
    assert page.next_token == "tok"
    (event,) = page.events
    assert event.event_id == "e1"
    assert event.timestamp == NOW
    assert event.payloads == (StoredPayload(PayloadRole.USER, "hi"), StoredPayload(PayloadRole.ASSISTANT, "hello"))


def test_list_events_forwards_token_and_handles_blob_payloads():
    client = Mock()
    client.list_events.return_value = {"events": [_wire_event("e1", {"blob": b"\x00"})]}
    page = BedrockAgentCoreEventStore(client).list_events(
        **SCOPE, include_payloads=False, max_results=1, next_token="tok"
    )
    assert client.list_events.call_args.kwargs["nextToken"] == "tok"
    assert page.next_token is None
    assert page.events[0].payloads == (StoredPayload(PayloadRole.OTHER, ""),)


def test_create_event_sends_conversational_payloads():
    client = Mock()
    client.create_event.return_value = {"event": _wire_event("e9", _conv("USER", "hi"))}
    created = BedrockAgentCoreEventStore(client).create_event(
        **SCOPE, payloads=[StoredPayload(PayloadRole.USER, "hi")], event_timestamp=NOW
    )
    client.create_event.assert_called_once_with(
        memoryId="mem",
        actorId="alice",
        sessionId="s1",
        eventTimestamp=NOW,
        payload=[_conv("USER", "hi")],
    )
    assert created.event_id == "e9"


def test_delete_event_passes_identifiers():
    client = Mock()
    BedrockAgentCoreEventStore(client).delete_event(**SCOPE, event_id="e1")
    client.delete_event.assert_called_once_with(memoryId="mem", actorId="alice", sessionId="s1", eventId="e1")


@pytest.mark.parametrize(
    "error, code, retryable",
    [
        (_client_error("ThrottledException", 429, "ListEvents"), ErrorCode.RATE_LIMIT, True),
        (_client_error("AccessDeniedException", 403, "ListEvents"), ErrorCode.AUTH, False),
        (_client_error("ResourceNotFoundException", 404, "ListEvents"), ErrorCode.NOT_FOUND, False),
        (EndpointConnectionError(endpoint_url="https://agentcore.example.com"), ErrorCode.TRANSIENT, True),
        (ConnectTimeoutError(endpoint_url="https://agentcore.example.com"), ErrorCode.TIMEOUT, True),
    ],
)
def test_sdk_errors_become_event_store_errors(error, code, retryable):
    client = Mock()
    client.list_events.side_effect = error
    with pytest.raises(EventStoreError) as info:
        BedrockAgentCoreEventStore(client).list_events(**SCOPE, include_payloads=True, max_results=1)
    assert info.value.code is code
    assert info.value.operation == "list_events"
    assert info.value.raw is error
    assert info.value.__cause__ is error
    assert info.value.retryable is retryable


def test_repository_wraps_adapter_failures():
    client = Mock()
    client.create_event.side_effect = _client_error("ValidationException", 400, "CreateEvent")
    repo = EventChatMemoryRepository(BedrockAgentCoreEventStore(client), memory_id="mem")
    with pytest.raises(MemoryAccessError, match="Failed to save messages for conversation: alice:s1") as info:
        repo.save_all("alice:s1", [ChatMessage.user("hi")])
    assert info.value.code is ErrorCode.VALIDATION


def test_client_built_lazily_from_boto3(monkeypatch):
    import boto3

    built = Mock()
    built.list_events.return_value = {"events": []}
    factory = Mock(return_value=built)
    monkeypatch.setattr(boto3, "client", factory)
    store = BedrockAgentCoreEventStore(region_name="us-west-2")
    factory.assert_not_called()
    store.list_events(**SCOPE, include_payloads=True, max_results=1)
    store.list_events(**SCOPE, include_payloads=True, max_results=1)
    factory.assert_called_once_with("bedrock-agentcore", region_name="us-west-2")
