"""Tests for the message <-> payload role mapping."""

from __future__ import annotations

import pytest

from agentcore_memory.base.errors import UnsupportedMessageTypeError, UnsupportedRoleError
from agentcore_memory.base.log_support import LogContext
from agentcore_memory.base.models import ChatMessage, MessageRole, PayloadRole, StoredPayload
from agentcore_memory.base.role_mapper import RoleMapper


def test_supported_roles_map_both_ways():
    mapper = RoleMapper()
    assert mapper.to_payload(ChatMessage.user("hi")) == StoredPayload(PayloadRole.USER, "hi")
    assert mapper.to_payload(ChatMessage.assistant("yo")) == StoredPayload(PayloadRole.ASSISTANT, "yo")
    assert mapper.to_message(StoredPayload(PayloadRole.USER, "hi")) == ChatMessage.user("hi")
    assert mapper.to_message(StoredPayload(PayloadRole.ASSISTANT, "yo")) == ChatMessage.assistant("yo")


@pytest.mark.parametrize("role", [MessageRole.SYSTEM, MessageRole.TOOL])
def test_strict_write_rejects_other_kinds(role):
    ctx = LogContext(conversation_id="alice:s1")
    with pytest.raises(UnsupportedMessageTypeError) as info:
        RoleMapper().to_payload(ChatMessage(role, "x"), ctx)
    assert info.value.message_type == role.value
    assert info.value.conversation_id == "alice:s1"


@pytest.mark.parametrize("role", [PayloadRole.TOOL, PayloadRole.OTHER])
def test_strict_read_rejects_other_roles(role):
    with pytest.raises(UnsupportedRoleError) as info:
        RoleMapper().to_message(StoredPayload(role, "x"))
    assert str(info.value) == f"Unsupported role: {role.value}"


def test_lenient_mapping_preserves_order_of_survivors(memory_logs):
    mapper = RoleMapper(ignore_unknown_roles=True)
    payloads = [
        StoredPayload(PayloadRole.ASSISTANT, "1"),
        StoredPayload(PayloadRole.OTHER, "2"),
        StoredPayload(PayloadRole.USER, "3"),
        StoredPayload(PayloadRole.TOOL, "4"),
        StoredPayload(PayloadRole.ASSISTANT, "5"),
    ]
    assert [m.text for m in mapper.to_messages(payloads)] == ["1", "3", "5"]
    assert [e["role"] for e in memory_logs.events("memory.role.skipped")] == ["OTHER", "TOOL"]


def test_lenient_write_returns_none_for_skipped():
    assert RoleMapper(ignore_unknown_roles=True).to_payload(ChatMessage.system("x")) is None


@pytest.mark.parametrize("raw, expected", [("user", PayloadRole.USER), (" Assistant ", PayloadRole.ASSISTANT), ("BLOB", PayloadRole.OTHER)])
def test_payload_role_parses_wire_values(raw, expected):
    assert PayloadRole(raw) is expected
