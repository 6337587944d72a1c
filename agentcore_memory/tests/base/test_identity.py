"""Tests for conversation id parsing and formatting."""

from __future__ import annotations

import pytest

from agentcore_memory.base.errors import InvalidArgumentError
from agentcore_memory.base.identity import IdentityCodec, validate_conversation_id
from agentcore_memory.base.models import ConversationIdentity


@pytest.mark.parametrize(
    "conversation_id, expected",
    [
        ("alice:s1", ConversationIdentity("alice", "s1")),
        ("alice:s1:s2", ConversationIdentity("alice", "s1:s2")),
        ("alice", ConversationIdentity("alice", "default-session")),
        ("alice:", ConversationIdentity("alice", "default-session")),
        ("alice/s1", ConversationIdentity("alice/s1", "default-session")),
    ],
)
def test_parse_splits_on_first_separator(conversation_id, expected):
    assert IdentityCodec().parse(conversation_id) == expected


def test_parse_with_custom_separator_and_default_session():
    codec = IdentityCodec(default_session="main", separator="/")
    assert codec.parse("alice/s1:x") == ConversationIdentity("alice", "s1:x")
    assert codec.parse("alice:s1") == ConversationIdentity("alice:s1", "main")


@pytest.mark.parametrize("conversation_id", [None, "", "  "])
def test_parse_rejects_blank_ids(conversation_id):
    with pytest.raises(InvalidArgumentError, match="ConversationId cannot be null or empty"):
        IdentityCodec().parse(conversation_id)


def test_parse_rejects_empty_actor():
    with pytest.raises(InvalidArgumentError) as info:
        IdentityCodec().parse(":s1")
    assert info.value.conversation_id == ":s1"


def test_format_round_trips_with_parse():
    codec = IdentityCodec()
    assert codec.format("alice", "s1") == "alice:s1"
    assert codec.parse(codec.format("alice")) == ConversationIdentity("alice", "default-session")


def test_format_rejects_actor_containing_separator():
    with pytest.raises(InvalidArgumentError):
        IdentityCodec().format("a:b", "s1")
    with pytest.raises(InvalidArgumentError):
        IdentityCodec().format("", "s1")


def test_codec_requires_single_character_separator():
    with pytest.raises(InvalidArgumentError):
        IdentityCodec(separator="::")


def test_validate_conversation_id_returns_value():
    assert validate_conversation_id("x") == "x"
    with pytest.raises(ValueError):
        validate_conversation_id("")
