"""Tests for configuration merging across defaults, file, env and overrides."""

from __future__ import annotations

import json

import pytest

from agentcore_memory.base.errors import InvalidArgumentError
from agentcore_memory.config import DEFAULTS, get_memory_config, load_repository_config
from agentcore_memory.config.env import CONFIG_FILE_ENV, ENV_MAP, ENV_PREFIX, env_overrides, parse_bool


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (*ENV_MAP.values(), CONFIG_FILE_ENV):
        monkeypatch.delenv(var, raising=False)


def test_defaults_only():
    cfg = get_memory_config(environ={})
    assert cfg == DEFAULTS


def test_env_values_read(monkeypatch):
    monkeypatch.setenv("AGENTCORE_MEMORY_ID", "mem-env")
    monkeypatch.setenv("AGENTCORE_MEMORY_PAGE_SIZE", "20")
    monkeypatch.setenv("AGENTCORE_MEMORY_IGNORE_UNKNOWN_ROLES", "yes")
    cfg = load_repository_config()
    assert cfg.memory_id == "mem-env"
    assert cfg.page_size == 20
    assert cfg.ignore_unknown_roles is True


def test_empty_env_values_skipped():
    assert env_overrides({"AGENTCORE_MEMORY_ID": "", "AGENTCORE_MEMORY_SEPARATOR": "/"}) == {"separator": "/"}


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("off", False), ("maybe", None), (None, None)])
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_yaml_file_section_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "memory.yaml"
    path.write_text(
        "agentcore:\n"
        "  memory:\n"
        "    memoryId: mem-file\n"
        "    totalEventsLimit: 50\n"
        "    page_size: 10\n"
        "    unrelated: ignored\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    monkeypatch.setenv("AGENTCORE_MEMORY_PAGE_SIZE", "30")
    cfg = load_repository_config({"total_events_limit": 5, "default_session": None})
    assert cfg.memory_id == "mem-file"
    assert cfg.page_size == 30
    assert cfg.total_events_limit == 5
    assert cfg.default_session == "default-session"
    assert cfg.effective_page_size == 5


def test_json_file_top_level_keys(tmp_path):
    path = tmp_path / "memory.json"
    path.write_text(json.dumps({"memory_id": "mem-json", "separator": "/"}), encoding="utf-8")
    cfg = load_repository_config(config_file=str(path), environ={})
    assert cfg.memory_id == "mem-json"
    assert cfg.separator == "/"


def test_missing_file_is_ignored(tmp_path):
    cfg = get_memory_config(config_file=str(tmp_path / "absent.yaml"), environ={})
    assert cfg == DEFAULTS


@pytest.mark.parametrize("content", ["- just\n- a list\n", "key: [unclosed\n"])
def test_bad_file_rejected(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        get_memory_config(config_file=str(path), environ={})


def test_missing_memory_id_rejected():
    with pytest.raises(InvalidArgumentError, match="MemoryId cannot be null or empty"):
        load_repository_config(environ={})


def test_invalid_env_value_rejected(monkeypatch):
    monkeypatch.setenv("AGENTCORE_MEMORY_ID", "m")
    monkeypatch.setenv("AGENTCORE_MEMORY_PAGE_SIZE", "0")
    with pytest.raises(InvalidArgumentError):
        load_repository_config()


def test_env_names_share_prefix():
    assert ENV_MAP["memory_id"] == "AGENTCORE_MEMORY_ID"
    assert CONFIG_FILE_ENV == "AGENTCORE_MEMORY_CONFIG_FILE"
    assert all(var.startswith(ENV_PREFIX) for var in ENV_MAP.values())
