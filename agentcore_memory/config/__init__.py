"""Unified configuration layer for the memory repository.

Goals
-----
* Centralize defaults (see ``defaults.py``).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``AGENTCORE_MEMORY_CONFIG_FILE``
    3. Environment variables (``AGENTCORE_MEMORY_ID``, ``AGENTCORE_MEMORY_PAGE_SIZE`` ...)
    4. In-code overrides passed to the helper
* Provide a single call site: ``load_repository_config(overrides)``.

External Config File
--------------------
JSON is tried first, then YAML. Options may sit at the top level or under an
``agentcore.memory`` section::

    agentcore:
      memory:
        memory_id: mem-123
        total_events_limit: 50
        ignore_unknown_roles: true

Camel-case keys (``memoryId``, ``totalEventsLimit`` ...) are accepted too.

Public API
----------
* get_memory_config(overrides: dict | None = None) -> dict
* load_repository_config(overrides: dict | None = None) -> RepositoryConfig
"""
from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import yaml

from ..base.errors import InvalidArgumentError
from .defaults import (
    DEFAULT_IGNORE_UNKNOWN_ROLES,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SEPARATOR,
    DEFAULT_SESSION,
)
from .env import CONFIG_FILE_ENV, ENV_MAP, env_overrides

if TYPE_CHECKING:
    from ..base.dto import RepositoryConfig


DEFAULTS: Dict[str, Any] = {
    "default_session": DEFAULT_SESSION,
    "page_size": DEFAULT_PAGE_SIZE,
    "ignore_unknown_roles": DEFAULT_IGNORE_UNKNOWN_ROLES,
    "separator": DEFAULT_SEPARATOR,
}

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(key: str) -> str:
    return _CAMEL.sub("_", key).replace("-", "_").lower()


def _load_external_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Read the optional config file; an unset or missing path yields ``{}``.

    Raises
    ------
    InvalidArgumentError
        When the file exists but is neither valid JSON nor valid YAML mapping.
    """
    path = path or os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise InvalidArgumentError(f"Unreadable memory config file {p}: {exc}", raw=exc) from exc
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Memory config file {p} must contain a mapping")
    agentcore = data.get("agentcore")
    if isinstance(agentcore, dict) and isinstance(agentcore.get("memory"), dict):
        data = agentcore["memory"]
    return {_snake(k): v for k, v in data.items() if _snake(k) in ENV_MAP}


def get_memory_config(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    config_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return the merged (unvalidated) option mapping.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    ``None`` override values are ignored so callers can pass optional
    arguments straight through.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config(config_file)
    cfg |= env_overrides(environ)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def load_repository_config(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    config_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> "RepositoryConfig":
    """Return a validated :class:`RepositoryConfig` from all sources.

    Raises
    ------
    InvalidArgumentError
        When the merged options are invalid (e.g. no ``memory_id``).
    """
    # Local import: base.dto imports config.defaults
    from ..base.dto import build_repository_config

    return build_repository_config(get_memory_config(overrides, config_file=config_file, environ=environ))


__all__ = [
    "DEFAULTS",
    "get_memory_config",
    "load_repository_config",
]
