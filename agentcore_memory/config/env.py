"""agentcore_memory.config.env
===========================

Environment variable mapping for the memory repository options.

Purpose
-------
- Single source of truth for the env var name of every recognized option.
- Small coercion helpers turning raw env strings into option values.

Failure Modes
-------------
- Unset or empty variables are skipped; the caller falls back to other
  sources.
- Values are returned as raw strings except booleans; numeric validation is
  left to :class:`~agentcore_memory.base.dto.RepositoryConfig` so every source
  gets the same error messages.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = "AGENTCORE_MEMORY_"

# Option name -> environment variable
ENV_MAP: Dict[str, str] = {
    "memory_id": ENV_PREFIX + "ID",
    "total_events_limit": ENV_PREFIX + "TOTAL_EVENTS_LIMIT",
    "default_session": ENV_PREFIX + "DEFAULT_SESSION",
    "page_size": ENV_PREFIX + "PAGE_SIZE",
    "ignore_unknown_roles": ENV_PREFIX + "IGNORE_UNKNOWN_ROLES",
    "separator": ENV_PREFIX + "SEPARATOR",
}

CONFIG_FILE_ENV = ENV_PREFIX + "CONFIG_FILE"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Interpret common truthy/falsy spellings; ``None`` for anything else."""
    if value is None:
        return None
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Return option values present in the environment.

    Parameters
    ----------
    environ:
        Mapping to read from; defaults to ``os.environ``.

    Returns
    -------
    Dict[str, Any]
        Option name to value for every variable that is set and non-empty.
        Unparseable booleans are passed through unchanged so validation
        reports them.
    """
    env = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    for option, var in ENV_MAP.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        if option == "ignore_unknown_roles":
            parsed = parse_bool(raw)
            out[option] = raw if parsed is None else parsed
        else:
            out[option] = raw
    return out


__all__ = [
    "ENV_PREFIX",
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "parse_bool",
    "env_overrides",
]
