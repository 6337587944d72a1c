"""agentcore_memory.config.defaults
================================

Central place for the small, stable default values of the memory repository.
They can be overridden through the external config file, environment
variables or explicit overrides (see ``agentcore_memory.config``).

This module intentionally imports nothing from the rest of the package so it
can be used from any layer without circular imports.
"""

from __future__ import annotations

# ---- Repository ----

# Session label used when a conversation id carries no explicit session.
DEFAULT_SESSION = "default-session"

# Events requested per list call.
DEFAULT_PAGE_SIZE = 100

# Separator between actor and session inside a conversation id.
DEFAULT_SEPARATOR = ":"

# Strict role handling unless explicitly relaxed.
DEFAULT_IGNORE_UNKNOWN_ROLES = False

# ---- Transport ----

# boto3 service name of the event store.
AGENTCORE_SERVICE_NAME = "bedrock-agentcore"

__all__ = [
    "DEFAULT_SESSION",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SEPARATOR",
    "DEFAULT_IGNORE_UNKNOWN_ROLES",
    "AGENTCORE_SERVICE_NAME",
]
