"""Runtime configuration — override via environment variables."""

from __future__ import annotations

import os
from typing import Mapping, Optional

# Points the read path at a custom catalog file, e.g. while testing catalog changes.
# Override with LOCAL_CONNECTOR_CATALOG_PATH=/path/to/catalog.json
LOCAL_CATALOG_PATH_ENV = "LOCAL_CONNECTOR_CATALOG_PATH"

# Development server bind address.
HOST = os.environ.get("CONNECTORCATALOG_HOST", "127.0.0.1")
# Parsed as an int only when the server starts.
PORT = os.environ.get("CONNECTORCATALOG_PORT", "8000")


class EnvConfigs:
    """Reads configuration values from the process environment.

    Values are looked up on every call, so a fresh instance always reflects
    the current environment. Pass ``env`` to read from a fixed mapping instead.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None) -> None:
        self._env = env

    def _get(self, name: str) -> Optional[str]:
        env = os.environ if self._env is None else self._env
        value = env.get(name)
        # Empty means unset
        return value or None

    def get_local_catalog_path(self) -> Optional[str]:
        return self._get(LOCAL_CATALOG_PATH_ENV)
