"""Resolve where the local connector catalog is read from and written to."""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Tuple

from connectorcatalog.config import EnvConfigs
from connectorcatalog.constants import DEFAULT_LOCAL_CONNECTOR_CATALOG

logger = logging.getLogger(__name__)


class CatalogPathSource(Protocol):
    """Anything that can report an optional custom catalog path."""

    def get_local_catalog_path(self) -> Optional[str]: ...


class CatalogPathResolver:
    """Read/write path lookup over an optional operator override.

    Without an explicit ``configs`` a new :class:`EnvConfigs` is built per
    lookup, so environment changes made while the process runs are picked up.
    """

    def __init__(self, configs: Optional[CatalogPathSource] = None) -> None:
        self._configs = configs

    def _override(self) -> Optional[str]:
        configs = self._configs if self._configs is not None else EnvConfigs()
        return configs.get_local_catalog_path() or None

    def resolve(self) -> Tuple[str, bool]:
        """Return ``(read_path, overridden)`` from a single configuration read."""
        custom = self._override()
        if custom is None:
            return DEFAULT_LOCAL_CONNECTOR_CATALOG, False
        logger.debug("Using custom connector catalog path %s", custom)
        return custom, True

    def resolve_read_path(self) -> str:
        """Return the override path if one is configured, else the default."""
        return self.resolve()[0]

    def resolve_write_path(self) -> str:
        """Return the default path, ignoring any override.

        Writes never go to the override so a custom catalog file is not
        overwritten.
        """
        return DEFAULT_LOCAL_CONNECTOR_CATALOG

    def is_overridden(self) -> bool:
        """Return True when the read path comes from the override."""
        return self.resolve()[1]


def get_local_connector_catalog_path() -> str:
    return CatalogPathResolver().resolve_read_path()


def get_local_catalog_write_path() -> str:
    return CatalogPathResolver().resolve_write_path()
