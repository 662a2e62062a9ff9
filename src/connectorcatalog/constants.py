"""Catalog constants shared across the package."""

# Relative resource path of the bundled connector catalog.
DEFAULT_LOCAL_CONNECTOR_CATALOG = "seed/local_catalog.json"
