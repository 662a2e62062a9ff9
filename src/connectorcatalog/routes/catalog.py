"""Catalog routes: report the resolved catalog paths."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from connectorcatalog.catalog_paths import CatalogPathResolver
from connectorcatalog.constants import DEFAULT_LOCAL_CONNECTOR_CATALOG
from connectorcatalog.models import CatalogPathsOut

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


def get_resolver() -> CatalogPathResolver:
    return CatalogPathResolver()


@router.get("/paths", response_model=CatalogPathsOut)
def catalog_paths(
    resolver: CatalogPathResolver = Depends(get_resolver),
) -> CatalogPathsOut:
    """Return where the connector catalog is read from and written to."""
    read_path, overridden = resolver.resolve()
    return CatalogPathsOut(
        read_path=read_path,
        write_path=resolver.resolve_write_path(),
        default_path=DEFAULT_LOCAL_CONNECTOR_CATALOG,
        overridden=overridden,
    )
