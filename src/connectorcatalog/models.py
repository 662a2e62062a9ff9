"""Pydantic response models for the catalog API."""

from __future__ import annotations

from pydantic import BaseModel


class CatalogPathsOut(BaseModel):
    read_path: str
    write_path: str
    default_path: str
    overridden: bool
