"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from connectorcatalog.config import LOCAL_CATALOG_PATH_ENV
from connectorcatalog.main import app

CUSTOM_PATH = "/custom/catalog.yaml"


@pytest.fixture()
def no_override(monkeypatch):
    """Environment with the catalog override unset."""
    monkeypatch.delenv(LOCAL_CATALOG_PATH_ENV, raising=False)


@pytest.fixture()
def override(monkeypatch):
    """Environment pointing the catalog at a custom file."""
    monkeypatch.setenv(LOCAL_CATALOG_PATH_ENV, CUSTOM_PATH)
    return CUSTOM_PATH


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
