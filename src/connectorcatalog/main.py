"""Connector catalog API — FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from connectorcatalog import __version__
from connectorcatalog.routes import catalog

app = FastAPI(
    title="Connector Catalog API",
    description="Reports where the local connector catalog is read from and written to.",
    version=__version__,
)

app.include_router(catalog.router)


@app.get("/", tags=["meta"])
def root() -> dict:
    return {"name": "Connector Catalog API", "version": __version__, "docs": "/docs"}


def run() -> None:
    import uvicorn

    from connectorcatalog.config import HOST, PORT
    uvicorn.run("connectorcatalog.main:app", host=HOST, port=int(PORT), reload=True)
