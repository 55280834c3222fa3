"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from terragraph import __version__
from terragraph.web.api_analysis import router as analysis_router


def create_app() -> FastAPI:
    app = FastAPI(title="terragraph", version=__version__)
    app.include_router(analysis_router)

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app
