"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /crawl     — crawl a site and return its navigation graph
    /health    — liveness check

The app keeps no per-request state on ``app.state``: every crawl builds its
own frontier, result and graph.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flowmap import __version__
from flowmap.api.routers import crawl as crawl_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Flow Mapper API",
        description=(
            "Crawls a website from a seed URL and returns a node/edge graph of "
            "its page-to-page navigation, with shared navigation and footer "
            "links filtered out."
        ),
        version=__version__,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(crawl_router.router, prefix="/crawl", tags=["crawl"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn flowmap.api.app:app --reload
app = create_app()
